"""Delegation specification built by the matcher's fluent interface."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DelegationSpec(BaseModel):
    """Expected delegation: which method forwards, to whom, and how."""

    model_config = ConfigDict(frozen=True)

    delegating_method: str = Field(description="Method invoked on the subject")
    target_accessor: str | None = Field(
        default=None, description="Method or attribute on the subject that yields the target"
    )
    alias_method: str | None = Field(
        default=None, description="Method expected on the target (default: delegating_method)"
    )
    arguments: tuple[Any, ...] = Field(
        default=(), description="Positional arguments the target is expected to receive"
    )
    keyword_arguments: dict[str, Any] = Field(
        default_factory=dict, description="Keyword arguments the target is expected to receive"
    )

    @field_validator("delegating_method", "target_accessor", "alias_method")
    @classmethod
    def _check_identifier(cls, value: str | None) -> str | None:
        if value is not None and not value.isidentifier():
            raise ValueError(f"{value!r} is not a valid method name")
        return value

    @property
    def method_on_target(self) -> str:
        """Name the spy watches on the target."""
        return self.alias_method or self.delegating_method

    @property
    def has_arguments(self) -> bool:
        return bool(self.arguments or self.keyword_arguments)

    def replace(self, **changes: Any) -> DelegationSpec:
        """Return a validated copy with the given fields changed."""
        return DelegationSpec(**{**dict(self), **changes})

    def format_arguments(self) -> str:
        """Render the expected arguments like a call signature."""
        return format_call_arguments(self.arguments, self.keyword_arguments)


def format_call_arguments(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    parts = [repr(arg) for arg in args]
    parts.extend(f"{key}={value!r}" for key, value in kwargs.items())
    if len(parts) == 1 and args:
        return f"({parts[0]},)"
    return f"({', '.join(parts)})"
