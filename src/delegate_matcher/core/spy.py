"""Spy target substituted for the real delegation target."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class SpyRecord:
    """What a spy has observed so far."""

    method_name: str
    invoked: bool = False
    arguments: tuple[Any, ...] = ()
    keyword_arguments: dict[str, Any] = field(default_factory=dict)


def _record(self: SpyTarget, *args: Any, **kwargs: Any) -> None:
    record = SpyTarget.record(self)
    record.invoked = True
    record.arguments = args
    record.keyword_arguments = kwargs


class SpyTarget:
    """Records calls to a single watched method.

    The watched method is defined on a type created for each spy, so spies
    never share it and special method names resolve as real methods. Every
    other attribute lookup raises AttributeError like any plain object.

    The watched method may shadow any public name below. Callers that must
    not be affected read the spy through the base class, e.g.
    ``SpyTarget.was_invoked(spy)``.
    """

    def __new__(cls, method_name: str) -> SpyTarget:
        spy_type = type(cls.__name__, (cls,), {method_name: _record, "__qualname__": cls.__qualname__})
        return super().__new__(spy_type)

    def __init__(self, method_name: str) -> None:
        self.__record = SpyRecord(method_name)

    def record(self) -> SpyRecord:
        return self.__record

    @property
    def method_name(self) -> str:
        return self.__record.method_name

    @property
    def invoked(self) -> bool:
        return self.__record.invoked

    @property
    def recorded_arguments(self) -> tuple[Any, ...]:
        return self.__record.arguments

    @property
    def recorded_keyword_arguments(self) -> dict[str, Any]:
        return self.__record.keyword_arguments

    def was_invoked(self) -> bool:
        """Whether the watched method has been called at least once."""
        return self.__record.invoked

    def invoked_with_arguments(self, *args: Any, **kwargs: Any) -> bool:
        """Whether the most recent call received exactly these arguments."""
        record = self.__record
        return record.arguments == args and record.keyword_arguments == kwargs

    def __repr__(self) -> str:
        return f"<SpyTarget watching {self.__record.method_name!r}>"
