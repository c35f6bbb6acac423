"""Matcher asserting that a method delegates to a method on another object."""

from __future__ import annotations

import inspect
import logging
from enum import StrEnum
from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.core.isnot import IsNot
from hamcrest.core.description import Description

from delegate_matcher.core.errors import MissingTargetError, UnsupportedNegationError
from delegate_matcher.core.patching import install_target, is_type_like
from delegate_matcher.core.settings import MatcherSettings
from delegate_matcher.core.specification import DelegationSpec, format_call_arguments
from delegate_matcher.core.spy import SpyTarget

logger = logging.getLogger(__name__)


class Outcome(StrEnum):
    """Result of the most recent evaluation."""

    PENDING = "pending"
    MATCHED = "matched"
    MISSING_METHOD = "missing_method"
    NOT_INVOKED = "not_invoked"
    WRONG_ARGUMENTS = "wrong_arguments"


class DelegateMatcher(BaseMatcher[Any]):
    """Matches subjects whose delegating method forwards to the target accessor.

    Usage:
        assert_that(post_office, delegate_method("deliver_mail").to("mailman"))
        assert_that(
            post_office,
            delegate_method("deliver_mail")
            .to("mailman")
            .as_("deliver_with_haste")
            .with_arguments("221B Baker St.", hastily=True),
        )
    """

    def __init__(self, delegating_method: str, settings: MatcherSettings | None = None) -> None:
        if settings is None:
            from delegate_matcher.config import default_matcher_settings

            settings = default_matcher_settings()
        self.settings = settings
        self.spec = DelegationSpec(delegating_method=delegating_method)
        self.spy: SpyTarget | None = None
        self.subject: Any = None
        self.outcome = Outcome.PENDING
        self._missing_method_error: AttributeError | None = None

    # --- Builder ---

    def to(self, target_accessor: str) -> DelegateMatcher:
        """Set the subject method or attribute expected to yield the delegation target."""
        self.spec = self.spec.replace(target_accessor=target_accessor)
        return self

    def as_(self, alias_method: str) -> DelegateMatcher:
        """Expect the target to receive the call under a different method name."""
        self.spec = self.spec.replace(alias_method=alias_method)
        return self

    def with_arguments(self, *args: Any, **kwargs: Any) -> DelegateMatcher:
        """Expect the target to receive exactly these arguments."""
        self.spec = self.spec.replace(arguments=args, keyword_arguments=kwargs)
        return self

    # --- Evaluation ---

    def matches(self, item: Any, mismatch_description: Description | None = None) -> bool:
        if _called_by_negation(inspect.currentframe()):
            raise UnsupportedNegationError()
        return super().matches(item, mismatch_description)

    def _matches(self, item: Any) -> bool:
        spec = self.spec
        if spec.target_accessor is None:
            raise MissingTargetError()

        self.subject = item
        self._missing_method_error = None
        self.spy = spy = SpyTarget(spec.method_on_target)

        with install_target(
            item,
            spec.target_accessor,
            spy,
            scope=self.settings.patch_scope,
            restore=self.settings.restore,
        ):
            try:
                getattr(item, spec.delegating_method)(*spec.arguments, **spec.keyword_arguments)
            except AttributeError as e:
                logger.debug("Delegation of %s failed with AttributeError: %s", spec.delegating_method, e)
                self._missing_method_error = e
                self.outcome = Outcome.MISSING_METHOD
                return False

        if not SpyTarget.was_invoked(spy):
            self.outcome = Outcome.NOT_INVOKED
        elif not SpyTarget.invoked_with_arguments(spy, *spec.arguments, **spec.keyword_arguments):
            self.outcome = Outcome.WRONG_ARGUMENTS
        else:
            self.outcome = Outcome.MATCHED
        return self.outcome is Outcome.MATCHED

    def does_not_match(self, item: Any) -> bool:
        """Negated form; always raises because "did not delegate" is ambiguous."""
        raise UnsupportedNegationError()

    # --- Messages ---

    def description(self) -> str:
        message = f"delegate method {self.spec.delegating_method} to {self.spec.target_accessor}"
        return self._add_clarifications_to(message)

    def failure_message(self) -> str:
        message = (
            f"Expected {self._qualified(self.spec.delegating_method)} "
            f"to delegate to {self._qualified(self.spec.target_accessor)}"
        )
        return self._add_clarifications_to(message)

    def describe_to(self, description: Description) -> None:
        description.append_text(self.description())

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        spec = self.spec
        delegating = self._qualified(spec.delegating_method)
        target = self._qualified(spec.target_accessor)

        if self.outcome is Outcome.MISSING_METHOD:
            mismatch_description.append_text(
                f"calling {delegating} raised AttributeError: {self._missing_method_error}"
            )
        elif self.outcome is Outcome.NOT_INVOKED:
            mismatch_description.append_text(
                f"{delegating} never called {spec.method_on_target} on {target}"
            )
        elif self.outcome is Outcome.WRONG_ARGUMENTS and self.spy is not None:
            record = SpyTarget.record(self.spy)
            received = format_call_arguments(record.arguments, record.keyword_arguments)
            mismatch_description.append_text(
                f"{delegating} called {spec.method_on_target} on {target} with arguments: {received}"
            )
        else:
            mismatch_description.append_text(self.failure_message())

    def _add_clarifications_to(self, message: str) -> str:
        if self.spec.has_arguments:
            message += f" with arguments: {self.spec.format_arguments()}"
        if self.spec.alias_method:
            message += f" as {self.spec.alias_method}"
        return message

    def _qualified(self, method: str | None) -> str:
        if self.subject is None:
            return str(method)
        if is_type_like(self.subject):
            return f"{self.subject.__name__}.{method}"
        return f"{type(self.subject).__name__}#{method}"


def _called_by_negation(frame: Any) -> bool:
    """Whether the caller of `frame` is hamcrest's is_not / not_ wrapper."""
    try:
        caller = frame.f_back if frame is not None else None
        return caller is not None and isinstance(caller.f_locals.get("self"), IsNot)
    finally:
        del frame


def delegate_method(delegating_method: str, *, settings: MatcherSettings | None = None) -> DelegateMatcher:
    """Build a matcher asserting that `delegating_method` forwards to a target.

    Finish the configuration with `.to(accessor)` before matching.
    """
    return DelegateMatcher(delegating_method, settings=settings)
