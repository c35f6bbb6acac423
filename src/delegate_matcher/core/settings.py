"""Core runtime settings for delegate matching."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class PatchScope(StrEnum):
    """Where the target accessor replacement is installed for instance subjects."""

    INSTANCE = "instance"  # one-off subclass for the subject only
    CLASS = "class"  # every instance of type(subject)


@dataclass(frozen=True, slots=True)
class MatcherSettings:
    """Settings consumed by DelegateMatcher."""

    patch_scope: PatchScope = PatchScope.INSTANCE
    restore: bool = True
