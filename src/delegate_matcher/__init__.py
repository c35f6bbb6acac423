"""delegate-matcher - assert that a method delegates to another object."""

__version__ = "0.1.0"

from delegate_matcher.core.errors import (
    DelegateMatcherError,
    MissingTargetError,
    UnsupportedNegationError,
)
from delegate_matcher.core.settings import MatcherSettings, PatchScope
from delegate_matcher.core.spy import SpyTarget
from delegate_matcher.matcher import DelegateMatcher, delegate_method

__all__ = [
    "DelegateMatcher",
    "DelegateMatcherError",
    "MatcherSettings",
    "MissingTargetError",
    "PatchScope",
    "SpyTarget",
    "UnsupportedNegationError",
    "delegate_method",
]
