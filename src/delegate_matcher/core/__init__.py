"""Core matching components."""

from delegate_matcher.core.errors import (
    DelegateMatcherError,
    MissingTargetError,
    UnsupportedNegationError,
)
from delegate_matcher.core.patching import install_target, is_type_like
from delegate_matcher.core.settings import MatcherSettings, PatchScope
from delegate_matcher.core.specification import DelegationSpec
from delegate_matcher.core.spy import SpyTarget

__all__ = [
    # Errors
    "DelegateMatcherError",
    "MissingTargetError",
    "UnsupportedNegationError",
    # Interception
    "install_target",
    "is_type_like",
    # Settings
    "MatcherSettings",
    "PatchScope",
    # Data model
    "DelegationSpec",
    "SpyTarget",
]
