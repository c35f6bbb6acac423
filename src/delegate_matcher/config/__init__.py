"""Config loading for delegate matchers."""

from delegate_matcher.config.runtime import Config, default_matcher_settings

__all__ = ["Config", "default_matcher_settings"]
