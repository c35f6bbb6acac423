"""Delivery-layer configuration loading (files + environment)."""

from __future__ import annotations

import functools
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from delegate_matcher.core.settings import MatcherSettings, PatchScope

CONFIG_DIR_NAME = ".delegate-matcher"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(slots=True)
class Config:
    """Resolved matcher config (delivery concern)."""

    patch_scope: PatchScope = PatchScope.INSTANCE
    restore: bool = True

    @classmethod
    def load(cls) -> Config:
        """Load config from files and environment variables."""
        config_data: dict[str, Any] = {}

        global_config_dir = Path.home() / CONFIG_DIR_NAME
        config_data = cls._merge_config(config_data, cls._load_config_file(global_config_dir))

        project_config_dir = Path.cwd() / CONFIG_DIR_NAME
        config_data = cls._merge_config(config_data, cls._load_config_file(project_config_dir))

        config_data = cls._apply_env_vars(config_data)
        return cls._from_dict(config_data)

    def to_matcher_settings(self) -> MatcherSettings:
        """Project delivery config into core matcher settings."""
        return MatcherSettings(patch_scope=self.patch_scope, restore=self.restore)

    @classmethod
    def _load_config_file(cls, config_dir: Path) -> dict[str, Any]:
        """Load config from a directory (TOML or YAML)."""
        toml_path = config_dir / "config.toml"
        yaml_path = config_dir / "config.yaml"
        yml_path = config_dir / "config.yml"

        if toml_path.exists():
            with open(toml_path, "rb") as f:
                return tomllib.load(f)
        if yaml_path.exists():
            with open(yaml_path) as f:
                return yaml.safe_load(f) or {}
        if yml_path.exists():
            with open(yml_path) as f:
                return yaml.safe_load(f) or {}

        return {}

    @classmethod
    def _merge_config(cls, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Shallow merge; the override wins key by key."""
        result = base.copy()
        result.update(override)
        return result

    @classmethod
    def _apply_env_vars(cls, config_data: dict[str, Any]) -> dict[str, Any]:
        """Apply DELEGATE_MATCHER_* environment variables."""
        env_mappings = {
            "DELEGATE_MATCHER_PATCH_SCOPE": "patch_scope",
            "DELEGATE_MATCHER_RESTORE": "restore",
        }

        for env_var, config_key in env_mappings.items():
            if value := os.environ.get(env_var):
                config_data[config_key] = value

        return config_data

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Config:
        """Create Config from dictionary."""
        scope_str = str(data.get("patch_scope", PatchScope.INSTANCE)).strip().lower()
        try:
            patch_scope = PatchScope(scope_str)
        except ValueError:
            patch_scope = PatchScope.INSTANCE

        return cls(
            patch_scope=patch_scope,
            restore=_parse_bool(data.get("restore"), default=True),
        )


def _parse_bool(value: Any, *, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
    return default


@functools.cache
def default_matcher_settings() -> MatcherSettings:
    """Settings for matchers built without explicit settings, loaded once per process."""
    return Config.load().to_matcher_settings()
