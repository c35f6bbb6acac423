"""Behavior tests for config loading and precedence."""

from __future__ import annotations

import textwrap

import pytest

from delegate_matcher.config import Config
from delegate_matcher.core.settings import MatcherSettings, PatchScope


@pytest.fixture
def isolated(temp_dir, monkeypatch):
    home = temp_dir / "home"
    project = temp_dir / "project"
    home.mkdir()
    project.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    monkeypatch.delenv("DELEGATE_MATCHER_PATCH_SCOPE", raising=False)
    monkeypatch.delenv("DELEGATE_MATCHER_RESTORE", raising=False)
    return home, project


def test_defaults_without_files_or_env(isolated):
    config = Config.load()

    assert config.patch_scope == PatchScope.INSTANCE
    assert config.restore is True


def test_project_toml_overrides_global_yaml(isolated):
    home, project = isolated
    (home / ".delegate-matcher").mkdir()
    (home / ".delegate-matcher" / "config.yaml").write_text(
        textwrap.dedent(
            """
            patch_scope: class
            restore: false
            """
        )
    )
    (project / ".delegate-matcher").mkdir()
    (project / ".delegate-matcher" / "config.toml").write_text('patch_scope = "instance"\n')

    config = Config.load()

    assert config.patch_scope == PatchScope.INSTANCE
    assert config.restore is False


def test_yml_extension_is_read(isolated):
    home, _ = isolated
    (home / ".delegate-matcher").mkdir()
    (home / ".delegate-matcher" / "config.yml").write_text("patch_scope: class\n")

    assert Config.load().patch_scope == PatchScope.CLASS


def test_empty_yaml_file_is_ignored(isolated):
    home, _ = isolated
    (home / ".delegate-matcher").mkdir()
    (home / ".delegate-matcher" / "config.yaml").write_text("")

    assert Config.load() == Config()


def test_env_vars_override_files(isolated, monkeypatch):
    _, project = isolated
    (project / ".delegate-matcher").mkdir()
    (project / ".delegate-matcher" / "config.toml").write_text('patch_scope = "instance"\nrestore = true\n')
    monkeypatch.setenv("DELEGATE_MATCHER_PATCH_SCOPE", "CLASS")
    monkeypatch.setenv("DELEGATE_MATCHER_RESTORE", "no")

    config = Config.load()

    assert config.patch_scope == PatchScope.CLASS
    assert config.restore is False


def test_unknown_values_fall_back_to_defaults(isolated, monkeypatch):
    monkeypatch.setenv("DELEGATE_MATCHER_PATCH_SCOPE", "module")
    monkeypatch.setenv("DELEGATE_MATCHER_RESTORE", "maybe")

    config = Config.load()

    assert config.patch_scope == PatchScope.INSTANCE
    assert config.restore is True


def test_config_to_matcher_settings_projects_fields():
    config = Config(patch_scope=PatchScope.CLASS, restore=False)

    assert config.to_matcher_settings() == MatcherSettings(patch_scope=PatchScope.CLASS, restore=False)
