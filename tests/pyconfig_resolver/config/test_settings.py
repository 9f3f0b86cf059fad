# tests/pyconfig_resolver/config/test_settings.py
from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from pyconfig_resolver.config.defaults import DEFAULTS_PATH
from pyconfig_resolver.config.settings import ResolverSettings
from pyconfig_resolver.version import version


def test_defaults():
    settings = ResolverSettings()
    assert settings.toolVersion == version
    assert settings.defaultsPath == DEFAULTS_PATH
    assert settings.baseDir is None
    assert settings.baseUrl is None
    assert settings.fetchTimeoutMs == 30_000
    assert settings.mergePolicy == "truthy"


def test_unknown_field_rejected():
    with pytest.raises(pydantic.ValidationError):
        ResolverSettings.fromMapping({"retries": 3})


def test_bad_merge_policy_rejected():
    with pytest.raises(pydantic.ValidationError):
        ResolverSettings(mergePolicy="newest")  # type: ignore[arg-type]


def test_timeout_must_be_positive():
    with pytest.raises(pydantic.ValidationError):
        ResolverSettings(fetchTimeoutMs=0)


def test_settings_are_frozen():
    settings = ResolverSettings()
    with pytest.raises(pydantic.ValidationError):
        settings.mergePolicy = "present"  # type: ignore[misc]


def test_fromFile_resolves_relative_paths(tmp_path: Path):
    settingsPath = tmp_path / "resolver.json5"
    settingsPath.write_text(
        "{\n"
        "  // page assets live next to this file\n"
        '  baseDir: "site",\n'
        '  defaultsPath: "defaults.json5",\n'
        "  fetchTimeoutMs: 500,\n"
        '  mergePolicy: "present",\n'
        "}\n",
        encoding="utf-8",
    )
    settings = ResolverSettings.fromFile(settingsPath)
    assert settings.baseDir == tmp_path / "site"
    assert settings.defaultsPath == tmp_path / "defaults.json5"
    assert settings.fetchTimeoutMs == 500
    assert settings.mergePolicy == "present"


def test_fromFile_non_object_raises(tmp_path: Path):
    settingsPath = tmp_path / "resolver.json5"
    settingsPath.write_text("[]", encoding="utf-8")
    with pytest.raises(TypeError):
        ResolverSettings.fromFile(settingsPath)
