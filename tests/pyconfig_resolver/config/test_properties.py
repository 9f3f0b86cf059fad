# tests/pyconfig_resolver/config/test_properties.py
from __future__ import annotations

import json
import string
from typing import Any

from hypothesis import given, settings, strategies as st

from pyconfig_resolver.config.element import ConfigElement
from pyconfig_resolver.config.keys import RECOGNIZED_KEYS
from pyconfig_resolver.config.merge import mergeConfig
from pyconfig_resolver.config.resolver import ConfigResolver
from pyconfig_resolver.config.validator import validateConfig


# ----------------------------
# Strategies
# ----------------------------

_text = st.text(alphabet=string.ascii_letters + string.digits + " -_./:", max_size=16)
_ints = st.integers(min_value=-(2**31), max_value=2**31)

_interpreter = st.fixed_dictionaries({}, optional={"src": _text, "name": _text, "lang": _text})
_fetchEntry = st.fixed_dictionaries(
    {}, optional={"from": _text, "to_folder": _text, "to_file": _text, "files": st.lists(_text, max_size=3)}
)

_recognized = st.fixed_dictionaries(
    {},
    optional={
        "name": _text,
        "description": _text,
        "license": _text,
        "schema_version": _ints,
        "execution_thread": st.sampled_from(["main", "worker"]),
        "packages": st.lists(_text, max_size=3),
        "plugins": st.lists(_text, max_size=3),
        "interpreters": st.lists(_interpreter, min_size=1, max_size=2),
        "fetch": st.lists(_fetchEntry, min_size=1, max_size=2),
    },
)

_customKey = st.text(alphabet=string.ascii_lowercase + "_", min_size=1, max_size=12).filter(
    lambda key: key not in RECOGNIZED_KEYS and key != "pyscript"
)
_customValue = st.one_of(_text, _ints, st.booleans(), st.lists(_ints, max_size=3))
_custom = st.dictionaries(_customKey, _customValue, min_size=1, max_size=4)


# ----------------------------
# Minimal TOML writer for the shapes above
# ----------------------------

def _tomlValue(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, str)):
        return json.dumps(value)
    if isinstance(value, list):
        return "[" + ", ".join(_tomlValue(item) for item in value) + "]"
    raise TypeError(type(value))


def _toToml(config: dict[str, Any]) -> str:
    lines: list[str] = []
    tables: list[tuple[str, dict[str, Any]]] = []
    for key, value in config.items():
        if isinstance(value, list) and value and all(isinstance(item, dict) for item in value):
            tables.extend((key, item) for item in value)
        else:
            lines.append(f"{key} = {_tomlValue(value)}")
    for key, item in tables:
        lines.append(f"[[{key}]]")
        lines.extend(f'"{field}" = {_tomlValue(value)}' for field, value in item.items())
    return "\n".join(lines) + "\n"


# ----------------------------
# Properties
# ----------------------------

@settings(max_examples=75)
@given(_recognized)
def test_toml_and_json_validate_alike(config):
    fromJson = validateConfig(json.dumps(config), "json")
    fromToml = validateConfig(_toToml(config), "toml")
    assert fromJson == fromToml == config


@settings(max_examples=75)
@given(st.one_of(_recognized, _custom).filter(bool))
def test_merge_with_itself_is_identity(config):
    assert mergeConfig(config, config) == config


@settings(max_examples=50)
@given(_custom)
def test_custom_keys_pass_through_end_to_end(custom):
    resolver = ConfigResolver(fetchText=lambda location: "", clock=lambda: "t")
    out = resolver.resolve(ConfigElement(innerHTML=json.dumps(custom), attributes={"type": "json"}))
    for key, value in custom.items():
        assert out[key] == value


@settings(max_examples=50)
@given(st.lists(_interpreter, max_size=3))
def test_runtimes_never_survive(runtimes):
    notices: list[str] = []
    resolver = ConfigResolver(
        fetchText=lambda location: "",
        clock=lambda: "t",
        deprecationEmitter=lambda message, context: notices.append(message),
    )
    out = resolver.resolve(ConfigElement(innerHTML=json.dumps({"runtimes": runtimes}), attributes={"type": "json"}))
    assert "runtimes" not in out
    assert len(notices) == 1
    if runtimes:
        assert out["interpreters"] == runtimes
