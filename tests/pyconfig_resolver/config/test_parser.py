# tests/pyconfig_resolver/config/test_parser.py
from __future__ import annotations

import pytest

from pyconfig_resolver.config.parser import parseConfig
from pyconfig_resolver.core.errors import ErrorCode, UserError


# -------- TOML --------

def test_parse_toml_default_type():
    out = parseConfig('name = "App"\npackages = ["numpy"]\n')
    assert out == {"name": "App", "packages": ["numpy"]}


def test_parse_toml_array_of_tables():
    text = (
        '[[fetch]]\n'
        'from = "https://example.com/data"\n'
        'files = ["a.csv", "b.csv"]\n'
    )
    out = parseConfig(text, "toml")
    assert out == {"fetch": [{"from": "https://example.com/data", "files": ["a.csv", "b.csv"]}]}


def test_parse_toml_rejects_json_object_before_parsing():
    text = '{"packages": ["numpy"]}'
    with pytest.raises(UserError) as excInfo:
        parseConfig(text, "toml")
    err = excInfo.value
    assert err.errorCode is ErrorCode.BAD_CONFIG
    assert text in err.message
    assert "invalid TOML" in err.message
    # Raised by the guard, not by the parser
    assert err.__cause__ is None


def test_parse_toml_guard_ignores_leading_whitespace():
    with pytest.raises(UserError):
        parseConfig('\n   \t{"name": "x"}', "toml")


def test_parse_toml_syntax_error_carries_parser_message():
    text = 'name = "unterminated'
    with pytest.raises(UserError) as excInfo:
        parseConfig(text, "toml")
    err = excInfo.value
    assert err.errorCode is ErrorCode.BAD_CONFIG
    assert text in err.message
    assert "cannot be parsed:" in err.message
    assert err.__cause__ is not None


def test_parse_empty_toml_is_empty_record():
    assert parseConfig("", "toml") == {}
    assert parseConfig("   \n", "toml") == {}


# -------- JSON --------

def test_parse_json():
    out = parseConfig('{"name": "App", "schema_version": 2}', "json")
    assert out == {"name": "App", "schema_version": 2}


def test_parse_json_error():
    text = '{"name": '
    with pytest.raises(UserError) as excInfo:
        parseConfig(text, "json")
    err = excInfo.value
    assert err.errorCode is ErrorCode.BAD_CONFIG
    assert "invalid JSON" in err.message
    assert text in err.message


def test_parse_json_top_level_must_be_object():
    with pytest.raises(UserError) as excInfo:
        parseConfig("[1, 2]", "json")
    assert "must be an object" in excInfo.value.message


# -------- Unsupported --------

def test_parse_unsupported_type():
    with pytest.raises(UserError) as excInfo:
        parseConfig("name: App", "yaml")
    err = excInfo.value
    assert err.errorCode is ErrorCode.BAD_CONFIG
    assert err.message == (
        "The type of config supplied 'yaml' is not supported, supported values are [\"toml\", \"json\"]"
    )
    assert str(err).startswith("(PY1000): ")
