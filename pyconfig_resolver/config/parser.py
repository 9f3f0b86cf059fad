# pyconfig_resolver/config/parser.py
from __future__ import annotations
import json
import logging
import tomllib
from typing import Any

from pyconfig_resolver.core.errors import ErrorCode, UserError

logger = logging.getLogger(__name__)

__all__ = ["SUPPORTED_TYPES", "parseConfig"]

SUPPORTED_TYPES: tuple[str, ...] = ("toml", "json")



def _parseToml(configText: str) -> dict[str, Any]:
    # The page runtime's TOML parser is lenient enough to accept JSON objects; refuse them up front.
    if configText.strip().startswith("{"):
        raise UserError(
            ErrorCode.BAD_CONFIG,
            f"The config supplied: {configText} is an invalid TOML and cannot be parsed",
        )
    try:
        return tomllib.loads(configText)
    except tomllib.TOMLDecodeError as err:
        raise UserError(
            ErrorCode.BAD_CONFIG,
            f"The config supplied: {configText} is an invalid TOML and cannot be parsed: {err}",
        ) from err



def _parseJson(configText: str) -> dict[str, Any]:
    try:
        parsed = json.loads(configText)
    except json.JSONDecodeError as err:
        raise UserError(
            ErrorCode.BAD_CONFIG,
            f"The config supplied: {configText} is an invalid JSON and cannot be parsed: {err}",
        ) from err

    if not isinstance(parsed, dict):
        raise UserError(
            ErrorCode.BAD_CONFIG,
            f"The config supplied: {configText} is an invalid JSON and cannot be parsed: "
            f"top-level value must be an object, not '{type(parsed).__name__}'",
        )
    return parsed



def parseConfig(configText: str, configType: str = "toml") -> dict[str, Any]:
    """
    Parse raw config text in the declared format.

    Raises UserError(BAD_CONFIG) for unsupported formats, JSON routed to the
    TOML parser, and any parser failure. The message always carries the
    offending text.
    """
    if configType == "toml":
        parsed = _parseToml(configText)
    elif configType == "json":
        parsed = _parseJson(configText)
    else:
        supported = ", ".join(f'"{name}"' for name in SUPPORTED_TYPES)
        raise UserError(
            ErrorCode.BAD_CONFIG,
            f"The type of config supplied '{configType}' is not supported, supported values are [{supported}]",
        )

    logger.debug("Parsed %s config with %d top-level keys", configType, len(parsed))
    return parsed
