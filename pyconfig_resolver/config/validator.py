# pyconfig_resolver/config/validator.py
from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from pyconfig_resolver.core.errors import ErrorCode, UserError
from .deprecation import DeprecationNotices, RUNTIMES_DEPRECATION
from .keys import (
    ARRAY_KEYS, NUMBER_KEYS, STRING_KEYS, RECOGNIZED_KEYS,
    EXECUTION_THREADS, FETCH_FIELDS, INTERPRETER_FIELDS,
    Shape, matchesShape, whitelistFields,
)
from .parser import parseConfig

logger = logging.getLogger(__name__)

__all__ = ["KeyDescriptor", "KEY_TABLE", "whitelistConfig", "validateConfig"]



# (descriptor, value, out, notices) -> None; writes its result into `out`.
Transform = Callable[["KeyDescriptor", Any, dict[str, Any], DeprecationNotices], None]



@dataclass(frozen=True)
class KeyDescriptor:
    """One recognized top-level key: expected shape plus how to carry it over."""
    name: str
    shape: Shape
    transform: Transform



def _copyValue(desc: KeyDescriptor, value: Any, out: dict[str, Any], notices: DeprecationNotices) -> None:
    out[desc.name] = value



def _interpreters(desc: KeyDescriptor, value: Any, out: dict[str, Any], notices: DeprecationNotices) -> None:
    out["interpreters"] = [whitelistFields(entry, INTERPRETER_FIELDS) for entry in value]



def _runtimes(desc: KeyDescriptor, value: Any, out: dict[str, Any], notices: DeprecationNotices) -> None:
    notices.emit(RUNTIMES_DEPRECATION, "")
    _interpreters(desc, value, out, notices)



def _fetch(desc: KeyDescriptor, value: Any, out: dict[str, Any], notices: DeprecationNotices) -> None:
    out[desc.name] = [whitelistFields(entry, FETCH_FIELDS) for entry in value]



def _executionThread(desc: KeyDescriptor, value: Any, out: dict[str, Any], notices: DeprecationNotices) -> None:
    if value not in EXECUTION_THREADS:
        raise UserError(
            ErrorCode.BAD_CONFIG,
            f'"{value}" is not a valid value for the property "execution_thread". '
            'The only valid values are "main" and "worker"',
        )
    out[desc.name] = value



_SPECIAL: dict[str, Transform] = {
    "interpreters": _interpreters,
    "runtimes": _runtimes,
    "fetch": _fetch,
    "execution_thread": _executionThread,
}

def _buildTable() -> tuple[KeyDescriptor, ...]:
    table: list[KeyDescriptor] = []
    for shape, keys in (("string", STRING_KEYS), ("number", NUMBER_KEYS), ("array", ARRAY_KEYS)):
        for key in keys:
            table.append(KeyDescriptor(name=key, shape=shape, transform=_SPECIAL.get(key, _copyValue)))
    return tuple(table)

KEY_TABLE: tuple[KeyDescriptor, ...] = _buildTable()



def whitelistConfig(config: Mapping[str, Any], *, notices: DeprecationNotices | None = None) -> dict[str, Any]:
    """
    Type-directed filter over a parsed config.

      - recognized keys are kept only when their value has the declared shape
      - list entries of `interpreters`/`runtimes`/`fetch` keep only their declared sub-fields
      - `runtimes` is folded into `interpreters` and reported as deprecated;
        an `interpreters` list in the same config replaces it
      - `execution_thread` outside "main"/"worker" raises UserError(BAD_CONFIG)
      - unrecognized keys are copied through verbatim
    """
    if notices is None:
        notices = DeprecationNotices()

    finalConfig: dict[str, Any] = {}
    for desc in KEY_TABLE:
        if desc.name not in config:
            continue
        value = config[desc.name]
        if not matchesShape(value, desc.shape):
            logger.debug("Dropping '%s': expected %s, got '%s'", desc.name, desc.shape, type(value).__name__)
            continue
        desc.transform(desc, value, finalConfig, notices)

    # Extra keys are left for plugins to read.
    for key, value in config.items():
        if key not in RECOGNIZED_KEYS:
            finalConfig[key] = value

    return finalConfig



def validateConfig(
    configText: str,
    configType: str = "toml",
    *,
    notices: DeprecationNotices | None = None,
) -> dict[str, Any]:
    """Parse `configText` as `configType` and whitelist the result."""
    return whitelistConfig(parseConfig(configText, configType), notices=notices)
