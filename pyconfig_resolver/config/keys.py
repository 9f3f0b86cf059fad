# pyconfig_resolver/config/keys.py
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Literal, TypeAlias

import fastjsonschema

__all__ = [
    "Shape",
    "STRING_KEYS", "NUMBER_KEYS", "ARRAY_KEYS",
    "RECOGNIZED_KEYS", "MERGE_KEYS", "DEPRECATED_KEYS",
    "INTERPRETER_FIELDS", "FETCH_FIELDS", "EXECUTION_THREADS",
    "matchesShape", "whitelistFields",
]



Shape: TypeAlias = Literal["string", "number", "array"]

STRING_KEYS: tuple[str, ...] = (
    "name", "description", "version", "type",
    "author_name", "author_email", "license", "execution_thread",
)
NUMBER_KEYS: tuple[str, ...] = ("schema_version",)
# "runtimes" is handled before "interpreters" so a current list in the same source replaces the legacy one.
ARRAY_KEYS: tuple[str, ...] = ("runtimes", "interpreters", "packages", "fetch", "plugins")

RECOGNIZED_KEYS: frozenset[str] = frozenset(STRING_KEYS + NUMBER_KEYS + ARRAY_KEYS)

# Legacy key -> key it is folded into
DEPRECATED_KEYS: dict[str, str] = {"runtimes": "interpreters"}

# Keys that can appear in a validated record and therefore take part in merging
MERGE_KEYS: tuple[str, ...] = tuple(
    key for key in STRING_KEYS + NUMBER_KEYS + ARRAY_KEYS if key not in DEPRECATED_KEYS
)

INTERPRETER_FIELDS: dict[str, Shape] = {"src": "string", "name": "string", "lang": "string"}
FETCH_FIELDS: dict[str, Shape] = {"from": "string", "to_folder": "string", "to_file": "string", "files": "array"}

EXECUTION_THREADS: tuple[str, ...] = ("main", "worker")

# Compiled once; fastjsonschema validators are plain stateless callables.
_SHAPE_VALIDATORS = {
    shape: fastjsonschema.compile({"type": shape})
    for shape in ("string", "number", "array")
}



def matchesShape(value: Any, shape: Shape) -> bool:
    """
    True when `value` has the declared JSON shape.
    Booleans are never numbers, and only real arrays count as arrays.
    """
    try:
        _SHAPE_VALIDATORS[shape](value)
    except fastjsonschema.JsonSchemaValueException:
        return False
    return True



def whitelistFields(entry: Any, fields: Mapping[str, Shape]) -> dict[str, Any]:
    """
    Keep only the declared sub-fields of one list entry whose value has the
    declared shape. Anything else is dropped without complaint.
    A non-mapping entry whitelists to an empty dict.
    """
    if not isinstance(entry, Mapping):
        return {}
    return {
        field: entry[field]
        for field, shape in fields.items()
        if field in entry and matchesShape(entry[field], shape)
    }
