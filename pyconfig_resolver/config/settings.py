# pyconfig_resolver/config/settings.py
from __future__ import annotations
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import json5
from pydantic import BaseModel, ConfigDict, Field

from pyconfig_resolver.version import version as _toolVersion
from .defaults import DEFAULTS_PATH

__all__ = ["ResolverSettings"]



class ResolverSettings(BaseModel):
    """How a ConfigResolver reaches its sources and combines them."""
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    toolVersion: str = _toolVersion          # Stamped as pyscript.version
    defaultsPath: Path = DEFAULTS_PATH       # JSON5 file with the built-in defaults
    baseDir: Path | None = None              # Relative `src` paths are read from here
    baseUrl: str | None = None               # ...or joined onto this URL when set
    fetchTimeoutMs: int = Field(default=30_000, gt=0)
    mergePolicy: Literal["truthy", "present"] = "truthy"

    @classmethod
    def fromMapping(cls, data: Mapping[str, Any]) -> "ResolverSettings":
        return cls.model_validate(dict(data))

    @classmethod
    def fromFile(cls, path: Path | str) -> "ResolverSettings":
        """
        Load settings from a JSON/JSON5 file. Relative `defaultsPath` and
        `baseDir` values are taken relative to the file itself.
        """
        path = Path(path)
        parsed = json5.loads(path.read_text(encoding="utf-8"))
        if not isinstance(parsed, Mapping):
            raise TypeError(f"{cls.__name__}: file content must be a JSON object, not '{type(parsed).__name__}'")

        data = dict(parsed)
        for key in ("defaultsPath", "baseDir"):
            value = data.get(key)
            if isinstance(value, str) and not Path(value).is_absolute():
                data[key] = str(path.parent / value)
        return cls.fromMapping(data)
