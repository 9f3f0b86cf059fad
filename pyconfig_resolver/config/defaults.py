# pyconfig_resolver/config/defaults.py
from __future__ import annotations
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

import json5

from pyconfig_resolver.core.utils import deepCopy
from .keys import DEPRECATED_KEYS

logger = logging.getLogger(__name__)

__all__ = ["DEFAULTS_PATH", "DefaultsProvider", "defaultConfig"]

DEFAULTS_PATH = Path(__file__).resolve().parent / "defaults" / "pyconfig.json5"



class DefaultsProvider:
    """
    Read-only provider for the built-in <py-config> defaults.

    Can be initialized either from a JSON/JSON5 file (via `path`)
    or from an in-memory mapping (via `data`).

    Example:
        DefaultsProvider(path=DEFAULTS_PATH)
        DefaultsProvider(data={"schema_version": 1, "type": "app"})

    Raises:
        ValueError: if both `data` and `path` are provided
        FileNotFoundError: if the file is missing
        TypeError: if the loaded data is not a Mapping
    """
    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        path: Path | str | None = None,
    ) -> None:
        if data is not None and path is not None:
            raise ValueError(f"{type(self).__name__}: provide either 'data' or 'path', not both")

        if data is not None:
            if not isinstance(data, Mapping):
                raise TypeError(f"{type(self).__name__}: 'data' must be a Mapping, not '{type(data).__name__}'")
            self.data: Mapping[str, Any] = data
            return

        path = Path(path) if path is not None else DEFAULTS_PATH
        if not path.is_file():
            raise FileNotFoundError(f"{type(self).__name__}: defaults file '{path}' not found")

        try:
            parsed = json5.loads(path.read_text("utf-8"))
        except ValueError as err:
            raise TypeError(f"{type(self).__name__}: failed to parse '{path}': {err}") from err

        if not isinstance(parsed, Mapping):
            raise TypeError(
                f"{type(self).__name__}: file content must be a JSON object, not '{type(parsed).__name__}'"
            )

        logger.debug("%s: loaded %d default keys from '%s'", type(self).__name__, len(parsed), path)
        self.data = cast(Mapping[str, Any], parsed)

    def get(self, key: str) -> Any | None:
        return deepCopy(self.data.get(key))

    def to_dict(self) -> dict[str, Any]:
        # Always a fresh copy; callers may hand the result out as a finished config.
        # Legacy keys never reach a finished config, even from a custom defaults file.
        return deepCopy({key: value for key, value in self.data.items() if key not in DEPRECATED_KEYS})



def defaultConfig(path: Path | str | None = None) -> dict[str, Any]:
    """Rebuild the defaults record from disk. Never returns shared state."""
    return DefaultsProvider(path=path).to_dict()
