# pyconfig_resolver/config/merge.py
from __future__ import annotations
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal, TypeAlias

from pyconfig_resolver.core.utils import deepCopy
from .defaults import defaultConfig
from .keys import MERGE_KEYS, RECOGNIZED_KEYS

logger = logging.getLogger(__name__)

__all__ = ["MergePolicy", "MERGE_POLICIES", "mergeConfig", "fillUserData"]



MergePolicy: TypeAlias = Literal["truthy", "present"]
MERGE_POLICIES: tuple[str, ...] = ("truthy", "present")



def _validateMergePolicy(policy: str) -> None:
    if policy not in MERGE_POLICIES:
        raise ValueError(f"Invalid merge policy '{policy}'; allowed: {', '.join(MERGE_POLICIES)}")



def _pick(key: str, primary: Mapping[str, Any], secondary: Mapping[str, Any], policy: MergePolicy) -> tuple[bool, Any]:
    """
    Returns (found, value) for one recognized key.

      "truthy":  primary wins only with a truthy value. An empty string, zero
                 or empty list counts as unset, so the key comes from secondary
                 or is left out entirely.
      "present": primary wins whenever it has the key at all.
    """
    if key in primary and (policy == "present" or primary[key]):
        return True, primary[key]
    if key in secondary:
        return True, secondary[key]
    return False, None



def fillUserData(inputConfig: Mapping[str, Any], resultConfig: dict[str, Any]) -> dict[str, Any]:
    """Copy every unrecognized key of `inputConfig` into `resultConfig`."""
    for key, value in inputConfig.items():
        if key not in RECOGNIZED_KEYS:
            resultConfig[key] = deepCopy(value, strict=False)
    return resultConfig



def mergeConfig(
    primary: Mapping[str, Any],
    secondary: Mapping[str, Any],
    *,
    policy: MergePolicy = "truthy",
    defaultsPath: Path | str | None = None,
) -> dict[str, Any]:
    """
    Layer `primary` over `secondary`.

      - both empty: a freshly built defaults record
      - one empty: a copy of the other
      - otherwise: recognized keys per `policy`, then extra keys from
        secondary, then extra keys from primary (primary wins on clash)

    Inputs are never mutated and the result shares no containers with them.
    """
    _validateMergePolicy(policy)

    if not primary and not secondary:
        logger.debug("mergeConfig: both sides empty, using defaults")
        return defaultConfig(defaultsPath)
    if not primary:
        return deepCopy(dict(secondary), strict=False)
    if not secondary:
        return deepCopy(dict(primary), strict=False)

    merged: dict[str, Any] = {}
    for key in MERGE_KEYS:
        found, value = _pick(key, primary, secondary, policy)
        if found:
            merged[key] = deepCopy(value, strict=False)

    merged = fillUserData(secondary, merged)
    merged = fillUserData(primary, merged)
    return merged
