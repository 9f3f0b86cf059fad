# pyconfig_resolver/core/utils.py
from __future__ import annotations
import copy, json
from typing import TypeVar

__all__ = ["deepCopy"]

T = TypeVar("T")



def deepCopy(value: T, *, strict: bool = True) -> T:
    """
    Safely deep-copies JSON-like data.

      - strict=True (default): raises on any copy failure.
      - strict=False: falls back to a JSON roundtrip, which may coerce
        types (tuples → lists) but never shares containers with the input.
    """
    try:
        return copy.deepcopy(value)
    except Exception as err1:
        if strict:
            raise RuntimeError(f"deepCopy failed - {err1.__class__.__name__} {err1}") from err1

        try:
            return json.loads(json.dumps(value, ensure_ascii=False, allow_nan=False, default=str))
        except Exception as err2:
            raise RuntimeError(
                 "deepCopy failed via copy.deepcopy and JSON roundtrip;"
                f" copy.deepcopy error={err1.__class__.__name__}: {err1};"
                f" json.loads/dumps error={err2.__class__.__name__}: {err2}"
            ) from err2
