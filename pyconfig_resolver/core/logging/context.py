# pyconfig_resolver/core/logging/context.py
from __future__ import annotations
from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any

__all__ = ["setLogContext", "clearLogContext", "getLogContext"]



# Describes the <py-config> currently being resolved: configSrc, configType.
_resolveContext: ContextVar[Mapping[str, Any] | None] = ContextVar("pyconfig.resolveContext", default=None)



def setLogContext(**values: Any) -> None:
    """Add `values` to the context of the current resolve call. None values are skipped."""
    merged = dict(_resolveContext.get() or {})
    merged.update((key, value) for key, value in values.items() if value is not None)
    _resolveContext.set(merged)



def clearLogContext() -> None:
    _resolveContext.set(None)



def getLogContext() -> dict[str, Any] | None:
    """A copy of the current context, or None outside a resolve call."""
    current = _resolveContext.get()
    return dict(current) if current is not None else None
