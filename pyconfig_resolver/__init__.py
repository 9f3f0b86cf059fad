# pyconfig_resolver/__init__.py
from __future__ import annotations

from .config import ConfigElement, ConfigResolver, ResolverSettings, findConfigElement, loadConfigFromElement
from .core.errors import ErrorCode, UserError
from .version import version

__all__ = [
    "ConfigElement",
    "ConfigResolver",
    "ErrorCode",
    "ResolverSettings",
    "UserError",
    "findConfigElement",
    "loadConfigFromElement",
    "version",
]
