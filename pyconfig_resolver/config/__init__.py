# pyconfig_resolver/config/__init__.py
from __future__ import annotations

from .defaults import DefaultsProvider, defaultConfig
from .deprecation import DeprecationNotices
from .element import ConfigElement, findConfigElement, findConfigElements, getAttribute, htmlDecode
from .merge import MergePolicy, mergeConfig
from .parser import parseConfig
from .resolver import ConfigResolver, loadConfigFromElement
from .settings import ResolverSettings
from .validator import validateConfig, whitelistConfig

__all__ = [
    "ConfigElement",
    "ConfigResolver",
    "DefaultsProvider",
    "DeprecationNotices",
    "MergePolicy",
    "ResolverSettings",
    "defaultConfig",
    "findConfigElement",
    "findConfigElements",
    "getAttribute",
    "htmlDecode",
    "loadConfigFromElement",
    "mergeConfig",
    "parseConfig",
    "validateConfig",
    "whitelistConfig",
]
