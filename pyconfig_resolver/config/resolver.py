# pyconfig_resolver/config/resolver.py
from __future__ import annotations
import logging
from typing import Any, Callable

from pyconfig_resolver.core.logging import clearLogContext, setLogContext
from pyconfig_resolver.core.time import nowIso
from pyconfig_resolver.http.client import readTextFromPath
from .defaults import defaultConfig
from .deprecation import DeprecationEmitter, DeprecationNotices
from .element import ConfigElement, getAttribute, htmlDecode
from .merge import mergeConfig
from .settings import ResolverSettings
from .validator import validateConfig

logger = logging.getLogger(__name__)

__all__ = ["ConfigResolver", "loadConfigFromElement"]



class ConfigResolver:
    """
    Turns a <py-config> element (or its absence) into the finished config:

        external (src) over defaults → inline content over that → pyscript stamp

    Every collaborator can be swapped out:
      - fetchText(location) -> str: reads the `src` target
      - decodeText(text) -> str: resolves HTML entities of inline content
      - deprecationEmitter(message, context): receives one-time notices
      - clock() -> str: ISO-8601 timestamp for the stamp
    """
    def __init__(
        self,
        settings: ResolverSettings | None = None,
        *,
        fetchText: Callable[[str], str] | None = None,
        decodeText: Callable[[str], str] = htmlDecode,
        deprecationEmitter: DeprecationEmitter | None = None,
        clock: Callable[[], str] = nowIso,
    ) -> None:
        self.settings = settings or ResolverSettings()
        self._fetchText = fetchText or self._readTextFromPath
        self._decodeText = decodeText
        self._deprecationEmitter = deprecationEmitter
        self._clock = clock

    def _readTextFromPath(self, location: str) -> str:
        return readTextFromPath(
            location,
            baseDir=self.settings.baseDir,
            baseUrl=self.settings.baseUrl,
            timeoutMs=self.settings.fetchTimeoutMs,
        )

    # ----- Sources -----

    def _extractFromSrc(self, el: ConfigElement, configType: str, notices: DeprecationNotices) -> dict[str, Any]:
        src = getAttribute(el, "src")
        if not src:
            return {}
        logger.info("loading %s", src)
        return validateConfig(self._fetchText(src), configType, notices=notices)

    def _extractFromInline(self, el: ConfigElement, configType: str, notices: DeprecationNotices) -> dict[str, Any]:
        if el.innerHTML == "":
            return {}
        logger.info("loading <%s> content", el.tagName)
        return validateConfig(self._decodeText(el.innerHTML), configType, notices=notices)

    # ----- Entry point -----

    def resolve(self, el: ConfigElement | None) -> dict[str, Any]:
        """
        Build the final config for `el`.

        Raises:
            UserError(BAD_CONFIG): unsupported type, unparsable text, bad execution_thread
            UserError(FETCH_*): the `src` target could not be read
        """
        notices = DeprecationNotices(self._deprecationEmitter)
        policy = self.settings.mergePolicy
        defaultsPath = self.settings.defaultsPath

        if el is None:
            srcConfig: dict[str, Any] = {}
            inlineConfig: dict[str, Any] = {}
        else:
            configType = getAttribute(el, "type") or "toml"
            setLogContext(configSrc=getAttribute(el, "src"), configType=configType)
            try:
                srcConfig = self._extractFromSrc(el, configType, notices)
                inlineConfig = self._extractFromInline(el, configType, notices)
            finally:
                clearLogContext()

        srcConfig = mergeConfig(srcConfig, defaultConfig(defaultsPath), policy=policy, defaultsPath=defaultsPath)
        result = mergeConfig(inlineConfig, srcConfig, policy=policy, defaultsPath=defaultsPath)
        result["pyscript"] = {
            "version": self.settings.toolVersion,
            "time": self._clock(),
        }
        return result



def loadConfigFromElement(el: ConfigElement | None) -> dict[str, Any]:
    """Resolve `el` with default settings."""
    return ConfigResolver().resolve(el)
