# pyconfig_resolver/config/deprecation.py
from __future__ import annotations
import logging
from typing import Callable, TypeAlias

logger = logging.getLogger(__name__)

__all__ = ["DeprecationEmitter", "DeprecationNotices", "logDeprecation", "RUNTIMES_DEPRECATION"]

# (message, context) -> None. Context names the element that triggered it, may be "".
DeprecationEmitter: TypeAlias = Callable[[str, str], None]

RUNTIMES_DEPRECATION = (
    "The configuration option `config.runtimes` is deprecated. "
    "Please use `config.interpreters` instead."
)



def logDeprecation(message: str, context: str = "") -> None:
    if context:
        logger.warning("%s (%s)", message, context)
    else:
        logger.warning("%s", message)



class DeprecationNotices:
    """
    Collects deprecation notices for one resolve call and forwards each
    distinct message to the emitter exactly once.
    """
    def __init__(self, emitter: DeprecationEmitter | None = None) -> None:
        self._emitter = emitter or logDeprecation
        self._seen: list[str] = []

    def emit(self, message: str, context: str = "") -> None:
        if message in self._seen:
            return
        self._seen.append(message)
        self._emitter(message, context)

    def messages(self) -> list[str]:
        return list(self._seen)
