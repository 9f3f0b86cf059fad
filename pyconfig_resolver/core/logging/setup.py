# pyconfig_resolver/core/logging/setup.py
from __future__ import annotations
import logging

from .formatters import DevFormatter, JsonFormatter

__all__ = [
    "NO_PROPAGATE",
    "configureLogging",
    "getLogger",
]



# Disable propagation from chatty libraries
NO_PROPAGATE = [
    "httpcore.connection", "httpcore.http11",
    "httpx",
]



def configureLogging(*, devMode: bool = True, jsonOutput: bool = False) -> logging.Handler:
    """
    Initiate the global logging configuration.

    Dev:
      - Console pretty logs (DEBUG)
    
    Prod:
      - Console INFO
      - One-line JSON records when jsonOutput=True

    Returns the installed console handler.
    """
    rootLevel = logging.DEBUG if devMode else logging.INFO

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(rootLevel)

    for name in NO_PROPAGATE:
        logging.getLogger(name).propagate = False

    consoleHandler = logging.StreamHandler()
    consoleHandler.setLevel(rootLevel)
    consoleHandler.setFormatter(JsonFormatter() if jsonOutput else DevFormatter())
    root.addHandler(consoleHandler)

    # Per-logger tweaks (reduce noise)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return consoleHandler



def getLogger(name: str, side: str = "") -> logging.Logger:
    return logging.getLogger(f"{side}.{name}" if side else name)
