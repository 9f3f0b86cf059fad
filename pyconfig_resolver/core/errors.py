# pyconfig_resolver/core/errors.py
from __future__ import annotations
from enum import Enum

__all__ = ["ErrorCode", "UserError"]



class ErrorCode(str, Enum):
    GENERIC = "PY0000"
    FETCH_ERROR = "PY0001"
    FETCH_NOT_FOUND_ERROR = "PY0404"
    BAD_CONFIG = "PY1000"



class UserError(Exception):
    """
    Error meant to be shown to the page author as-is.

    str(err) renders as "(PY1000): <message>" so the code survives
    whatever presentation layer the caller picks.
    """
    def __init__(self, errorCode: ErrorCode, message: str) -> None:
        super().__init__(f"({errorCode.value}): {message}")
        self.errorCode = errorCode
        self.message = message
