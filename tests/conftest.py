import sys
from typing import Callable

import pytest

FIXED_TIME = "2023-03-01T10:20:30.123Z"



def pytest_configure(config: pytest.Config) -> None:
    if sys.flags.optimize:
        raise RuntimeError("Assertions are disabled (optimize > 0)")



@pytest.fixture
def fixedTime() -> str:
    return FIXED_TIME



@pytest.fixture
def fixedClock(fixedTime: str) -> Callable[[], str]:
    return lambda: fixedTime



@pytest.fixture
def noticeLog() -> list[tuple[str, str]]:
    """Collects (message, context) pairs handed to a deprecation emitter."""
    return []



@pytest.fixture
def collectNotice(noticeLog: list[tuple[str, str]]) -> Callable[[str, str], None]:
    def _emit(message: str, context: str) -> None:
        noticeLog.append((message, context))
    return _emit
