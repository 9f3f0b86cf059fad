# pyconfig_resolver/version.py
from __future__ import annotations

__all__ = ["version"]

version = "2023.03.1"
