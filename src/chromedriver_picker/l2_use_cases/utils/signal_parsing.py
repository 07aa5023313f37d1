"""Heuristics that pull a version or bitness out of browser identification data."""

from __future__ import annotations

import re
from collections.abc import Iterable

from chromedriver_picker.l1_entities.detection import BrandVersion

_CHROME_BRAND = re.compile(r'Chrom(e|ium)', re.IGNORECASE)
_CHROME_TOKEN = re.compile(r'Chrome/([0-9.]+)')
_UA_64BIT = re.compile(r'WOW64|Win64|x64', re.IGNORECASE)
_UA_32BIT = re.compile(r'Win32|i686|x86', re.IGNORECASE)


def version_from_brands(brands: Iterable[BrandVersion]) -> str | None:
    """Version of the first Chrome or Chromium entry in a brand list."""
    for entry in brands:
        if _CHROME_BRAND.search(entry.brand):
            return entry.version or None
    return None


def version_from_user_agent(user_agent: str) -> str | None:
    """Digits and dots following the first ``Chrome/`` token."""
    m = _CHROME_TOKEN.search(user_agent)
    return m.group(1) if m else None


def bitness_from_user_agent(user_agent: str) -> str | None:
    """'64' or '32' from architecture tokens. 64-bit tokens win when both appear."""
    if _UA_64BIT.search(user_agent):
        return '64'
    if _UA_32BIT.search(user_agent):
        return '32'
    return None
