"""L1 entity: dotted-quad browser version strings."""

from __future__ import annotations

import re

VERSION_PATTERN = re.compile(r'^\d+\.\d+\.\d+\.\d+$', re.ASCII)


def is_well_formed(text: str) -> bool:
    """True when *text* is four dot-separated integer groups with nothing around them."""
    return VERSION_PATTERN.fullmatch(text) is not None
