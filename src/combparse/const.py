"""
General use constants and character classes.
"""

from __future__ import annotations
from typing import Final

import unicodedata

SPACE_CATEGORIES: Final[frozenset[str]] = frozenset({"Zs", "Zl", "Zp"})
"""Unicode space separators. Tabs and line breaks are control characters, so they aren't included."""
PHONE_TERMINATOR: Final[str] = "#"
RECORD_SEPARATOR: Final[str] = "\n"


def is_space(c: str) -> bool:
    return unicodedata.category(c) in SPACE_CATEGORIES
