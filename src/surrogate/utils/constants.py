"""Character tables shared by the generators."""

from __future__ import annotations

import re
import string

__all__ = [
    "LOWERCASE",
    "ALPHANUMERIC",
    "FILLER_CHARSET",
    "INT64_MIN",
    "INT64_MAX",
    "strip_special",
]

LOWERCASE: str = string.ascii_lowercase
ALPHANUMERIC: str = string.ascii_letters + string.digits
FILLER_CHARSET: str = string.ascii_lowercase + string.digits

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

_SPECIAL_RE = re.compile(r"[^0-9A-Za-z]")


def strip_special(text: str) -> str:
    """Return ``text`` with every character outside ``[0-9A-Za-z]`` removed."""

    return _SPECIAL_RE.sub("", text)
