"""
Input cleaning: reduce arbitrary user text to the characters a RUT is made of.
"""

from __future__ import annotations

from typing import Any

# Hard cap applied to raw input before any per-character work.
MAX_INPUT_LENGTH = 50

_DIGITS = frozenset("0123456789")


def _strip_to_rut_chars(text: str) -> str:
    """Keep ASCII digits and K/k (uppercased); drop everything else."""
    out = []
    for ch in text[:MAX_INPUT_LENGTH]:
        if ch in _DIGITS:
            out.append(ch)
        elif ch == "k" or ch == "K":
            out.append("K")
    return "".join(out)


def clean_rut(value: Any) -> str:
    """
    Return the cleaned form of `value`: only '0'..'9' and 'K'.

    Non-string values clean to "". Input longer than MAX_INPUT_LENGTH is
    truncated first, so trailing garbage beyond the cap is never scanned.

    Examples:
        >>> clean_rut("12.345.678-k")
        '12345678K'
        >>> clean_rut(None)
        ''
    """
    if not isinstance(value, str):
        return ""
    return _strip_to_rut_chars(value)
