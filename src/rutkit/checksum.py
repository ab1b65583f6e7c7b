"""
Module 11 check digit and structural parsing.

Why this file exists
--------------------
A RUT is a numeric body followed by one check character. The check character
is derived from the body with the "Module 11" weighted sum, which rejects the
vast majority of mistyped numbers (single wrong digit, most transpositions).

Design principles
-----------------
- **Pure functions**: no state, trivially re-entrant.
- **Shape before math**: `parse_rut` decides whether a string *looks* like a
  RUT; only then is the checksum computed.
"""

from __future__ import annotations

from typing import Optional

from .models import ParsedRut

# Weights applied right to left, restarting at 2 after 7.
_WEIGHTS = (2, 3, 4, 5, 6, 7)

_DIGITS = frozenset("0123456789")
_CHECK_CHARS = _DIGITS | {"K"}


def _is_digits(s: str) -> bool:
    # str.isdigit() accepts non-ASCII digits and superscripts; we only want 0-9.
    return bool(s) and all(ch in _DIGITS for ch in s)


def calculate_verification_digit(body: str) -> str:
    """
    Compute the Module 11 check character for a RUT body.

    Steps:
      1) Walk the digits from right to left.
      2) Multiply each by the next weight in 2,3,4,5,6,7,2,3,... and sum.
      3) result = 11 - (sum mod 11).
      4) 11 -> '0', 10 -> 'K', anything else is its own digit.

    Args:
        body: Numeric body, non-empty, ASCII digits only.

    Returns:
        One of '0'..'9' or 'K'.

    Raises:
        ValueError: if `body` is empty or contains a non-digit.
    """
    if not _is_digits(body):
        raise ValueError(f"RUT body must be a non-empty string of digits, got {body!r}")

    total = 0
    for i, ch in enumerate(reversed(body)):
        total += (ord(ch) - 48) * _WEIGHTS[i % len(_WEIGHTS)]  # '0' -> 48

    result = 11 - (total % 11)
    if result == 11:
        return "0"
    if result == 10:
        return "K"
    return str(result)


def parse_rut(cleaned: str) -> Optional[ParsedRut]:
    """
    Split a cleaned RUT into body and check character.

    Only the shape is checked: at least two characters, an all-digit body and
    a last character in 0-9/K. The checksum is *not* verified here.

    Returns:
        A ParsedRut, or None when the string does not have RUT shape.
    """
    if len(cleaned) < 2:
        return None

    body, verification_digit = cleaned[:-1], cleaned[-1]
    if not _is_digits(body):
        return None
    if verification_digit not in _CHECK_CHARS:
        return None

    return ParsedRut(body=body, verification_digit=verification_digit)
