"""
Rendering of RUTs for display.

Two entry points share the same body grouping:

- `format_rut`: strict. Renders only identifiers that pass shape and checksum;
  anything else renders as "".
- `format_rut_partial`: lenient. Mirrors what a user has typed so far, without
  judging the check digit. Meant for input fields that reformat on keystroke.
"""

from __future__ import annotations

import logging
from typing import Any, List

from . import checksum
from .clean import clean_rut
from .models import OptionsLike, resolve_options

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_CHECK_CHARS = _DIGITS | {"K"}


def group_thousands(body: str, sep: str = ".") -> str:
    """
    Insert `sep` every three digits counting from the right of each digit run.

    Non-digit characters (a 'K' typed mid-body) stay in place and end a run.
    A separator goes before any digit that has a positive multiple of three
    digits left in its run, except at the very start of the string.

        >>> group_thousands("12345678")
        '12.345.678'
        >>> group_thousands("123")
        '123'
        >>> group_thousands("1234K567")
        '1.234K.567'
    """
    out: List[str] = []
    i = 0
    while i < len(body):
        if body[i] not in _DIGITS:
            out.append(body[i])
            i += 1
            continue
        end = i
        while end < len(body) and body[end] in _DIGITS:
            end += 1
        for j in range(i, end):
            if j > 0 and (end - j) % 3 == 0:
                out.append(sep)
            out.append(body[j])
        i = end
    return "".join(out)


def _render(body: str, dv: str, dots: bool, dash: bool, uppercase: bool) -> str:
    shown_body = group_thousands(body) if dots and body else body
    if not dv:
        return shown_body
    if not uppercase:
        dv = dv.lower()
    return f"{shown_body}{'-' if dash else ''}{dv}"


def format_rut(rut: Any, options: OptionsLike = None) -> str:
    """
    Format a valid RUT, by default as 12.345.678-5.

    Args:
        rut: Raw RUT (may include dots, dashes, spaces).
        options: FormatOptions or a mapping with any of `dots`, `dash`,
            `uppercase`; missing fields use their defaults.

    Returns:
        The rendering, or "" when the input is malformed or its check digit
        does not match.
    """
    opts = resolve_options(options)
    parsed = checksum.parse_rut(clean_rut(rut))
    if parsed is None:
        logger.debug("format_rut: input does not have RUT shape")
        return ""

    if checksum.calculate_verification_digit(parsed.body) != parsed.verification_digit:
        logger.debug("format_rut: verification digit mismatch")
        return ""

    return _render(parsed.body, parsed.verification_digit, opts.dots, opts.dash, opts.uppercase)


def format_rut_partial(rut: Any, options: OptionsLike = None) -> str:
    """
    Best-effort formatting of an incomplete RUT (no checksum validation).

    With more than one cleaned character the last one is taken as a tentative
    check digit:

        >>> format_rut_partial("12345")
        '1.234-5'
        >>> format_rut_partial("1")
        '1'
    """
    opts = resolve_options(options)
    cleaned = clean_rut(rut)
    if not cleaned:
        return ""

    body, dv = cleaned, ""
    if len(cleaned) > 1 and cleaned[-1] in _CHECK_CHARS:
        body, dv = cleaned[:-1], cleaned[-1]

    return _render(body, dv, opts.dots, opts.dash, opts.uppercase)
