"""
RUT validation with a diagnostic reason.

Checks run in a fixed order and stop at the first failure, so the reported
reason is deterministic:

    required -> too short -> too long -> format -> verification digit
"""

from __future__ import annotations

import logging
from typing import Any

from . import checksum
from .clean import clean_rut
from .models import RutError, ValidationResult

logger = logging.getLogger(__name__)

# Shortest RUT is one body digit plus the check character.
MIN_RUT_LENGTH = 2
# Bodies never exceed 8 digits in practice, plus the check character.
MAX_RUT_LENGTH = 9


def _reject(reason: RutError) -> ValidationResult:
    logger.debug("RUT rejected: %s", reason.value)
    return ValidationResult(is_valid=False, error=reason.value)


def validate_rut(rut: Any) -> ValidationResult:
    """
    Validate a raw RUT string (dots, dashes and spaces allowed).

    Returns:
        ValidationResult(is_valid=True, rut=<cleaned>) on success, otherwise
        ValidationResult(is_valid=False, error=<reason>). Never raises.

    Examples:
        >>> validate_rut("12.345.678-5").rut
        '123456785'
        >>> validate_rut("12345678-0").error
        'Invalid verification digit'
    """
    if not rut or not isinstance(rut, str):
        return _reject(RutError.REQUIRED)

    cleaned = clean_rut(rut)

    if len(cleaned) < MIN_RUT_LENGTH:
        return _reject(RutError.TOO_SHORT)
    if len(cleaned) > MAX_RUT_LENGTH:
        return _reject(RutError.TOO_LONG)

    parsed = checksum.parse_rut(cleaned)
    if parsed is None:
        return _reject(RutError.INVALID_FORMAT)

    if checksum.calculate_verification_digit(parsed.body) != parsed.verification_digit:
        return _reject(RutError.INVALID_VERIFICATION_DIGIT)

    return ValidationResult(is_valid=True, rut=cleaned)


def is_valid_rut(rut: Any) -> bool:
    """Boolean shorthand for `validate_rut(rut).is_valid`."""
    return validate_rut(rut).is_valid
