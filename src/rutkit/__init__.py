"""Validate, parse and format Chilean RUT numbers."""

from .checksum import calculate_verification_digit, parse_rut
from .clean import MAX_INPUT_LENGTH, clean_rut
from .format import format_rut, format_rut_partial, group_thousands
from .models import FormatOptions, ParsedRut, RutError, ValidationResult
from .validate import is_valid_rut, validate_rut

__version__ = "0.1.0"

__all__ = [
    "clean_rut",
    "calculate_verification_digit",
    "parse_rut",
    "validate_rut",
    "is_valid_rut",
    "format_rut",
    "format_rut_partial",
    "group_thousands",
    "FormatOptions",
    "ParsedRut",
    "RutError",
    "ValidationResult",
    "MAX_INPUT_LENGTH",
]
