"""
Value types shared by the RUT pipeline.

Everything here is immutable: a value is built, handed to the next stage and
thrown away within a single call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict


class RutError(str, Enum):
    """Reason codes reported by the validator, in the order they are checked."""
    REQUIRED = "RUT is required"
    TOO_SHORT = "RUT is too short"
    TOO_LONG = "RUT is too long"
    INVALID_FORMAT = "Invalid RUT format"
    INVALID_VERIFICATION_DIGIT = "Invalid verification digit"


@dataclass(frozen=True)
class ParsedRut:
    """
    A cleaned RUT split into its two parts.

    Attributes:
        body: Numeric part, non-empty, ASCII digits only.
        verification_digit: Trailing check character ('0'..'9' or 'K').
    """
    body: str
    verification_digit: str

    def __str__(self) -> str:
        return f"{self.body}{self.verification_digit}"


class ValidationResult(BaseModel):
    """Verdict of `validate_rut`. `rut` is set when valid, `error` otherwise."""
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    rut: Optional[str] = None
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


class FormatOptions(BaseModel):
    """Rendering switches for the formatter."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    dots: bool = True       # 12.345.678-5 vs 12345678-5
    dash: bool = True       # 12.345.678-5 vs 12.345.6785
    uppercase: bool = True  # 10.000.013-K vs 10.000.013-k


OptionsLike = Union[FormatOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None) -> FormatOptions:
    """
    Turn whatever the caller passed into a complete `FormatOptions`.

    A mapping may carry any subset of the fields; each missing or None field
    falls back to its default. Unknown keys raise pydantic's ValidationError.
    """
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    return FormatOptions(**{k: v for k, v in options.items() if v is not None})
