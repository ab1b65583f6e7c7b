import random
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rutkit import (
    FormatOptions,
    calculate_verification_digit,
    clean_rut,
    format_rut,
    format_rut_partial,
    group_thousands,
    validate_rut,
)


class TestGroupThousands:

    def test_groups_from_the_right(self):
        assert group_thousands("12345678") == "12.345.678"
        assert group_thousands("1234567") == "1.234.567"
        assert group_thousands("123456") == "123.456"

    def test_short_bodies_unchanged(self):
        assert group_thousands("1") == "1"
        assert group_thousands("123") == "123"
        assert group_thousands("") == ""

    def test_k_splits_digit_runs(self):
        assert group_thousands("12K34") == "12K34"
        assert group_thousands("1234K567") == "1.234K.567"
        assert group_thousands("K123") == "K.123"
        assert group_thousands("KK") == "KK"


class TestFormatRut:

    def test_defaults(self):
        assert format_rut("123456785") == "12.345.678-5"
        assert format_rut("10000013K") == "10.000.013-K"

    def test_already_formatted(self):
        assert format_rut("12.345.678-5") == "12.345.678-5"

    def test_without_dots(self):
        assert format_rut("123456785", {"dots": False}) == "12345678-5"

    def test_without_dash(self):
        assert format_rut("123456785", {"dash": False}) == "12.345.6785"

    def test_lowercase_k(self):
        assert format_rut("10000013K", {"uppercase": False}) == "10.000.013-k"

    def test_uppercase_false_leaves_digits_alone(self):
        assert format_rut("123456785", {"uppercase": False}) == "12.345.678-5"

    def test_no_dots_no_dash(self):
        assert format_rut("123456785", FormatOptions(dots=False, dash=False)) == "123456785"

    def test_invalid_input(self):
        assert format_rut("12345678-0") == ""
        assert format_rut("") == ""
        assert format_rut("invalid") == ""
        assert format_rut(None) == ""

    def test_malformed_shape_skips_checksum(self):
        with patch("rutkit.checksum.calculate_verification_digit") as calc:
            assert format_rut("1K2-3") == ""
        calc.assert_not_called()

    def test_none_option_uses_default(self):
        assert format_rut("123456785", {"dots": None}) == "12.345.678-5"
        assert format_rut("10000013K", {"dots": None, "uppercase": False}) == "10.000.013-k"

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            format_rut("123456785", {"spaces": True})


class TestFormatRoundTrip:
    """Formatting a valid RUT is stable under re-cleaning and validates."""

    def test_round_trip_sampled_bodies(self):
        rng = random.Random(1234)
        for length in range(1, 9):
            for _ in range(25):
                body = str(rng.randint(10 ** (length - 1) if length > 1 else 0, 10 ** length - 1))
                rut = body + calculate_verification_digit(body)
                formatted = format_rut(rut)
                assert validate_rut(formatted).is_valid, formatted
                noisy = " " + "-".join(rut) + " ."
                assert format_rut(clean_rut(noisy)) == formatted


class TestFormatRutPartial:

    def test_as_user_types(self):
        assert format_rut_partial("12") == "1-2"
        assert format_rut_partial("123") == "12-3"
        assert format_rut_partial("12345") == "1.234-5"
        assert format_rut_partial("12345678") == "1.234.567-8"
        assert format_rut_partial("123456789") == "12.345.678-9"

    def test_single_character(self):
        assert format_rut_partial("1") == "1"
        assert format_rut_partial("k") == "K"

    def test_empty(self):
        assert format_rut_partial("") == ""
        assert format_rut_partial("...") == ""
        assert format_rut_partial(None) == ""

    def test_options(self):
        assert format_rut_partial("10000013K", {"dots": False}) == "10000013-K"
        assert format_rut_partial("10000013K", {"uppercase": False}) == "10.000.013-k"
        assert format_rut_partial("12345", {"dash": False}) == "1.2345"

    def test_k_inside_body(self):
        assert format_rut_partial("12K345") == "12K34-5"
        assert format_rut_partial("1234K5678") == "1.234K.567-8"

    def test_none_option_uses_default(self):
        assert format_rut_partial("12345", {"dash": None}) == "1.234-5"

    def test_ignores_checksum(self):
        assert format_rut_partial("12345678-0") == "12.345.678-0"
