"""Tests for NHS number validation and formatting functions."""

from __future__ import annotations

import pytest

from nhsnumber.core.exceptions import InvalidArgument, MissingIdentifier, NonDigitIdentifier
from nhsnumber.validator.nhs_number import (
    checksum_valid,
    compute_check_digit,
    format_number,
    is_all_digits,
    is_constant_digits,
    is_formatted,
    strip_formatting,
    validate,
)

# Weighted sum of "000000006" is 12, remainder 1, so the computed check digit is 10.
UNUSABLE_PREFIX = "000000006"


class TestValidate:
    def test_worked_example_is_valid(self):
        assert validate("4010232137") is True

    def test_another_valid_number(self):
        assert validate("9434765919") is True

    def test_check_digit_mismatch_is_invalid(self):
        assert validate("4010232138") is False

    def test_remainder_zero_gives_check_digit_zero(self):
        # 1*8 + 1*3 = 11
        assert validate("0010000100") is True
        assert validate("0010000101") is False

    @pytest.mark.parametrize("digit", "0123456789")
    def test_constant_digits_are_invalid(self, digit):
        assert validate(digit * 10) is False

    def test_constant_digits_rejected_even_when_checksum_passes(self):
        assert checksum_valid("4444444444") is True
        assert validate("4444444444") is False

    @pytest.mark.parametrize("last", "0123456789")
    def test_unusable_prefix_is_invalid_for_any_last_digit(self, last):
        assert validate(UNUSABLE_PREFIX + last) is False

    @pytest.mark.parametrize(
        "value", ["", "401023213", "40102321370", "401 023 2137", "abc", "12345"]
    )
    def test_wrong_length_is_invalid_not_error(self, value):
        assert validate(value) is False

    @pytest.mark.parametrize("value", ["401023213X", "A010232137", "401 232137", "401023213.", "40102321３7"])
    def test_non_digit_raises(self, value):
        with pytest.raises(InvalidArgument):
            validate(value)

    def test_non_digit_error_carries_identifier(self):
        with pytest.raises(NonDigitIdentifier) as exc_info:
            validate("401023213X")
        assert exc_info.value.identifier == "401023213X"
        assert "digits only" in str(exc_info.value)

    def test_arabic_indic_digits_raise(self):
        with pytest.raises(InvalidArgument):
            validate("٤٠١٠٢٣٢١٣٧")

    def test_none_raises(self):
        with pytest.raises(MissingIdentifier):
            validate(None)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            validate("401023213X")


class TestComputeCheckDigit:
    def test_worked_example(self):
        assert compute_check_digit("401023213") == 7

    def test_eleven_becomes_zero(self):
        assert compute_check_digit("001000010") == 0

    def test_ten_is_unusable(self):
        assert compute_check_digit(UNUSABLE_PREFIX) is None

    @pytest.mark.parametrize("prefix", ["40102321", "4010232137", ""])
    def test_wrong_prefix_length_raises(self, prefix):
        with pytest.raises(InvalidArgument):
            compute_check_digit(prefix)

    def test_non_digit_prefix_raises(self):
        with pytest.raises(InvalidArgument):
            compute_check_digit("40102321X")

    def test_none_raises(self):
        with pytest.raises(InvalidArgument):
            compute_check_digit(None)


class TestHelpers:
    def test_is_all_digits(self):
        assert is_all_digits("0123456789") is True
        assert is_all_digits("01234 6789") is False
        assert is_all_digits("²") is False

    def test_is_constant_digits(self):
        assert is_constant_digits("7777777777") is True
        assert is_constant_digits("7777777778") is False


class TestFormatNumber:
    def test_formats_three_three_four(self):
        assert format_number("4010232137") == "401 023 2137"

    def test_does_not_check_checksum(self):
        assert format_number("4010232138") == "401 023 2138"
        assert format_number("4444444444") == "444 444 4444"

    @pytest.mark.parametrize("value", ["12345", "", "401 023 2137", "40102321370", "abc"])
    def test_other_lengths_pass_through(self, value):
        assert format_number(value) == value

    def test_non_digit_raises(self):
        with pytest.raises(InvalidArgument):
            format_number("401023213X")

    def test_none_raises(self):
        with pytest.raises(InvalidArgument):
            format_number(None)


class TestIsFormatted:
    def test_formatted(self):
        assert is_formatted("401 023 2137") is True

    def test_canonical_is_not_formatted(self):
        assert is_formatted("4010232137") is False

    def test_extra_space_is_not_formatted(self):
        assert is_formatted("401  023 2137") is False

    def test_spaces_in_wrong_positions(self):
        assert is_formatted("4010 23 2137") is False
        assert is_formatted("401-023-2137") is False

    def test_digit_content_not_checked(self):
        assert is_formatted("ABC DEF GHIJ") is True

    def test_space_positions_checked_after_trimming(self):
        # 12 characters before trimming, spaces at 3 and 7 after it
        assert is_formatted(" 401 023 213") is True

    def test_length_checked_before_trimming(self):
        assert is_formatted(" 401 023 2137") is False
        assert is_formatted("401 023 2137 ") is False

    def test_none_raises(self):
        with pytest.raises(InvalidArgument):
            is_formatted(None)


class TestStripFormatting:
    def test_strips_formatted(self):
        assert strip_formatting("401 023 2137") == "4010232137"

    @pytest.mark.parametrize("value", ["4010232137", "12345", "401  023 2137", "401-023-2137", ""])
    def test_unformatted_returned_unchanged(self, value):
        assert strip_formatting(value) == value

    def test_strips_padded_twelve_character_input(self):
        assert strip_formatting(" 401 023 213") == "401023213"

    def test_padded_thirteen_character_input_unchanged(self):
        assert strip_formatting(" 401 023 2137") == " 401 023 2137"

    def test_does_not_validate_digits(self):
        assert strip_formatting("ABC DEF GHIJ") == "ABCDEFGHIJ"

    @pytest.mark.parametrize("value", ["4010232137", "9434765919", "4010232138", "0000000000"])
    def test_round_trip(self, value):
        assert strip_formatting(format_number(value)) == value

    def test_none_raises(self):
        with pytest.raises(InvalidArgument):
            strip_formatting(None)
