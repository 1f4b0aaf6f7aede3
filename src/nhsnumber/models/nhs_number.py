"""NHS number value type and per-number check result."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator

from nhsnumber.core.exceptions import InvalidArgument, MissingIdentifier, NonDigitIdentifier
from nhsnumber.core.types import CheckDigit, FormattedNumber, Reason
from nhsnumber.validator.nhs_number import (
    CANONICAL_LENGTH,
    format_number,
    is_all_digits,
    strip_formatting,
    validate,
)


class NHSNumber(BaseModel):
    """A 10-digit NHS number held in canonical form.

    Construction enforces the shape (10 ASCII digits) only;
    use ``is_valid`` for the checksum and constant-digit rules.
    """

    value: str

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def _canonical_shape(cls, value: str) -> str:
        if len(value) != CANONICAL_LENGTH:
            raise InvalidArgument(
                f"NHS numbers must be {CANONICAL_LENGTH} digits, got {len(value)}", value
            )
        if not is_all_digits(value):
            raise NonDigitIdentifier(value)
        return value

    @classmethod
    def parse(cls, raw: str) -> NHSNumber:
        """Build from canonical or display input, e.g. ``"401 023 2137"``."""
        if raw is None:
            raise MissingIdentifier()
        candidate = strip_formatting(raw.strip())
        if len(candidate) != CANONICAL_LENGTH:
            raise InvalidArgument(
                f"NHS numbers must be {CANONICAL_LENGTH} digits, got {len(candidate)}", raw
            )
        if not is_all_digits(candidate):
            raise NonDigitIdentifier(raw)
        return cls(value=candidate)

    @property
    def is_valid(self) -> bool:
        return validate(self.value)

    @property
    def formatted(self) -> FormattedNumber:
        return format_number(self.value)

    @property
    def check_digit(self) -> CheckDigit:
        """The supplied 10th digit, not the computed one."""
        return int(self.value[-1])

    def __str__(self) -> str:
        return self.value


class NHSNumberCheck(BaseModel):
    """Outcome of checking one raw NHS number."""

    raw: Optional[str] = None
    canonical: str = ""
    formatted: str = ""
    valid: bool = False
    malformed: bool = False  # True when the input raised InvalidArgument
    reason: Reason = ""  # "" when valid, otherwise one of the REASON_* codes


REASON_MISSING = "missing"
REASON_WRONG_LENGTH = "wrong_length"
REASON_NON_DIGIT = "non_digit"
REASON_CONSTANT_DIGITS = "constant_digits"
REASON_UNUSABLE_CHECK_DIGIT = "unusable_check_digit"
REASON_CHECK_DIGIT_MISMATCH = "check_digit_mismatch"

REASONS = (
    REASON_MISSING,
    REASON_WRONG_LENGTH,
    REASON_NON_DIGIT,
    REASON_CONSTANT_DIGITS,
    REASON_UNUSABLE_CHECK_DIGIT,
    REASON_CHECK_DIGIT_MISMATCH,
)
