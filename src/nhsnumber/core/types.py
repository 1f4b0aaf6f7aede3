"""Type aliases used across the nhsnumber package."""

from __future__ import annotations

from typing import Literal

CanonicalNumber = str  # "4010232137"
FormattedNumber = str  # "401 023 2137"
CheckDigit = int
Reason = Literal[
    "",
    "missing",
    "wrong_length",
    "non_digit",
    "constant_digits",
    "unusable_check_digit",
    "check_digit_mismatch",
]
