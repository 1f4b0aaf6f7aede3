"""Validation and display formatting for 10-digit NHS numbers."""

from __future__ import annotations

from nhsnumber.core.config import ValidatorSettings
from nhsnumber.core.exceptions import InvalidArgument, NHSNumberError
from nhsnumber.models.nhs_number import NHSNumber, NHSNumberCheck
from nhsnumber.validator.nhs_number import (
    compute_check_digit,
    format_number,
    is_formatted,
    strip_formatting,
    validate,
)
from nhsnumber.validator.service import NHSNumberValidatorService

__all__ = [
    "InvalidArgument",
    "NHSNumber",
    "NHSNumberCheck",
    "NHSNumberError",
    "NHSNumberValidatorService",
    "ValidatorSettings",
    "compute_check_digit",
    "format_number",
    "is_formatted",
    "strip_formatting",
    "validate",
]
