"""NHSNumberValidatorService: classify raw NHS numbers from upstream records.

Raw values arrive from form fields, CSV columns and database rows, so
they may be missing, padded with whitespace or in display form. Each one
is reduced to an ``NHSNumberCheck`` carrying the reason it failed.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional

from nhsnumber.core.config import ValidatorSettings
from nhsnumber.core.exceptions import InvalidArgument
from nhsnumber.models.nhs_number import (
    REASON_CHECK_DIGIT_MISMATCH,
    REASON_CONSTANT_DIGITS,
    REASON_MISSING,
    REASON_NON_DIGIT,
    REASON_UNUSABLE_CHECK_DIGIT,
    REASON_WRONG_LENGTH,
    REASONS,
    NHSNumberCheck,
)
from nhsnumber.validator.nhs_number import (
    CANONICAL_LENGTH,
    compute_check_digit,
    format_number,
    is_constant_digits,
    strip_formatting,
    validate,
)

logger = logging.getLogger(__name__)


class NHSNumberValidatorService:
    """Validate NHS numbers one at a time or in batches."""

    def __init__(self, settings: ValidatorSettings | None = None) -> None:
        self._settings = settings or ValidatorSettings()

    def check(self, raw: Optional[str]) -> NHSNumberCheck:
        """Classify a single raw value."""
        if raw is None:
            return NHSNumberCheck(raw=None, malformed=True, reason=REASON_MISSING)

        candidate = raw.strip()
        if self._settings.accept_formatted_input:
            candidate = strip_formatting(candidate)

        try:
            valid = validate(candidate)
        except InvalidArgument:
            result = NHSNumberCheck(raw=raw, malformed=True, reason=REASON_NON_DIGIT)
            self._log_rejection(result)
            return result

        if len(candidate) != CANONICAL_LENGTH:
            result = NHSNumberCheck(raw=raw, reason=REASON_WRONG_LENGTH)
            self._log_rejection(result)
            return result

        result = NHSNumberCheck(
            raw=raw,
            canonical=candidate,
            formatted=format_number(candidate),
            valid=valid,
            reason="" if valid else self._failure_reason(candidate),
        )
        if not valid:
            self._log_rejection(result)
        return result

    def check_many(self, values: Iterable[Optional[str]]) -> list[NHSNumberCheck]:
        """Classify every value, preserving input order."""
        results = [self.check(value) for value in values]
        invalid = sum(1 for r in results if not r.valid)
        logger.info("Checked %d NHS numbers: %d invalid", len(results), invalid)
        return results

    @staticmethod
    def summary(results: Iterable[NHSNumberCheck]) -> dict[str, int]:
        """Count results per failure reason, plus ``total``, ``valid`` and ``invalid``."""
        results = list(results)
        counts = Counter(r.reason for r in results if not r.valid)
        valid = sum(1 for r in results if r.valid)

        summary = {reason: counts.get(reason, 0) for reason in REASONS}
        summary["total"] = len(results)
        summary["valid"] = valid
        summary["invalid"] = len(results) - valid
        return summary

    @staticmethod
    def _failure_reason(canonical: str) -> str:
        if is_constant_digits(canonical):
            return REASON_CONSTANT_DIGITS
        if compute_check_digit(canonical[:9]) is None:
            return REASON_UNUSABLE_CHECK_DIGIT
        return REASON_CHECK_DIGIT_MISMATCH

    def _log_rejection(self, result: NHSNumberCheck) -> None:
        if self._settings.redact_numbers:
            logger.debug("Rejected NHS number: %s", result.reason)
        else:
            logger.debug("Rejected NHS number %r: %s", result.raw, result.reason)
