"""NHS number validation and display formatting.

An NHS number is 10 digits. The first nine identify the patient and the
tenth is a modulus-11 check digit:

1. multiply each of the first nine digits by 10, 9, 8, ... 2
2. add the products
3. take the remainder of the total divided by 11
4. subtract the remainder from 11

A result of 11 gives a check digit of 0. A result of 10 means the prefix
can never be issued, so the number is rejected whatever its last digit.

Worked example, prefix ``401 023 213``:
40 + 0 + 8 + 0 + 12 + 15 + 8 + 3 + 6 = 92, 92 % 11 = 4, 11 - 4 = 7,
giving ``401 023 2137``.

Constant strings such as ``444 444 4444`` pass the checksum but are not
issued, so they are rejected too.

Display form groups the digits 3-3-4 separated by single spaces.
"""

from __future__ import annotations

import logging

from nhsnumber.core.exceptions import InvalidArgument, MissingIdentifier, NonDigitIdentifier
from nhsnumber.core.types import CanonicalNumber, CheckDigit, FormattedNumber

logger = logging.getLogger(__name__)

CANONICAL_LENGTH = 10
FORMATTED_LENGTH = 12
SEPARATOR = " "
SEPARATOR_POSITIONS = (3, 7)
WEIGHTS = (10, 9, 8, 7, 6, 5, 4, 3, 2)

_ASCII_DIGITS = frozenset("0123456789")


def _require(identifier: str | None) -> str:
    if identifier is None:
        raise MissingIdentifier()
    return identifier


def is_all_digits(value: str) -> bool:
    """True if every character is an ASCII digit ``0``-``9``.

    Unicode digits such as superscripts or Arabic-Indic numerals do not count.
    """
    return all(ch in _ASCII_DIGITS for ch in value)


def _require_digits(identifier: str) -> None:
    if not is_all_digits(identifier):
        raise NonDigitIdentifier(identifier)


def is_constant_digits(value: str) -> bool:
    """True if every character equals the first one."""
    return len(set(value)) <= 1


def compute_check_digit(first_nine: str) -> CheckDigit | None:
    """Return the check digit for a 9-digit prefix.

    Returns ``None`` when the computed value is 10, i.e. no check digit
    exists and no number with this prefix is valid.

    Raises:
        InvalidArgument: prefix is ``None``, not 9 characters long, or
            contains non-digits.
    """
    _require(first_nine)
    if len(first_nine) != len(WEIGHTS):
        raise InvalidArgument(
            f"check digit prefix must be {len(WEIGHTS)} digits, got {len(first_nine)}",
            first_nine,
        )
    _require_digits(first_nine)

    total = sum(int(digit) * weight for digit, weight in zip(first_nine, WEIGHTS))
    computed = 11 - (total % 11)
    if computed == 11:
        return 0
    if computed == 10:
        return None
    return computed


def checksum_valid(identifier: CanonicalNumber) -> bool:
    """True if the 10th digit matches the check digit of the first nine."""
    expected = compute_check_digit(identifier[:9])
    if expected is None:
        # Guidance on a computed value of 10 is unclear; such numbers are not issued.
        return False
    return int(identifier[9]) == expected


def validate(identifier: str) -> bool:
    """Return True if ``identifier`` is a usable, checksum-valid NHS number.

    Wrong length, constant digits, an unusable prefix and a check digit
    mismatch all return ``False``.

    Raises:
        InvalidArgument: ``identifier`` is ``None``, or is 10 characters
            long and contains a non-digit.
    """
    _require(identifier)

    if len(identifier) != CANONICAL_LENGTH:
        return False

    _require_digits(identifier)

    if is_constant_digits(identifier):
        logger.debug("Rejected constant-digit NHS number")
        return False

    return checksum_valid(identifier)


def format_number(identifier: str) -> FormattedNumber:
    """Render a 10-digit string as ``ddd ddd dddd``.

    Any other length is returned unchanged. The checksum is not checked.

    Raises:
        InvalidArgument: ``identifier`` is ``None``, or is 10 characters
            long and contains a non-digit.
    """
    _require(identifier)

    if len(identifier) != CANONICAL_LENGTH:
        return identifier

    _require_digits(identifier)
    return SEPARATOR.join((identifier[:3], identifier[3:6], identifier[6:]))


def is_formatted(identifier: str) -> bool:
    """True if ``identifier`` has the 12-character ``ddd ddd dddd`` shape.

    Only the length and the space positions are inspected; the other
    characters may be anything.
    """
    _require(identifier)

    if len(identifier) != FORMATTED_LENGTH:
        return False

    trimmed = identifier.strip()
    positions = tuple(i for i, ch in enumerate(trimmed) if ch == SEPARATOR)
    return positions == SEPARATOR_POSITIONS


def strip_formatting(identifier: str) -> CanonicalNumber:
    """Remove display spaces from a formatted number.

    Input that is not in display form is returned unchanged. Digit content
    is not re-validated.
    """
    _require(identifier)

    if is_formatted(identifier):
        return identifier.replace(SEPARATOR, "")
    return identifier
