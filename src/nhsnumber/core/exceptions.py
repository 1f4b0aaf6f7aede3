"""nhsnumber exception hierarchy."""

from __future__ import annotations


class NHSNumberError(Exception):
    """Base exception for all nhsnumber errors."""


class InvalidArgument(NHSNumberError, ValueError):
    """Input is missing or is not shaped the way the operation requires.

    Distinct from a ``False`` validation result: a well-formed number that
    fails the checksum is a business outcome, not an error.
    """

    def __init__(self, message: str, identifier: str | None = None) -> None:
        self.identifier = identifier
        super().__init__(message)


class MissingIdentifier(InvalidArgument):
    """``None`` was passed where an identifier string is required."""

    def __init__(self) -> None:
        super().__init__("identifier must not be None")


class NonDigitIdentifier(InvalidArgument):
    """Identifier contains characters other than ASCII digits."""

    def __init__(self, identifier: str) -> None:
        super().__init__("NHS numbers must contain digits only", identifier)
