"""
Custom exceptions for the binrepr package.
"""

from enum import Enum


class BinReprError(Exception):
    """Base exception for all binrepr errors."""

    default_message = "Binary representation error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ConfigError(BinReprError):
    """Exception raised for configuration errors."""
    default_message = "Invalid configuration."


class DigitErrorKind(Enum):
    """Why a single digit-string could not be read as a byte."""
    EMPTY = "cannot parse byte from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    OVERFLOW = "number too large to fit in a byte"


class DigitParseError(BinReprError, ValueError):
    """Exception raised when a digit-string is not a valid byte in its radix."""

    def __init__(self, kind: DigitErrorKind, digits: str = "", radix: int = 16):
        self.kind = kind
        self.digits = digits
        self.radix = radix
        super().__init__(kind.value)


class RepresentationError(BinReprError, ValueError):
    """Base exception for text that cannot be parsed back into bytes."""
    default_message = "The binary string representation is invalid."


class InvalidRepresentationError(RepresentationError):
    """Exception raised for a structurally impossible body or undetectable encoding."""
    pass


class MissingRadixPrefixError(RepresentationError):
    """Exception raised when the text does not start with the '0' prefix marker."""
    default_message = "The binary string representation is missing a radix prefix."


class InvalidRadixPrefixError(RepresentationError):
    """Exception raised when the radix character after '0' is not recognized."""
    default_message = "The binary string representation has an invalid radix prefix."


class InvalidStringQuotesError(RepresentationError):
    """Exception raised when a string body is not enclosed in double quotes."""
    default_message = ("The binary string representation must be correctly enclosed "
                       "in double quotes: '\"'.")


class InvalidArrayBracketsError(RepresentationError):
    """Exception raised when an array body is not enclosed in brackets."""
    default_message = ("The binary array representation must be correctly enclosed "
                       "in brackets: '[' and ']'.")


class InvalidByteRepresentationError(RepresentationError):
    """Exception raised when a single byte field fails numeric parsing."""

    def __init__(self, cause: DigitParseError):
        self.cause = cause
        super().__init__(
            f"Failed to parse individual byte representation; source error: {cause}"
        )

    @property
    def kind(self) -> DigitErrorKind:
        return self.cause.kind


class UnsupportedRepresentationError(BinReprError, NotImplementedError):
    """Exception raised for representations that can be formatted but not parsed."""
    default_message = "Parsing this representation is not supported."
