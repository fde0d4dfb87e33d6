"""
Numeric bases used to render and read individual bytes.

Every textual representation starts with a two-character prefix naming its
radix: ``0b`` binary, ``0o`` octal, ``0d`` decimal, ``0x`` lower-case hex and
``0X`` upper-case hex.
"""

from enum import Enum

from .exceptions import (
    DigitErrorKind, DigitParseError, InvalidRadixPrefixError,
    InvalidRepresentationError, MissingRadixPrefixError,
)

PREFIX_MARKER = '0'
BYTE_MAX = 0xFF


class Radix(Enum):
    """A byte radix: (prefix character, numeric base, padded digit width)."""

    BINARY = ('b', 2, 8)
    OCTAL = ('o', 8, 3)
    DECIMAL = ('d', 10, 3)
    LOWER_HEX = ('x', 16, 2)
    UPPER_HEX = ('X', 16, 2)

    def __init__(self, char: str, base: int, width: int):
        self.char = char
        self.base = base
        self.width = width

    @property
    def prefix(self) -> str:
        """Two-character prefix token, e.g. ``0X``."""
        return PREFIX_MARKER + self.char

    @property
    def digits(self) -> frozenset:
        """Characters accepted as digits when parsing (hex is case-insensitive)."""
        return _DIGITS[self.base]

    def format_byte(self, byte: int, compact: bool = False) -> str:
        """
        Render one byte in this radix.

        Args:
            byte: Value in 0..255
            compact: Minimal digits when True, zero-padded to ``width`` otherwise

        Returns:
            Digit string without prefix
        """
        return self.format_number(byte, 0 if compact else self.width)

    def format_number(self, value: int, width: int) -> str:
        """Render any non-negative integer zero-padded to ``width`` digits."""
        # Format-spec type characters coincide with the prefix characters.
        return format(value, f'0{width}{self.char}')

    def parse_byte(self, digits: str) -> int:
        """
        Parse a digit-string in this radix into a byte.

        Raises:
            DigitParseError: Empty input, a character outside the radix, or a
                value above 255; ``kind`` tells which.
        """
        if not digits:
            raise DigitParseError(DigitErrorKind.EMPTY, digits, self.base)

        valid = self.digits
        value = 0
        for char in digits:
            if char not in valid:
                raise DigitParseError(DigitErrorKind.INVALID_DIGIT, digits, self.base)
            value = value * self.base + int(char, self.base)
            if value > BYTE_MAX:
                raise DigitParseError(DigitErrorKind.OVERFLOW, digits, self.base)
        return value

    @classmethod
    def from_char(cls, char: str | None) -> 'Radix':
        """
        Map a prefix character ('b', 'd', 'o', 'x', 'X') to its radix.

        Raises:
            InvalidRepresentationError: For any other character or None
        """
        radix = _BY_CHAR.get(char) if char else None
        if radix is None:
            raise InvalidRepresentationError(f"Unrecognized radix character: {char!r}")
        return radix

    @classmethod
    def is_radix_char(cls, char: str) -> bool:
        return char in _BY_CHAR


_DIGITS = {
    2: frozenset('01'),
    8: frozenset('01234567'),
    10: frozenset('0123456789'),
    16: frozenset('0123456789abcdefABCDEF'),
}

_BY_CHAR = {radix.char: radix for radix in Radix}

DEFAULT_RADIX = Radix.UPPER_HEX


# Functional forms of the radix operations
def prefix_of(radix: Radix) -> str:
    return radix.prefix


def radix_value(radix: Radix) -> int:
    return radix.base


def padded_width(radix: Radix) -> int:
    return radix.width


def format_byte(radix: Radix, byte: int, compact: bool = False) -> str:
    return radix.format_byte(byte, compact)


def parse_radix_prefix(char: str | None) -> Radix:
    return Radix.from_char(char)


def parse_byte(radix: Radix, digits: str) -> int:
    return radix.parse_byte(digits)


def split_prefix(text: str, logger=None) -> tuple[Radix, str]:
    """
    Validate the ``0<radix>`` prefix shared by the array and string forms.

    Returns:
        The radix and the remaining body text

    Raises:
        MissingRadixPrefixError: Text does not begin with '0'
        InvalidRadixPrefixError: The character after '0' is not a radix
    """
    if not text.startswith(PREFIX_MARKER):
        if logger:
            logger.debug(f"Missing radix prefix: {text[:8]!r}")
        raise MissingRadixPrefixError()
    rest = text[len(PREFIX_MARKER):]
    if not rest or not Radix.is_radix_char(rest[0]):
        if logger:
            logger.debug(f"Invalid radix prefix: {text[:2]!r}")
        raise InvalidRadixPrefixError()
    return Radix.from_char(rest[0]), rest[1:]
