"""
String representation: underscore-separated bytes in double quotes.

    StringRepr ::= Prefix '"' ( Byte ('_' Byte)* )? '"'

Examples: ``0X"4C_6F_72"`` and, compact, ``0X"4C6F72"``. Unlike the array
form, compact output keeps every byte at its padded width because the
separator-free body is read back by slicing fixed-width fields.
"""

from dataclasses import dataclass

from .binary import Binary
from .exceptions import (
    DigitParseError, InvalidByteRepresentationError,
    InvalidRepresentationError, InvalidStringQuotesError,
)
from .logging_config import get_logger
from .options import ByteFormatOptions
from .radix import split_prefix
from .styles import StyleLookup, StyleTag, resolve_style

logger = get_logger('string')

QUOTE = '"'
SEPARATOR = '_'


@dataclass(frozen=True)
class StringFormatOptions(ByteFormatOptions):
    """Options for the string representation (default: padded upper-hex, unstyled)."""
    pass


def string_representation(value, options: StringFormatOptions | None = None,
                          style: StyleLookup | None = None) -> str:
    """
    Format bytes as a string representation.

    Args:
        value: Binary or bytes-like data
        options: StringFormatOptions (defaults when None); ``compact`` only
            drops the underscores
        style: Style lookup used when options.colored is set

    Returns:
        Representation text, e.g. ``0X"00_01_FF"``
    """
    options = options or StringFormatOptions()
    style = resolve_style(options.colored, style)
    radix = options.radix

    fields = (style.byte(byte, radix.format_byte(byte)) for byte in value)
    separator = '' if options.compact else style.apply(StyleTag.SEPARATOR, SEPARATOR)
    quote = style.apply(StyleTag.DELIMITER, QUOTE)
    return f"{style.apply(StyleTag.PREFIX, radix.prefix)}{quote}{separator.join(fields)}{quote}"


def parse_string_representation(text: str) -> Binary:
    """
    Parse a string representation back into bytes.

    A body containing '_' is split on it and each field parsed as-is (any
    width up to the radix maximum). A body without '_' is read as consecutive
    fixed-width fields of the radix's padded width.

    Raises:
        MissingRadixPrefixError: Text does not start with '0'
        InvalidRadixPrefixError: Unknown radix character
        InvalidStringQuotesError: Body not enclosed in one pair of double quotes
        InvalidRepresentationError: Fixed-width body length is not a multiple of the field width
        InvalidByteRepresentationError: A field is empty, has a bad digit or exceeds 255
    """
    radix, rest = split_prefix(text, logger)

    if not (len(rest) >= 2 and rest.startswith(QUOTE) and rest.endswith(QUOTE)):
        logger.debug(f"String body not quoted: {rest[:16]!r}")
        raise InvalidStringQuotesError()
    body = rest[1:-1]
    if QUOTE in body:
        logger.debug("Embedded quote in string body")
        raise InvalidStringQuotesError()

    if not body:
        return Binary.owned()

    if SEPARATOR in body:
        fields = body.split(SEPARATOR)
    else:
        width = radix.width
        if len(body) % width:
            logger.debug(f"Fixed-width body of {len(body)} chars is not a multiple of {width}")
            raise InvalidRepresentationError(
                f"Compact string body length {len(body)} is not a multiple of "
                f"the {width}-digit field width for {radix.prefix}"
            )
        fields = [body[i:i + width] for i in range(0, len(body), width)]

    result = bytearray()
    for field in fields:
        try:
            result.append(radix.parse_byte(field))
        except DigitParseError as e:
            logger.debug(f"Invalid string field {field!r}: {e}")
            raise InvalidByteRepresentationError(e) from e
    return Binary.owned(result)
