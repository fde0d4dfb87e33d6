"""
Array representation: comma-separated bytes in square brackets.

    ArrayRepr ::= Prefix '[' ( Byte (',' Byte)* )? ']'

Examples: ``0X[4C, 6F, 72]`` (padded) and ``0x[4c,6f,72]`` (compact). The
compact form has minimal digits and no space after commas.
"""

from dataclasses import dataclass

from .binary import Binary
from .exceptions import DigitParseError, InvalidArrayBracketsError, InvalidByteRepresentationError
from .logging_config import get_logger
from .options import ByteFormatOptions
from .radix import split_prefix
from .styles import StyleLookup, StyleTag, resolve_style

logger = get_logger('array')

OPEN_BRACKET = '['
CLOSE_BRACKET = ']'
SEPARATOR = ','


@dataclass(frozen=True)
class ArrayFormatOptions(ByteFormatOptions):
    """Options for the array representation (default: padded upper-hex, unstyled)."""
    pass


def array_representation(value, options: ArrayFormatOptions | None = None,
                         style: StyleLookup | None = None) -> str:
    """
    Format bytes as an array representation.

    Args:
        value: Binary or bytes-like data
        options: ArrayFormatOptions (defaults when None)
        style: Style lookup used when options.colored is set

    Returns:
        Representation text, e.g. ``0X[00, 01, FF]``
    """
    options = options or ArrayFormatOptions()
    style = resolve_style(options.colored, style)
    radix = options.radix

    separator = style.apply(StyleTag.SEPARATOR, SEPARATOR)
    if not options.compact:
        separator += ' '
    body = separator.join(
        style.byte(byte, radix.format_byte(byte, options.compact)) for byte in value
    )
    return (
        style.apply(StyleTag.PREFIX, radix.prefix)
        + style.apply(StyleTag.DELIMITER, OPEN_BRACKET)
        + body
        + style.apply(StyleTag.DELIMITER, CLOSE_BRACKET)
    )


def parse_array_representation(text: str) -> Binary:
    """
    Parse an array representation back into bytes.

    Padded and compact bodies are both accepted; whitespace around each field
    is ignored.

    Raises:
        MissingRadixPrefixError: Text does not start with '0'
        InvalidRadixPrefixError: Unknown radix character
        InvalidArrayBracketsError: Body not enclosed in one '[' ... ']' pair
        InvalidByteRepresentationError: A field is empty, has a bad digit or exceeds 255
    """
    radix, rest = split_prefix(text, logger)

    if not (len(rest) >= 2 and rest.startswith(OPEN_BRACKET) and rest.endswith(CLOSE_BRACKET)):
        logger.debug(f"Array body not bracketed: {rest[:16]!r}")
        raise InvalidArrayBracketsError()
    body = rest[1:-1]
    if OPEN_BRACKET in body or CLOSE_BRACKET in body:
        logger.debug("Nested brackets in array body")
        raise InvalidArrayBracketsError()

    if not body:
        return Binary.owned()

    result = bytearray()
    for field in body.split(SEPARATOR):
        try:
            result.append(radix.parse_byte(field.strip()))
        except DigitParseError as e:
            logger.debug(f"Invalid array field {field!r}: {e}")
            raise InvalidByteRepresentationError(e) from e
    return Binary.owned(result)
