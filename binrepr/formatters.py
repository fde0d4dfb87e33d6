"""
Single entry points that dispatch on the representation kind.
"""

from enum import Enum

from .array_codec import ArrayFormatOptions, array_representation, parse_array_representation
from .base64_codec import Base64FormatOptions, base64_representation, parse_base64_representation
from .binary import Binary
from .exceptions import InvalidRepresentationError
from .hex_dump import DumpFormatOptions, dump_representation, parse_dump_representation
from .logging_config import get_logger
from .radix import split_prefix
from .string_codec import StringFormatOptions, parse_string_representation, string_representation
from .styles import StyleLookup

logger = get_logger('formatters')

FormatOptions = ArrayFormatOptions | StringFormatOptions | DumpFormatOptions | Base64FormatOptions


class Representation(Enum):
    """Textual representation kinds."""
    ARRAY = 'array'
    STRING = 'string'
    DUMP = 'dump'
    BASE64 = 'base64'

    def default_options(self) -> FormatOptions:
        return _OPTIONS_TYPES[self]()

    @classmethod
    def of(cls, options: FormatOptions) -> 'Representation':
        """Representation kind selected by an options object."""
        for representation, options_type in _OPTIONS_TYPES.items():
            if type(options) is options_type:
                return representation
        raise TypeError(f"Unsupported format options type: {type(options).__name__}")


_OPTIONS_TYPES = {
    Representation.ARRAY: ArrayFormatOptions,
    Representation.STRING: StringFormatOptions,
    Representation.DUMP: DumpFormatOptions,
    Representation.BASE64: Base64FormatOptions,
}

_FORMATTERS = {
    Representation.ARRAY: array_representation,
    Representation.STRING: string_representation,
    Representation.DUMP: dump_representation,
    Representation.BASE64: base64_representation,
}

_PARSERS = {
    Representation.ARRAY: parse_array_representation,
    Representation.STRING: parse_string_representation,
    Representation.DUMP: parse_dump_representation,
    Representation.BASE64: parse_base64_representation,
}


def format_binary(value, options: FormatOptions | None = None,
                  style: StyleLookup | None = None) -> str:
    """
    Format bytes in the representation chosen by the options type.

    Args:
        value: Binary or bytes-like data
        options: Any format options object (array defaults when None)
        style: Style lookup used when the options enable color

    Returns:
        Representation text

    Raises:
        TypeError: Options of an unknown type
    """
    if options is None:
        options = ArrayFormatOptions()
    representation = Representation.of(options)
    formatter = _FORMATTERS[representation]
    # Base64 text has no components to decorate
    if representation is Representation.BASE64:
        return formatter(value, options)
    return formatter(value, options, style)


def detect_representation(text: str) -> Representation:
    """
    Detect whether text is an array or string representation.

    Raises:
        MissingRadixPrefixError: Text does not start with '0'
        InvalidRadixPrefixError: Unknown radix character
        InvalidRepresentationError: Body starts with neither '[' nor '"'
    """
    _, body = split_prefix(text, logger)
    if body.startswith('['):
        return Representation.ARRAY
    if body.startswith('"'):
        return Representation.STRING
    logger.debug(f"Could not detect representation of {text[:16]!r}")
    raise InvalidRepresentationError("Could not detect the representation of the text.")


def parse_binary(text: str, representation: Representation | str | None = None) -> Binary:
    """
    Parse text back into bytes.

    Args:
        text: Representation text
        representation: Kind to parse (name or enum); detected from the text when None

    Returns:
        Parsed Binary

    Raises:
        RepresentationError: Malformed input (see the individual parsers)
        UnsupportedRepresentationError: The dump representation
    """
    if representation is None:
        representation = detect_representation(text)
    else:
        representation = Representation(representation)
    return _PARSERS[representation](text)
