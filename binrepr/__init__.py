"""
binrepr Package

Round-trippable textual representations of byte sequences: bracketed arrays,
underscore-delimited quoted strings, hex dumps and base64.
"""

from .binary import Binary
from .radix import Radix, prefix_of, radix_value, padded_width, format_byte, parse_radix_prefix, parse_byte
from .styles import (
    ByteCategory, classify_byte, StyleTag, Decoration, StyleLookup, NoStyle, AnsiStyle, strip_styles
)
from .array_codec import ArrayFormatOptions, array_representation, parse_array_representation
from .string_codec import StringFormatOptions, string_representation, parse_string_representation
from .hex_dump import (
    DumpColumnWidth, DumpFormatOptions, HexDumper, dump_representation, parse_dump_representation, hex_dump
)
from .base64_codec import Base64FormatOptions, base64_representation, parse_base64_representation
from .formatters import FormatOptions, Representation, format_binary, parse_binary, detect_representation
from .config import ReprConfig, DumpConfig, create_default_config
from .exceptions import (
    BinReprError, ConfigError, DigitErrorKind, DigitParseError, RepresentationError,
    InvalidRepresentationError, MissingRadixPrefixError, InvalidRadixPrefixError,
    InvalidStringQuotesError, InvalidArrayBracketsError, InvalidByteRepresentationError,
    UnsupportedRepresentationError,
)
from .logging_config import LoggingManager, setup_logging, get_logger

__all__ = [
    # Byte container
    'Binary',
    # Radix model
    'Radix',
    'prefix_of',
    'radix_value',
    'padded_width',
    'format_byte',
    'parse_radix_prefix',
    'parse_byte',
    # Styling
    'ByteCategory',
    'classify_byte',
    'StyleTag',
    'Decoration',
    'StyleLookup',
    'NoStyle',
    'AnsiStyle',
    'strip_styles',
    # Codecs
    'ArrayFormatOptions',
    'array_representation',
    'parse_array_representation',
    'StringFormatOptions',
    'string_representation',
    'parse_string_representation',
    'DumpColumnWidth',
    'DumpFormatOptions',
    'HexDumper',
    'dump_representation',
    'parse_dump_representation',
    'hex_dump',
    'Base64FormatOptions',
    'base64_representation',
    'parse_base64_representation',
    # Dispatch
    'FormatOptions',
    'Representation',
    'format_binary',
    'parse_binary',
    'detect_representation',
    # Configuration
    'ReprConfig',
    'DumpConfig',
    'create_default_config',
    # Exceptions
    'BinReprError',
    'ConfigError',
    'DigitErrorKind',
    'DigitParseError',
    'RepresentationError',
    'InvalidRepresentationError',
    'MissingRadixPrefixError',
    'InvalidRadixPrefixError',
    'InvalidStringQuotesError',
    'InvalidArrayBracketsError',
    'InvalidByteRepresentationError',
    'UnsupportedRepresentationError',
    # Logging
    'LoggingManager',
    'setup_logging',
    'get_logger',
]

__version__ = '1.0.0'
