"""
Column-aligned hex-dump representation with optional ASCII overlay.

    DumpRepr  ::= [ HeaderLine [ UnderLine ] ] { DataLine }
    HeaderLine ::= Prefix ' '* ColumnIndex{w} [ Sep ColumnIndex{w} ] '\n'
    DataLine  ::= LineIndex ':' Spacer ( ByteField [ Sep ] )* '\n'

Example (classic preset):

    0X       00 01 02 03 04 05 06 07 - 08 09 0A 0B 0C 0D 0E 0F
    000000:  7B E6 D4 F2 25 5C 62 D3 - 21 24 AB 7E 40 F1 7B CE
    000010:  17 3C 08 D2 D1 CE CC 17 -

Dumps are format-only: the ASCII overlay and glyph substitution are lossy, so
there is no parser.
"""

from dataclasses import dataclass, replace
from enum import IntEnum

from .exceptions import UnsupportedRepresentationError
from .logging_config import get_logger
from .options import RadixBuilder
from .radix import DEFAULT_RADIX, Radix
from .styles import StyleLookup, StyleTag, resolve_style

logger = get_logger('dump')


class DumpColumnWidth(IntEnum):
    """Number of bytes in one dump column."""
    EIGHT = 8
    SIXTEEN = 16
    THIRTY_TWO = 32


# Control pictures for 0x00-0x20 and DEL, plus a visible NBSP (extended ASCII mode)
CONTROL_GLYPHS = {byte: chr(0x2400 + byte) for byte in range(0x21)}
CONTROL_GLYPHS[0x7F] = '\u2421'
CONTROL_GLYPHS[0xA0] = '\u237d'

PRESETS = {
    'classic': 'classic_hex_dump',
    'ascii': 'ascii_hex_dump',
    'hex': 'hex_dump',
    'lower_hex': 'lower_hex_dump',
    'octal': 'octal_dump',
    'binary': 'binary_dump',
    'decimal': 'decimal_dump',
}


@dataclass(frozen=True)
class DumpFormatOptions(RadixBuilder):
    """
    Options for the dump representation.

    Defaults: upper-hex bytes and indices, header line with a '─' underline,
    line numbers, two columns of 8 bytes separated by '│', no ASCII overlay.
    """
    radix: Radix = DEFAULT_RADIX
    index_radix: Radix = DEFAULT_RADIX
    index_header_line: bool = True
    index_line_numbers: bool = True
    column_width: DumpColumnWidth = DumpColumnWidth.EIGHT
    two_columns: bool = True
    show_ascii: bool = False
    show_extended_ascii: bool = False
    line_index_spacing: str = ':  '
    value_spacing: str = ' '
    column_separator: str = '\u2502'
    column_index_underline: str | None = '\u2500'
    colored: bool = False

    def __post_init__(self):
        # Binary line indices would be unreasonably wide
        if self.index_radix is Radix.BINARY:
            raise ValueError("Binary radix is not supported for dump line and column indices")
        if self.column_width not in set(DumpColumnWidth):
            raise ValueError(
                f"column_width must be one of 8, 16 or 32, got {self.column_width}"
            )
        object.__setattr__(self, 'column_width', DumpColumnWidth(self.column_width))
        if len(self.column_separator) != 1:
            raise ValueError(f"column_separator must be a single character: {self.column_separator!r}")
        if self.column_index_underline is not None and len(self.column_index_underline) != 1:
            raise ValueError(
                f"column_index_underline must be a single character: {self.column_index_underline!r}"
            )

    # Presets

    @classmethod
    def classic_hex_dump(cls) -> 'DumpFormatOptions':
        return (cls().with_upper_hex_bytes().with_upper_hex_indices()
                .two_columns_of(DumpColumnWidth.EIGHT)
                .no_column_index_underline()
                .separate_columns_with('-')
                .with_ascii(False))

    @classmethod
    def ascii_hex_dump(cls) -> 'DumpFormatOptions':
        return (cls().with_upper_hex_bytes().with_upper_hex_indices()
                .two_columns_of(DumpColumnWidth.EIGHT)
                .no_column_index_underline()
                .separate_columns_with('-')
                .with_extended_ascii(True))

    @classmethod
    def hex_dump(cls) -> 'DumpFormatOptions':
        return (cls().with_upper_hex_bytes().with_upper_hex_indices()
                .two_columns_of(DumpColumnWidth.EIGHT)
                .with_ascii(False))

    @classmethod
    def lower_hex_dump(cls) -> 'DumpFormatOptions':
        return (cls().with_lower_hex_bytes().with_lower_hex_indices()
                .two_columns_of(DumpColumnWidth.EIGHT)
                .with_ascii(False))

    @classmethod
    def octal_dump(cls) -> 'DumpFormatOptions':
        return (cls().with_octal_bytes().with_octal_indices()
                .two_columns_of(DumpColumnWidth.EIGHT)
                .with_ascii(False))

    @classmethod
    def binary_dump(cls) -> 'DumpFormatOptions':
        return (cls().with_binary_bytes().with_upper_hex_indices()
                .two_columns_of(DumpColumnWidth.EIGHT)
                .with_ascii(False))

    @classmethod
    def decimal_dump(cls) -> 'DumpFormatOptions':
        return (cls().with_decimal_bytes().with_decimal_indices()
                .two_columns_of(DumpColumnWidth.EIGHT)
                .with_ascii(False))

    @classmethod
    def preset(cls, name: str) -> 'DumpFormatOptions':
        """Look up a preset by name: classic, ascii, hex, octal, binary, decimal or lower_hex."""
        if name not in PRESETS:
            raise ValueError(f"Unknown dump preset '{name}'. Valid presets: {', '.join(PRESETS)}")
        return getattr(cls, PRESETS[name])()

    # Builders

    def with_index_radix(self, index_radix: Radix) -> 'DumpFormatOptions':
        return replace(self, index_radix=index_radix)

    def with_octal_indices(self) -> 'DumpFormatOptions':
        return self.with_index_radix(Radix.OCTAL)

    def with_decimal_indices(self) -> 'DumpFormatOptions':
        return self.with_index_radix(Radix.DECIMAL)

    def with_lower_hex_indices(self) -> 'DumpFormatOptions':
        return self.with_index_radix(Radix.LOWER_HEX)

    def with_upper_hex_indices(self) -> 'DumpFormatOptions':
        return self.with_index_radix(Radix.UPPER_HEX)

    def with_header_line(self, header_line: bool = True) -> 'DumpFormatOptions':
        return replace(self, index_header_line=header_line)

    def with_line_numbers(self, line_numbers: bool = True) -> 'DumpFormatOptions':
        return replace(self, index_line_numbers=line_numbers)

    def underline_column_index_with(self, underline: str) -> 'DumpFormatOptions':
        return replace(self, column_index_underline=underline)

    def no_column_index_underline(self) -> 'DumpFormatOptions':
        return replace(self, column_index_underline=None)

    def separate_columns_with(self, column_separator: str) -> 'DumpFormatOptions':
        return replace(self, column_separator=column_separator)

    def with_column_width(self, column_width: DumpColumnWidth) -> 'DumpFormatOptions':
        return replace(self, column_width=column_width)

    def one_column_of(self, column_width: DumpColumnWidth) -> 'DumpFormatOptions':
        return replace(self, two_columns=False, column_width=column_width)

    def two_columns_of(self, column_width: DumpColumnWidth) -> 'DumpFormatOptions':
        return replace(self, two_columns=True, column_width=column_width)

    def with_ascii(self, show_ascii: bool = True) -> 'DumpFormatOptions':
        """Toggle the ASCII overlay; non-printable bytes fall back to upper-hex."""
        radix = Radix.UPPER_HEX if show_ascii else self.radix
        return replace(self, radix=radix, show_ascii=show_ascii)

    def with_extended_ascii(self, show_extended_ascii: bool = True) -> 'DumpFormatOptions':
        """Enable the ASCII overlay, also drawing control bytes as visible glyphs."""
        return replace(self.with_ascii(True), show_extended_ascii=show_extended_ascii)

    def with_spacing(self, line_index_spacing: str | None = None,
                     value_spacing: str | None = None) -> 'DumpFormatOptions':
        return replace(
            self,
            line_index_spacing=self.line_index_spacing if line_index_spacing is None else line_index_spacing,
            value_spacing=self.value_spacing if value_spacing is None else value_spacing,
        )

    # Layout

    @property
    def byte_counts(self) -> tuple[int, int]:
        """(bytes before the column separator, bytes per row); mid is 0 for one column."""
        width = int(self.column_width)
        if self.two_columns:
            return width, width * 2
        return 0, width

    @property
    def line_index_width(self) -> int:
        if self.index_radix in (Radix.DECIMAL, Radix.OCTAL):
            return 8
        return 6

    @property
    def data_value_width(self) -> int:
        return self.radix.width


class HexDumper:
    """Dump renderer for one set of DumpFormatOptions."""

    def __init__(self, options: DumpFormatOptions | None = None, style: StyleLookup | None = None):
        """
        Initialize HexDumper.

        Args:
            options: Layout options (defaults when None)
            style: Style lookup used when options.colored is set
        """
        self.options = options or DumpFormatOptions()
        self.style = resolve_style(self.options.colored, style)

    def dump(self, data) -> str:
        """
        Render ``data`` as a dump.

        Rows are not padded: the last, possibly partial, row ends right after
        its last field (and separator, when it stops at the column midpoint).

        Args:
            data: Binary or bytes-like data

        Returns:
            Dump text
        """
        options = self.options
        mid, end = options.byte_counts
        parts = []

        if options.index_header_line:
            parts.append(self._format_header())

        for index, byte in enumerate(data):
            position = index + 1
            if index % end == 0 and options.index_line_numbers:
                parts.append(self._format_line_index(index))

            if options.show_ascii:
                parts.append(self._format_ascii_char(byte))
            else:
                parts.append(self._format_data_value(byte))

            if position % end == 0:
                parts.append('\n')
            elif options.two_columns and position % mid == 0:
                parts.append(self._format_column_separator())

        return ''.join(parts)

    def _gutter_width(self) -> int:
        if not self.options.index_line_numbers:
            return 0
        return self.options.line_index_width + len(self.options.line_index_spacing)

    def _format_header(self) -> str:
        """Column index line and optional underline."""
        options = self.options
        mid, end = options.byte_counts
        parts = []

        if options.index_line_numbers:
            parts.append(options.radix.prefix.ljust(self._gutter_width()))
        for i in range(end):
            parts.append(self._format_column_index(i))
            if options.two_columns and (i + 1) % end != 0 and (i + 1) % mid == 0:
                parts.append(self._format_column_separator())
        parts.append('\n')

        underline = self._format_header_underline()
        if underline:
            parts.append(' ' * self._gutter_width())
            parts.append(underline)
        return ''.join(parts)

    def _format_header_underline(self) -> str | None:
        options = self.options
        if options.column_index_underline is None:
            return None
        width = (options.data_value_width + len(options.value_spacing)) * int(options.column_width)
        rule = self.style.apply(StyleTag.SEPARATOR, options.column_index_underline * width)
        if options.two_columns:
            rule = rule + self._format_column_separator() + rule
        return rule + '\n'

    def _format_column_separator(self) -> str:
        options = self.options
        return self.style.apply(StyleTag.SEPARATOR, options.column_separator + options.value_spacing)

    def _format_column_index(self, index: int) -> str:
        options = self.options
        digits = options.index_radix.format_number(index, options.data_value_width)
        return self.style.apply(StyleTag.INDEX, digits) + options.value_spacing

    def _format_line_index(self, index: int) -> str:
        options = self.options
        digits = options.index_radix.format_number(index, options.line_index_width)
        return self.style.apply(StyleTag.INDEX, digits + options.line_index_spacing)

    def _format_data_value(self, byte: int) -> str:
        options = self.options
        return self.style.byte(byte, options.radix.format_byte(byte)) + options.value_spacing

    def _format_ascii_char(self, byte: int) -> str:
        """Printable Latin-1 character, control glyph, or upper-hex fallback."""
        options = self.options
        char = self._decode_char(byte, options.show_extended_ascii)
        if char is None:
            text = format(byte, f'0{options.data_value_width}X')
        else:
            text = char.ljust(options.data_value_width)
        return self.style.byte(byte, text) + options.value_spacing

    @staticmethod
    def _decode_char(byte: int, extended: bool) -> str | None:
        # ISO 8859-1; 0x80-0x9F are undefined and 0xAD (soft hyphen) is invisible
        if 0x21 <= byte <= 0x7E or 0xA1 <= byte <= 0xAC or 0xAE <= byte <= 0xFF:
            return chr(byte)
        if extended:
            return CONTROL_GLYPHS.get(byte)
        return None


def dump_representation(value, options: DumpFormatOptions | None = None,
                        style: StyleLookup | None = None) -> str:
    """
    Format bytes as a dump representation.

    Args:
        value: Binary or bytes-like data
        options: DumpFormatOptions (defaults when None)
        style: Style lookup used when options.colored is set

    Returns:
        Dump text
    """
    return HexDumper(options, style).dump(value)


def parse_dump_representation(text: str):
    """Dumps cannot be parsed back into bytes."""
    logger.debug("Rejected attempt to parse a dump representation")
    raise UnsupportedRepresentationError("Parsing the dump representation is not supported.")


def hex_dump(data, preset: str = 'classic', colored: bool = False) -> str:
    """
    Create a dump using one of the named presets.

    Args:
        data: Binary or bytes-like data
        preset: classic, ascii, hex, octal, binary, decimal or lower_hex
        colored: Use ANSI colors

    Returns:
        Dump text
    """
    options = DumpFormatOptions.preset(preset).with_color(colored)
    return dump_representation(data, options)
