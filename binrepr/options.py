"""
Immutable format option value objects shared by the array and string codecs.

Options are frozen dataclasses; every ``with_*`` builder returns a new object.
"""

from dataclasses import dataclass, replace

from .radix import DEFAULT_RADIX, Radix


class RadixBuilder:
    """Builders selecting the radix each byte is rendered in."""

    def with_byte_radix(self, radix: Radix):
        return replace(self, radix=radix)

    def with_binary_bytes(self):
        return self.with_byte_radix(Radix.BINARY)

    def with_octal_bytes(self):
        return self.with_byte_radix(Radix.OCTAL)

    def with_decimal_bytes(self):
        return self.with_byte_radix(Radix.DECIMAL)

    def with_lower_hex_bytes(self):
        return self.with_byte_radix(Radix.LOWER_HEX)

    def with_upper_hex_bytes(self):
        return self.with_byte_radix(Radix.UPPER_HEX)

    def with_color(self, colored: bool = True):
        return replace(self, colored=colored)


@dataclass(frozen=True)
class ByteFormatOptions(RadixBuilder):
    """Radix, padded/compact toggle and styling toggle."""
    radix: Radix = DEFAULT_RADIX
    compact: bool = False
    colored: bool = False

    def __post_init__(self):
        if not isinstance(self.radix, Radix):
            raise TypeError(f"radix must be a Radix, got {type(self.radix).__name__}")

    def with_compact(self, compact: bool = True):
        return replace(self, compact=compact)
