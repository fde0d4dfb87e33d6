"""Tests for the radix model: prefixes, widths and per-byte digit handling."""

from __future__ import annotations

import pytest

from binrepr import radix as radix_module
from binrepr.exceptions import DigitErrorKind, DigitParseError, InvalidRepresentationError
from binrepr.radix import Radix


@pytest.mark.parametrize(
    "radix, prefix, base, width",
    [
        (Radix.BINARY, "0b", 2, 8),
        (Radix.OCTAL, "0o", 8, 3),
        (Radix.DECIMAL, "0d", 10, 3),
        (Radix.LOWER_HEX, "0x", 16, 2),
        (Radix.UPPER_HEX, "0X", 16, 2),
    ],
)
def test_radix_constants(radix: Radix, prefix: str, base: int, width: int) -> None:
    assert radix_module.prefix_of(radix) == prefix
    assert radix_module.radix_value(radix) == base
    assert radix_module.padded_width(radix) == width


@pytest.mark.parametrize(
    "radix, byte, padded, compact",
    [
        (Radix.BINARY, 5, "00000101", "101"),
        (Radix.BINARY, 0, "00000000", "0"),
        (Radix.OCTAL, 32, "040", "40"),
        (Radix.DECIMAL, 7, "007", "7"),
        (Radix.DECIMAL, 255, "255", "255"),
        (Radix.LOWER_HEX, 0xAB, "ab", "ab"),
        (Radix.LOWER_HEX, 0x0C, "0c", "c"),
        (Radix.UPPER_HEX, 0x0C, "0C", "C"),
    ],
)
def test_format_byte(radix: Radix, byte: int, padded: str, compact: str) -> None:
    assert radix_module.format_byte(radix, byte, compact=False) == padded
    assert radix_module.format_byte(radix, byte, compact=True) == compact


@pytest.mark.parametrize("radix", list(Radix))
def test_padded_format_has_constant_width(radix: Radix) -> None:
    widths = {len(radix.format_byte(byte)) for byte in range(256)}
    assert widths == {radix.width}


@pytest.mark.parametrize("radix", list(Radix))
def test_parse_byte_inverts_format_byte(radix: Radix) -> None:
    for byte in range(256):
        assert radix.parse_byte(radix.format_byte(byte)) == byte
        assert radix.parse_byte(radix.format_byte(byte, compact=True)) == byte


@pytest.mark.parametrize(
    "char, expected",
    [("b", Radix.BINARY), ("o", Radix.OCTAL), ("d", Radix.DECIMAL),
     ("x", Radix.LOWER_HEX), ("X", Radix.UPPER_HEX)],
)
def test_parse_radix_prefix(char: str, expected: Radix) -> None:
    assert radix_module.parse_radix_prefix(char) is expected


@pytest.mark.parametrize("char", ["c", "B", "h", "", None, "xx"])
def test_parse_radix_prefix_rejects_unknown_characters(char) -> None:
    with pytest.raises(InvalidRepresentationError):
        radix_module.parse_radix_prefix(char)


@pytest.mark.parametrize(
    "radix, digits, kind",
    [
        (Radix.UPPER_HEX, "", DigitErrorKind.EMPTY),
        (Radix.UPPER_HEX, "0x", DigitErrorKind.INVALID_DIGIT),
        (Radix.UPPER_HEX, "+1", DigitErrorKind.INVALID_DIGIT),
        (Radix.UPPER_HEX, "1 f", DigitErrorKind.INVALID_DIGIT),
        (Radix.UPPER_HEX, "1ff", DigitErrorKind.OVERFLOW),
        (Radix.BINARY, "2", DigitErrorKind.INVALID_DIGIT),
        (Radix.BINARY, "100000000", DigitErrorKind.OVERFLOW),
        (Radix.OCTAL, "8", DigitErrorKind.INVALID_DIGIT),
        (Radix.OCTAL, "400", DigitErrorKind.OVERFLOW),
        (Radix.DECIMAL, "256", DigitErrorKind.OVERFLOW),
        (Radix.DECIMAL, "1a", DigitErrorKind.INVALID_DIGIT),
    ],
)
def test_parse_byte_errors_keep_their_cause(radix: Radix, digits: str, kind: DigitErrorKind) -> None:
    with pytest.raises(DigitParseError) as excinfo:
        radix_module.parse_byte(radix, digits)

    assert excinfo.value.kind is kind
    assert excinfo.value.digits == digits
    assert excinfo.value.radix == radix.base


def test_parse_byte_accepts_leading_zeros_and_either_hex_case() -> None:
    assert Radix.DECIMAL.parse_byte("0000255") == 255
    assert Radix.LOWER_HEX.parse_byte("FF") == 255
    assert Radix.UPPER_HEX.parse_byte("ff") == 255


def test_overflow_is_reported_before_a_later_bad_digit() -> None:
    with pytest.raises(DigitParseError) as excinfo:
        Radix.UPPER_HEX.parse_byte("1ffz")
    assert excinfo.value.kind is DigitErrorKind.OVERFLOW
