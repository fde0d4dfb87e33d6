"""Tests for the quoted string representation."""

from __future__ import annotations

import pytest

from binrepr import (
    DigitErrorKind, InvalidByteRepresentationError, InvalidRadixPrefixError,
    InvalidRepresentationError, InvalidStringQuotesError, MissingRadixPrefixError, Radix,
    StringFormatOptions, parse_string_representation, string_representation, strip_styles,
)
from conftest import TEST_ARRAY


def test_default_is_padded_upper_hex() -> None:
    expected = '0X"' + "_".join(f"{b:02X}" for b in TEST_ARRAY) + '"'

    assert string_representation(TEST_ARRAY) == expected


def test_compact_drops_separator_but_keeps_width() -> None:
    options = StringFormatOptions().with_lower_hex_bytes().with_compact()

    assert string_representation(b"\x01\x0a\xff", options) == '0x"010aff"'
    assert string_representation(b"\x01\x0a", options.with_decimal_bytes()) == '0d"001010"'


@pytest.mark.parametrize("radix", list(Radix))
def test_empty_buffer(radix: Radix) -> None:
    text = string_representation(b"", StringFormatOptions(radix=radix))

    assert text == f'{radix.prefix}""'
    assert parse_string_representation(text) == b""


@pytest.mark.parametrize("radix", list(Radix))
@pytest.mark.parametrize("compact", [False, True])
def test_every_byte_survives_parsing(all_bytes: bytes, radix: Radix, compact: bool) -> None:
    options = StringFormatOptions(radix=radix, compact=compact)

    assert parse_string_representation(string_representation(all_bytes, options)) == all_bytes


def test_separated_fields_may_be_short() -> None:
    assert parse_string_representation('0x"1_a_ff"') == b"\x01\x0a\xff"
    assert parse_string_representation('0X"Ff"') == b"\xff"


@pytest.mark.parametrize(
    "text, error",
    [
        ('""', MissingRadixPrefixError),
        ('0""', InvalidRadixPrefixError),
        ('0z""', InvalidRadixPrefixError),
        ('0x00_ff"', InvalidStringQuotesError),
        ('0x"00_ff', InvalidStringQuotesError),
        ('0x"', InvalidStringQuotesError),
        ('0x"00"ff"', InvalidStringQuotesError),
        ('0x"1ff"', InvalidRepresentationError),
        ('0d"0010"', InvalidRepresentationError),
    ],
)
def test_structural_errors(text: str, error: type) -> None:
    with pytest.raises(error):
        parse_string_representation(text)


@pytest.mark.parametrize(
    "text, kind",
    [
        ('0x"0x"', DigitErrorKind.INVALID_DIGIT),
        ('0x"0 ff"', DigitErrorKind.INVALID_DIGIT),
        ('0x"00_0 "', DigitErrorKind.INVALID_DIGIT),
        ('0x"1ff_00"', DigitErrorKind.OVERFLOW),
        ('0d"300"', DigitErrorKind.OVERFLOW),
        ('0x"00__01"', DigitErrorKind.EMPTY),
    ],
)
def test_byte_errors(text: str, kind: DigitErrorKind) -> None:
    with pytest.raises(InvalidByteRepresentationError) as exc_info:
        parse_string_representation(text)

    assert exc_info.value.kind is kind


def test_colored_output_strips_to_plain() -> None:
    options = StringFormatOptions().with_color()
    styled = string_representation(b"\x00A", options)

    assert styled != '0X"00_41"'
    assert strip_styles(styled) == '0X"00_41"'
