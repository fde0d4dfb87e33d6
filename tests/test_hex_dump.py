"""Tests for the dump representation and its presets."""

from __future__ import annotations

import pytest

from binrepr import (
    DumpColumnWidth, DumpFormatOptions, HexDumper, Radix, UnsupportedRepresentationError,
    dump_representation, hex_dump, parse_dump_representation, strip_styles,
)
from binrepr.hex_dump import PRESETS
from conftest import DUMP_SAMPLE

CLASSIC_HEADER = "0X       00 01 02 03 04 05 06 07 - 08 09 0A 0B 0C 0D 0E 0F \n"


def test_classic_dump() -> None:
    expected = "\n".join([
        "0X       00 01 02 03 04 05 06 07 - 08 09 0A 0B 0C 0D 0E 0F ",
        "000000:  7B E6 D4 F2 25 5C 62 D3 - 21 24 AB 7E 40 F1 7B CE ",
        "000010:  17 3C 08 D2 D1 CE CC 17 - ",
    ])

    assert dump_representation(DUMP_SAMPLE, DumpFormatOptions.classic_hex_dump()) == expected
    assert hex_dump(DUMP_SAMPLE) == expected


def test_full_final_row_ends_with_newline() -> None:
    text = hex_dump(bytes(16))

    assert text == CLASSIC_HEADER + "000000:  " + "00 " * 8 + "- " + "00 " * 8 + "\n"


def test_partial_row_is_not_padded() -> None:
    assert hex_dump(b"\x01\x02") == CLASSIC_HEADER + "000000:  01 02 "


def test_empty_input_renders_header_only() -> None:
    assert hex_dump(b"") == CLASSIC_HEADER
    assert dump_representation(b"", DumpFormatOptions.classic_hex_dump().with_header_line(False)) == ""


def test_default_options_draw_underline_and_box_separator() -> None:
    text = dump_representation(b"\xff")
    header, underline, row = text.split("\n")

    assert header == "0X       " + "00 01 02 03 04 05 06 07 " + "│ " + "08 09 0A 0B 0C 0D 0E 0F "
    assert underline == " " * 9 + "─" * 24 + "│ " + "─" * 24
    assert row == "000000:  FF "


def test_lower_hex_preset() -> None:
    options = DumpFormatOptions.lower_hex_dump().no_column_index_underline()
    lines = dump_representation(bytes(range(0xA0, 0xB1)), options).split("\n")

    assert lines[0].startswith("0x       00 01")
    assert "0a 0b 0c 0d 0e 0f" in lines[0]
    assert lines[1].startswith("000000:  a0 a1")
    assert lines[2] == "000010:  b0 "


def test_octal_preset_uses_wide_line_index() -> None:
    options = DumpFormatOptions.octal_dump().no_column_index_underline()
    lines = dump_representation(bytes(17), options).split("\n")

    assert lines[0] == ("0o" + " " * 9 + "000 001 002 003 004 005 006 007 "
                        + "│ " + "010 011 012 013 014 015 016 017 ")
    assert lines[1].startswith("00000000:  000 ")
    assert lines[2] == "00000020:  000 "


def test_decimal_preset_indices() -> None:
    options = DumpFormatOptions.decimal_dump().no_column_index_underline()
    lines = dump_representation(bytes([255] * 17), options).split("\n")

    assert lines[0].startswith("0d" + " " * 9 + "000 001")
    assert "008 009 010 011" in lines[0]
    assert lines[2] == "00000016:  255 "


def test_binary_preset_pads_column_indices_to_field_width() -> None:
    options = DumpFormatOptions.binary_dump().no_column_index_underline()
    header, row = dump_representation(b"\x05", options).split("\n")

    assert header.startswith("0b       00000000 00000001 ")
    assert row == "000000:  00000101 "


@pytest.mark.parametrize("name", list(PRESETS))
def test_named_presets(name: str) -> None:
    options = DumpFormatOptions.preset(name)

    assert options == getattr(DumpFormatOptions, PRESETS[name])()
    assert hex_dump(DUMP_SAMPLE, name)


def test_unknown_preset() -> None:
    with pytest.raises(ValueError):
        DumpFormatOptions.preset("nope")


def test_ascii_overlay() -> None:
    options = DumpFormatOptions.classic_hex_dump().with_ascii().with_header_line(False)

    assert dump_representation(b"A\x00\x90\xe9", options) == "000000:  A  00 90 é  "


def test_extended_ascii_draws_control_glyphs() -> None:
    options = DumpFormatOptions.ascii_hex_dump().with_header_line(False)
    text = dump_representation(b"A\x00\x90\n\x7f\xa0\xad", options)

    assert text == "000000:  A  ␀  90 ␊  ␡  ⍽  AD "


def test_ascii_forces_upper_hex_fallback() -> None:
    options = DumpFormatOptions.octal_dump().with_ascii()

    assert options.radix is Radix.UPPER_HEX
    assert options.show_ascii
    assert DumpFormatOptions.octal_dump().radix is Radix.OCTAL


def test_line_numbers_off_removes_gutter() -> None:
    options = DumpFormatOptions.classic_hex_dump().with_line_numbers(False)

    assert dump_representation(b"\x01", options) == (
        "00 01 02 03 04 05 06 07 - 08 09 0A 0B 0C 0D 0E 0F \n01 "
    )


def test_one_column_layout() -> None:
    options = (DumpFormatOptions.classic_hex_dump()
               .one_column_of(DumpColumnWidth.EIGHT)
               .with_header_line(False))

    assert dump_representation(bytes(range(9)), options) == (
        "000000:  00 01 02 03 04 05 06 07 \n000008:  08 "
    )


def test_wide_columns() -> None:
    options = DumpFormatOptions.classic_hex_dump().two_columns_of(DumpColumnWidth.SIXTEEN)
    lines = dump_representation(bytes(33), options).split("\n")

    assert lines[0].count("- ") == 1
    assert lines[0].endswith("1E 1F ")
    assert lines[1].startswith("000000:  ")
    assert lines[2] == "000020:  00 "


def test_custom_spacing() -> None:
    options = (DumpFormatOptions.classic_hex_dump()
               .with_header_line(False)
               .with_spacing(line_index_spacing=": ", value_spacing=""))

    assert dump_representation(b"\x01\x02", options) == "000000: 0102"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"index_radix": Radix.BINARY},
        {"column_width": 12},
        {"column_separator": "||"},
        {"column_index_underline": "=="},
    ],
)
def test_invalid_options(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        DumpFormatOptions(**kwargs)


def test_binary_index_radix_rejected_by_builder() -> None:
    with pytest.raises(ValueError):
        DumpFormatOptions().with_index_radix(Radix.BINARY)


def test_integer_column_width_is_coerced() -> None:
    assert DumpFormatOptions(column_width=16).column_width is DumpColumnWidth.SIXTEEN


def test_colored_dump_has_same_payload() -> None:
    plain = DumpFormatOptions.ascii_hex_dump()
    colored = plain.with_color()

    styled = HexDumper(colored).dump(DUMP_SAMPLE)

    assert "\x1b[" in styled
    assert strip_styles(styled) == HexDumper(plain).dump(DUMP_SAMPLE)


def test_dump_cannot_be_parsed() -> None:
    with pytest.raises(UnsupportedRepresentationError):
        parse_dump_representation(hex_dump(DUMP_SAMPLE))
    with pytest.raises(NotImplementedError):
        parse_dump_representation("")


@pytest.mark.parametrize(
    "name, prefix",
    [("binary", "0b"), ("octal", "0o"), ("decimal", "0d"), ("lower_hex", "0x"), ("classic", "0X")],
)
def test_header_prefix_names_byte_radix(name: str, prefix: str) -> None:
    assert hex_dump(b"\x05", name).startswith(prefix + " ")


def test_header_prefix_ignores_index_radix() -> None:
    options = DumpFormatOptions.decimal_dump().with_lower_hex_indices().no_column_index_underline()
    header = dump_representation(b"", options)

    assert header.startswith("0d       000 001")
    assert "00a 00b" in header
