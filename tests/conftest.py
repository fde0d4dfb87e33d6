"""Shared fixtures for the binrepr test suite."""

from __future__ import annotations

import pytest

LOREM_IPSUM_TEXT = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua."
).encode("utf-8")

# 0x00..0x1F
TEST_ARRAY = bytes(range(32))

# Bytes of the classic dump example
DUMP_SAMPLE = bytes([
    0x7B, 0xE6, 0xD4, 0xF2, 0x25, 0x5C, 0x62, 0xD3,
    0x21, 0x24, 0xAB, 0x7E, 0x40, 0xF1, 0x7B, 0xCE,
    0x17, 0x3C, 0x08, 0xD2, 0xD1, 0xCE, 0xCC, 0x17,
])


@pytest.fixture
def lorem_ipsum() -> bytes:
    return LOREM_IPSUM_TEXT


@pytest.fixture
def all_bytes() -> bytes:
    return bytes(range(256))
