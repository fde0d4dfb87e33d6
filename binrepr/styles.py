"""
Byte classification and optional visual styling of representations.

Styling is advisory: a representation rendered with any StyleLookup carries
exactly the same payload characters as the unstyled one.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class ByteCategory(Enum):
    """Display category of a byte under ISO 8859-1 conventions."""
    CONTROL = 'control'
    PRINTABLE = 'printable'
    PRINTABLE_EXTENDED = 'printable_extended'
    UNDEFINED = 'undefined'


def classify_byte(byte: int) -> ByteCategory:
    """
    Classify a byte for styling.

    Args:
        byte: Value in 0..255

    Returns:
        CONTROL for 0x00-0x20, 0x7F, 0xA0 (NBSP) and 0xAD (soft hyphen),
        PRINTABLE for 0x21-0x7E, UNDEFINED for 0x80-0x9F and
        PRINTABLE_EXTENDED for the remaining Latin-1 range.
    """
    if byte <= 0x20 or byte in (0x7F, 0xA0, 0xAD):
        return ByteCategory.CONTROL
    if byte < 0x7F:
        return ByteCategory.PRINTABLE
    if 0x80 <= byte <= 0x9F:
        return ByteCategory.UNDEFINED
    return ByteCategory.PRINTABLE_EXTENDED


class StyleTag(Enum):
    """Component of a representation that may be decorated."""
    PREFIX = 'prefix'
    DELIMITER = 'delimiter'
    SEPARATOR = 'separator'
    INDEX = 'index'
    VALUE_CONTROL = ByteCategory.CONTROL
    VALUE_PRINTABLE = ByteCategory.PRINTABLE
    VALUE_PRINTABLE_EXTENDED = ByteCategory.PRINTABLE_EXTENDED
    VALUE_UNDEFINED = ByteCategory.UNDEFINED

    @classmethod
    def value_of(cls, category: ByteCategory) -> 'StyleTag':
        return cls(category)

    @classmethod
    def for_byte(cls, byte: int) -> 'StyleTag':
        return cls(classify_byte(byte))


@dataclass(frozen=True)
class Decoration:
    """Text emitted around a styled component."""
    start: str = ''
    end: str = ''

    def apply(self, text: str) -> str:
        if not self.start and not self.end:
            return text
        return f'{self.start}{text}{self.end}'


NO_DECORATION = Decoration()


class StyleLookup(ABC):
    """Capability mapping a style tag to its decoration."""

    @abstractmethod
    def style_for(self, tag: StyleTag) -> Decoration:
        """Return the decoration for ``tag``."""
        pass

    def apply(self, tag: StyleTag, text: str) -> str:
        return self.style_for(tag).apply(text)

    def byte(self, byte: int, text: str) -> str:
        return self.apply(StyleTag.for_byte(byte), text)


class NoStyle(StyleLookup):
    """Identity styling."""

    def style_for(self, tag: StyleTag) -> Decoration:
        return NO_DECORATION


class AnsiStyle(StyleLookup):
    """ANSI terminal colors."""

    DIM = '\033[2m'
    BOLD = '\033[1m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BRIGHT_RED = '\033[91m'
    RESET = '\033[0m'

    STYLES = {
        StyleTag.PREFIX: '',
        StyleTag.DELIMITER: DIM,
        StyleTag.SEPARATOR: DIM,
        StyleTag.INDEX: DIM,
        StyleTag.VALUE_CONTROL: BOLD + BRIGHT_RED,
        StyleTag.VALUE_PRINTABLE: BOLD + GREEN,
        StyleTag.VALUE_PRINTABLE_EXTENDED: GREEN,
        StyleTag.VALUE_UNDEFINED: YELLOW,
    }

    def style_for(self, tag: StyleTag) -> Decoration:
        code = self.STYLES.get(tag, '')
        if not code:
            return NO_DECORATION
        return Decoration(code, self.RESET)


NO_STYLE = NoStyle()
ANSI_STYLE = AnsiStyle()

_SGR_PATTERN = re.compile(r'\x1b\[[0-9;]*m')


def resolve_style(colored: bool, style: StyleLookup | None = None) -> StyleLookup:
    """Pick the lookup for a call: identity unless the options ask for color."""
    if not colored:
        return NO_STYLE
    return style if style is not None else ANSI_STYLE


def strip_styles(text: str) -> str:
    """Remove ANSI SGR sequences from styled output."""
    return _SGR_PATTERN.sub('', text)
