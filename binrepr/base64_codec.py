"""
Base64 representation (standard alphabet).
"""

import base64
import binascii
from dataclasses import dataclass, replace

from .binary import Binary
from .exceptions import InvalidRepresentationError
from .logging_config import get_logger

logger = get_logger('base64')


@dataclass(frozen=True)
class Base64FormatOptions:
    """Options for base64 output; compact drops the '=' padding."""
    compact: bool = False

    def with_compact(self, compact: bool = True) -> 'Base64FormatOptions':
        return replace(self, compact=compact)


def base64_representation(value, options: Base64FormatOptions | None = None) -> str:
    """Encode bytes as standard base64."""
    options = options or Base64FormatOptions()
    text = base64.b64encode(bytes(value)).decode('ascii')
    if options.compact:
        text = text.rstrip('=')
    return text


def parse_base64_representation(text: str) -> Binary:
    """
    Decode standard base64, padded or unpadded.

    Raises:
        InvalidRepresentationError: Characters outside the alphabet or a bad length
    """
    stripped = text.strip()
    padded = stripped + '=' * (-len(stripped) % 4)
    try:
        return Binary.owned(base64.b64decode(padded, validate=True))
    except binascii.Error as e:
        logger.debug(f"Invalid base64 input: {e}")
        raise InvalidRepresentationError(f"Invalid base64 representation: {e}") from e
