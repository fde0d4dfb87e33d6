"""
Copy-on-write byte container.

A Binary either borrows a read-only view of a caller's buffer or owns its own
bytearray. The first mutation of a borrowed Binary copies the data, so the
caller's buffer is never written to.
"""

import ipaddress
from typing import Iterable, Iterator

from .radix import Radix

BytesLike = bytes | bytearray | memoryview


class Binary:
    """Byte sequence with value semantics and borrowed/owned storage."""

    __slots__ = ('_data',)

    def __init__(self, data: 'BytesLike | Binary | Iterable[int]' = b''):
        """
        Initialize Binary.

        Args:
            data: A bytes-like object (borrowed), another Binary (shares a
                borrowed view, copies owned storage) or an iterable of ints
                (owned copy)
        """
        if isinstance(data, Binary):
            self._data = data._data if data.is_borrowed() else bytearray(data._data)
        elif isinstance(data, (bytes, bytearray, memoryview)):
            self._data = memoryview(data).cast('B').toreadonly()
        elif isinstance(data, str):
            raise TypeError("Binary from str needs an encoding; use Binary.from_value()")
        else:
            self._data = bytearray(data)

    @classmethod
    def owned(cls, data: 'BytesLike | Iterable[int]' = b'') -> 'Binary':
        """Create a Binary holding its own copy of ``data``."""
        binary = cls.__new__(cls)
        binary._data = bytearray(data)
        return binary

    @classmethod
    def from_value(cls, value) -> 'Binary':
        """
        Convert a native value to its byte form.

        Supports bytes-like objects, str (UTF-8), bool (one byte) and IPv4/IPv6
        addresses (packed octets). Use from_int() for integers.
        """
        if isinstance(value, (Binary, bytes, bytearray, memoryview)):
            return cls(value)
        if isinstance(value, str):
            return cls.owned(value.encode('utf-8'))
        if isinstance(value, bool):
            return cls.owned([int(value)])
        if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            return cls.owned(value.packed)
        raise TypeError(f"Cannot convert {type(value).__name__} to Binary")

    @classmethod
    def from_int(cls, value: int, length: int, byteorder: str = 'little',
                 signed: bool = False) -> 'Binary':
        """Encode an integer as exactly ``length`` bytes."""
        return cls.owned(value.to_bytes(length, byteorder, signed=signed))

    # Storage state

    def is_borrowed(self) -> bool:
        return isinstance(self._data, memoryview)

    def is_owned(self) -> bool:
        return isinstance(self._data, bytearray)

    def to_mut(self) -> bytearray:
        """Return the owned bytearray, copying a borrowed view first."""
        if isinstance(self._data, memoryview):
            self._data = bytearray(self._data)
        return self._data

    def into_owned(self) -> bytes:
        return bytes(self._data)

    # Mutation (copy-on-write)

    def append(self, byte: int) -> None:
        self.to_mut().append(byte)

    push = append

    def extend(self, data: 'BytesLike | Iterable[int]') -> None:
        self.to_mut().extend(data)

    def pop(self) -> int | None:
        if not self._data:
            return None
        return self.to_mut().pop()

    def insert(self, index: int, byte: int) -> None:
        self.to_mut().insert(index, byte)

    def remove(self, index: int) -> int:
        """Remove and return the byte at ``index``."""
        data = self.to_mut()
        byte = data[index]
        del data[index]
        return byte

    def clear(self) -> None:
        self.to_mut().clear()

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Binary.owned(self._data[index])
        return self._data[index]

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def is_empty(self) -> bool:
        return not self._data

    def __eq__(self, other) -> bool:
        if isinstance(other, Binary):
            return bytes(self._data) == bytes(other._data)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(self._data) == bytes(other)
        return NotImplemented

    __hash__ = None

    # Text forms

    def __repr__(self) -> str:
        kind = 'borrowed' if self.is_borrowed() else 'owned'
        return f"Binary({bytes(self._data)!r}, {kind})"

    def __str__(self) -> str:
        return self.__format__('d')

    def __format__(self, format_spec: str) -> str:
        """
        Array representation selected by a format spec.

        ``b``, ``o``, ``d``, ``x`` and ``X`` pick the radix (empty means
        decimal); a leading ``#`` selects the compact form, e.g.
        ``f"{value:#x}"`` gives ``0x[4c,6f]``.
        """
        from .array_codec import ArrayFormatOptions, array_representation

        spec = format_spec or 'd'
        compact = spec.startswith('#')
        if compact:
            spec = spec[1:] or 'd'
        if len(spec) != 1 or not Radix.is_radix_char(spec):
            raise ValueError(f"Unknown format code '{format_spec}' for object of type 'Binary'")

        options = ArrayFormatOptions(radix=Radix.from_char(spec), compact=compact)
        return array_representation(self, options)
