"""A growable, MSB-first bit buffer used to assemble QR code bit streams."""

from __future__ import annotations

from typing import Iterable, Iterator

__all__ = ["BitBuffer"]

_PAD_BYTES = (0b1110_1100, 0b0001_0001)


class BitBuffer:
    """Bits stored packed in bytes, most significant bit first.

    ``capacity`` is the number of bits the buffer is meant to hold; the
    storage grows on demand and ``fill`` pads up to that capacity.
    """

    __slots__ = ("_data", "_len", "capacity")

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data = bytearray((capacity + 7) // 8)
        self._len = 0

    @classmethod
    def from_bytes(cls, data: Iterable[int], length: int) -> "BitBuffer":
        """Wrap existing bytes, treating the first ``length`` bits as pushed."""
        if length < 0:
            raise ValueError("length must not be negative")
        buffer = cls(length)
        raw = bytearray(data)
        needed = (length + 7) // 8
        if len(raw) < needed:
            raw.extend(bytes(needed - len(raw)))
        buffer._data = raw
        buffer._len = length
        return buffer

    @property
    def data(self) -> bytes:
        """The packed bytes, including storage past the last pushed bit."""
        return bytes(self._data)

    def _reserve(self, bit_count: int) -> None:
        needed = bit_count // 8 + 1
        if needed > len(self._data):
            self._data.extend(bytes(needed - len(self._data)))

    def _push_bit(self, bit: bool) -> None:
        if bit:
            self._data[self._len >> 3] |= 0x80 >> (self._len & 7)
        self._len += 1

    def push_u8(self, bits: int) -> None:
        """Append the eight bits of one byte."""
        if not 0 <= bits <= 0xFF:
            raise ValueError(f"byte value out of range: {bits}")
        self.push_bits(bits, 8)

    def push_bytes(self, data: Iterable[int]) -> None:
        """Append every byte of ``data``."""
        for byte in data:
            self.push_u8(byte)

    def push_bits(self, bits: int, length: int) -> None:
        """Append the lowest ``length`` bits of ``bits``, most significant first."""
        if length < 0:
            raise ValueError("length must not be negative")
        bits &= (1 << length) - 1
        self._reserve(self._len + length)
        for shift in range(length - 1, -1, -1):
            self._push_bit(bool((bits >> shift) & 1))

    def fill(self) -> None:
        """Pad up to the capacity with alternating 236 and 17 bytes."""
        if self._len % 8:
            raise ValueError("fill requires a byte-aligned length")
        for index, _ in enumerate(range(self._len, self.capacity, 8)):
            self.push_u8(_PAD_BYTES[index % 2])

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[bool]:
        for index in range(self._len):
            yield bool(self._data[index >> 3] & (0x80 >> (index & 7)))

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self)

    def __repr__(self) -> str:
        return f"BitBuffer(len={self._len}, capacity={self.capacity})"