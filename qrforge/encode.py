"""Encoding of input data into the data codeword bit stream."""

from __future__ import annotations

from typing import Union

from .compact import BitBuffer
from .tables import ECL, Mode, Version, cci_bits, data_bits

__all__ = ["encode", "best_encoding"]

_ALPHANUMERIC = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
_ALPHANUMERIC_VALUES = {ord(char): index for index, char in enumerate(_ALPHANUMERIC)}

_MODE_INDICATORS = {
    Mode.NUMERIC: 0b0001,
    Mode.ALPHANUMERIC: 0b0010,
    Mode.BYTE: 0b0100,
}

_NUMERIC_WIDTHS = {1: 4, 2: 7, 3: 10}

Data = Union[str, bytes, bytearray, memoryview]


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def _digit(byte: int) -> int:
    if not _is_digit(byte):
        raise ValueError(f"unexpected character {chr(byte)!r} in numeric mode")
    return byte - 0x30


def _alphanumeric(byte: int) -> int:
    try:
        return _ALPHANUMERIC_VALUES[byte]
    except KeyError:
        raise ValueError(
            f"unexpected character {chr(byte)!r} in alphanumeric mode"
        ) from None


def best_encoding(data: Data) -> Mode:
    """The most compact mode able to hold ``data``: numeric, alphanumeric or byte."""
    raw = _as_bytes(data)
    if all(_is_digit(byte) for byte in raw):
        return Mode.NUMERIC
    if all(byte in _ALPHANUMERIC_VALUES for byte in raw):
        return Mode.ALPHANUMERIC
    return Mode.BYTE


def _encode_numeric(buffer: BitBuffer, raw: bytes) -> None:
    for start in range(0, len(raw), 3):
        chunk = raw[start:start + 3]
        number = 0
        for byte in chunk:
            number = number * 10 + _digit(byte)
        buffer.push_bits(number, _NUMERIC_WIDTHS[len(chunk)])


def _encode_alphanumeric(buffer: BitBuffer, raw: bytes) -> None:
    for start in range(0, len(raw) - 1, 2):
        first = _alphanumeric(raw[start])
        second = _alphanumeric(raw[start + 1])
        buffer.push_bits(first * 45 + second, 11)
    if len(raw) % 2:
        buffer.push_bits(_alphanumeric(raw[-1]), 6)


def encode(data: Data, ecl: ECL, mode: Mode, version: Version) -> BitBuffer:
    """Encode ``data`` as the full, padded data codeword stream.

    Raises ValueError when a character is not allowed in ``mode`` or when
    the data does not fit in ``version`` at level ``ecl``.
    """
    raw = _as_bytes(data)
    version = Version(version)
    ecl = ECL(ecl)
    capacity = data_bits(version, ecl)

    buffer = BitBuffer(capacity)
    buffer.push_bits(_MODE_INDICATORS[mode], 4)
    buffer.push_bits(len(raw), cci_bits(version, mode))

    if mode is Mode.NUMERIC:
        _encode_numeric(buffer, raw)
    elif mode is Mode.ALPHANUMERIC:
        _encode_alphanumeric(buffer, raw)
    else:
        buffer.push_bytes(raw)

    remaining = capacity - len(buffer)
    if remaining < 0:
        raise ValueError(
            f"data needs {len(buffer)} bits but version {version.number}-{ecl} holds {capacity}"
        )
    buffer.push_bits(0, min(remaining, 4))
    buffer.push_bits(0, -len(buffer) % 8)
    buffer.fill()
    return buffer