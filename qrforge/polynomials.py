"""Reed-Solomon error correction codewords and block interleaving."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from .tables import ECL, Version, data_codewords, ecc_to_groups, get_polynomial

__all__ = ["division", "structure"]

_PRIMITIVE = 0x11D


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Exponent and logarithm tables of GF(256) with the QR primitive polynomial."""
    exp: List[int] = []
    value = 1
    for _ in range(256):
        exp.append(value)
        value <<= 1
        if value & 0x100:
            value ^= _PRIMITIVE
    log = [0] * 256
    for power in range(255):
        log[exp[power]] = power
    return tuple(exp), tuple(log)


_EXP, _LOG = _build_tables()


def division(dividend: Iterable[int], generator: Sequence[int]) -> bytes:
    """Divide ``dividend`` (integer coefficients) by ``generator`` (alpha exponents).

    Returns the remainder, which holds ``len(generator) - 1`` error
    correction codewords.
    """
    message = list(dividend)
    degree = len(generator) - 1
    if degree < 0:
        raise ValueError("generator polynomial must not be empty")
    buffer = message + [0] * degree
    for index in range(len(message)):
        coefficient = buffer[index]
        if coefficient == 0:
            continue
        alpha = _LOG[coefficient]
        for offset, exponent in enumerate(generator):
            buffer[index + offset] ^= _EXP[(exponent + alpha) % 255]
    return bytes(buffer[len(message):])


def _interleave(blocks: Sequence[bytes]) -> Iterator[int]:
    longest = max((len(block) for block in blocks), default=0)
    for position in range(longest):
        for block in blocks:
            if position < len(block):
                yield block[position]


def structure(data: Iterable[int], ecl: ECL, version: Version) -> bytes:
    """Split data codewords into blocks, add error correction and interleave.

    The result holds the interleaved data codewords followed by the
    interleaved error correction codewords, ``version.max_bytes()`` bytes.
    """
    version = Version(version)
    ecl = ECL(ecl)
    payload = bytes(data)
    needed = data_codewords(version, ecl)
    if len(payload) < needed:
        raise ValueError(
            f"expected at least {needed} data codewords, got {len(payload)}"
        )

    generator = get_polynomial(version, ecl)
    (g1_count, g1_size), (g2_count, g2_size) = ecc_to_groups(ecl, version)
    sizes = [g1_size] * g1_count + [g2_size] * g2_count

    blocks: List[bytes] = []
    offset = 0
    for size in sizes:
        blocks.append(payload[offset:offset + size])
        offset += size

    errors = [division(block, generator) for block in blocks]
    return bytes(_interleave(blocks)) + bytes(_interleave(errors))