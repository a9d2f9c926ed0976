"""Places the codeword bit stream on the matrix and picks the data mask."""

from __future__ import annotations

from itertools import chain
from typing import Optional, Union

from .compact import BitBuffer
from .encode import Data, encode
from .layout import create_matrix, create_matrix_format_info, transpose
from .masking import Mask, apply_mask
from .matrix import QRCode
from .module import ModuleType
from .polynomials import structure
from .score import score
from .tables import ECL, Mode, Version

__all__ = ["place_data", "place_on_matrix", "build_matrix"]

Bits = Union[BitBuffer, bytes, bytearray]


def place_data(qr: QRCode, bits: Bits) -> int:
    """Write bits into the data modules of ``qr`` in the zig-zag order.

    Bits past the end of the stored bytes are placed as light modules.
    Returns the number of data modules written.
    """
    raw = bits.data if isinstance(bits, BitBuffer) else bytes(bits)
    n = qr.size

    def bit_at(index: int) -> bool:
        byte_index = index >> 3
        if byte_index >= len(raw):
            return False
        return bool(raw[byte_index] & (0x80 >> (index & 7)))

    columns = list(chain(range(0, 6), range(7, n)))[::-1][::2]
    index = 0
    upward = True
    for x in columns:
        rows = range(n - 1, -1, -1) if upward else range(n)
        for y in rows:
            for column in (x, x - 1):
                module = qr[y][column]
                if module.module_type is ModuleType.DATA:
                    module.value = bit_at(index)
                    index += 1
        upward = not upward
    return index


def place_on_matrix(
    bits: Bits, ecl: ECL, version: Version, mask: Optional[Mask] = None
) -> QRCode:
    """Build the final matrix from the interleaved codewords.

    With ``mask`` left as None, the mask with the lowest penalty score is
    chosen; the chosen mask is stored on the returned matrix.
    """
    version = Version(version)
    qr = create_matrix(version)
    place_data(qr, bits)

    if mask is None:
        transposed = transpose(qr)
        best_score = None
        best_mask = Mask.CHECKERBOARD
        for candidate in Mask:
            masked = qr.copy()
            apply_mask(masked, candidate)
            candidate_score = score(masked, transposed)
            if best_score is None or candidate_score < best_score:
                best_score = candidate_score
                best_mask = candidate
    else:
        best_mask = Mask(mask)

    create_matrix_format_info(qr, ecl, best_mask)
    apply_mask(qr, best_mask)
    qr.mask = best_mask
    return qr


def build_matrix(
    data: Data,
    ecl: ECL,
    mode: Mode,
    version: Version,
    mask: Optional[Mask] = None,
) -> QRCode:
    """Encode ``data`` and produce the complete QR code matrix."""
    version = Version(version)
    ecl = ECL(ecl)
    codewords = encode(data, ecl, mode, version)
    interleaved = structure(codewords.data, ecl, version)
    total_bits = version.max_bytes() * 8 + version.missing_bits()
    bits = BitBuffer.from_bytes(interleaved, total_bits)

    qr = place_on_matrix(bits, ecl, version, mask)
    qr.mode = mode
    qr.ecl = ecl
    qr.version = version
    return qr