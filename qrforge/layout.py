"""Function patterns of the QR code matrix: finders, timing, alignment and info areas."""

from __future__ import annotations

from .masking import Mask
from .matrix import QRCode
from .module import Module
from .tables import ECL, Version, ecm_to_format_information

__all__ = [
    "transpose",
    "create_matrix",
    "create_matrix_pattern",
    "create_matrix_timing",
    "create_matrix_dark_module",
    "create_matrix_alignments",
    "create_matrix_version_info",
    "create_matrix_format_info",
]

#: Width of a finder pattern.
_POSITION_SIZE = 7


def _clone(module: Module) -> Module:
    return Module(module.value, module.module_type)


def transpose(qr: QRCode) -> QRCode:
    """Return a new matrix with rows and columns swapped."""
    result = qr.copy()
    for i in range(qr.size):
        for j in range(i + 1, qr.size):
            result[i][j] = _clone(qr[j][i])
            result[j][i] = _clone(qr[i][j])
    return result


def create_matrix(version: Version) -> QRCode:
    """An empty matrix for ``version`` with every function pattern in place.

    The format information area is reserved with light modules; it is
    written later, once the mask is known.
    """
    version = Version(version)
    qr = QRCode(version.size())

    create_matrix_pattern(qr)
    create_matrix_timing(qr)
    create_matrix_dark_module(qr)
    create_matrix_alignments(qr, version)
    create_matrix_version_info(qr, version)
    _create_matrix_empty(qr)

    n = qr.size
    for i in range(6):
        qr[8][i] = Module.format(Module.LIGHT)
        qr[i][8] = Module.format(Module.LIGHT)
        qr[8][n - 1 - i] = Module.format(Module.LIGHT)
        qr[n - 1 - i][8] = Module.format(Module.LIGHT)

    qr[8][7] = Module.format(Module.LIGHT)
    qr[8][8] = Module.format(Module.LIGHT)
    qr[7][8] = Module.format(Module.LIGHT)

    qr[8][n - 1 - 6] = Module.format(Module.LIGHT)
    qr[8][n - 1 - 7] = Module.format(Module.LIGHT)

    qr[n - 1 - 6][8] = Module.format(Module.LIGHT)

    return qr


def create_matrix_pattern(qr: QRCode) -> None:
    """Place the three finder patterns in the top-left, bottom-left and top-right corners."""
    n = qr.size
    offsets = ((0, 0), (n - _POSITION_SIZE, 0), (0, n - _POSITION_SIZE))
    for y, x in offsets:
        for dy in range(_POSITION_SIZE):
            for dx in range(_POSITION_SIZE):
                ring = max(abs(dy - 3), abs(dx - 3))
                qr[y + dy][x + dx] = Module.finder_pattern(ring != 2)


def create_matrix_timing(qr: QRCode) -> None:
    """Place the horizontal and vertical timing lines."""
    n = qr.size
    start = _POSITION_SIZE + 1
    for i in range(start, n - _POSITION_SIZE):
        value = Module.DARK if start % 2 == i % 2 else Module.LIGHT
        qr[_POSITION_SIZE - 1][i] = Module.timing(value)
        qr[i][_POSITION_SIZE - 1] = Module.timing(value)


def create_matrix_dark_module(qr: QRCode) -> None:
    """Place the module that is always dark."""
    qr[qr.size - 8][8] = Module.dark(Module.DARK)


def create_matrix_alignments(qr: QRCode, version: Version) -> None:
    """Place the alignment patterns that ``version`` requires."""
    version = Version(version)
    if version is Version.V01:
        return

    grid = version.alignment_patterns_grid()
    last = len(grid) - 1
    for i, centre_y in enumerate(grid):
        for j, centre_x in enumerate(grid):
            if (i == 0 and j in (0, last)) or (i == last and j == 0):
                continue
            for dy in range(-2, 3):
                for dx in range(-2, 3):
                    dark = max(abs(dy), abs(dx)) != 1
                    qr[centre_y + dy][centre_x + dx] = Module.alignment(dark)


def create_matrix_version_info(qr: QRCode, version: Version) -> None:
    """Place both copies of the version information (version 7 and above)."""
    version = Version(version)
    if version < Version.V07:
        return

    info = version.information()
    n = qr.size
    for i in range(3):
        for j in range(6):
            value = bool(info & (1 << (j * 3 + i)))
            qr[j][n - 11 + i] = Module.version(value)
            qr[n - 11 + i][j] = Module.version(value)


def create_matrix_format_info(qr: QRCode, ecl: ECL, mask: Mask) -> None:
    """Write both copies of the format information for ``ecl`` and ``mask``."""
    info = ecm_to_format_information(ecl, mask)
    n = qr.size

    def bit(index: int) -> bool:
        return bool(info & (1 << index))

    for i in range(6):
        qr[8][5 - i] = Module.format(bit(i + 9))
        qr[n - 6 + i][8] = Module.format(bit(i + 9))

    for i in range(6):
        qr[i][8] = Module.format(bit(i))
        qr[8][n - i - 1] = Module.format(bit(i))

    qr[8][7] = Module.format(bit(8))
    qr[n - 7][8] = Module.format(bit(8))

    qr[8][8] = Module.format(bit(7))
    qr[8][n - 8] = Module.format(bit(7))

    qr[7][8] = Module.format(bit(6))
    qr[8][n - 7] = Module.format(bit(6))


def _create_matrix_empty(qr: QRCode) -> None:
    """Place the light separators around the finder patterns."""
    n = qr.size
    for i in range(8):
        qr[i][7] = Module.empty(Module.LIGHT)
        qr[7][i] = Module.empty(Module.LIGHT)

        qr[n - 8 + i][7] = Module.empty(Module.LIGHT)
        qr[n - 8][i] = Module.empty(Module.LIGHT)

        qr[i][n - 8] = Module.empty(Module.LIGHT)
        qr[7][n - 8 + i] = Module.empty(Module.LIGHT)