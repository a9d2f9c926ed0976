"""The eight QR code data mask patterns."""

from __future__ import annotations

from enum import IntEnum

from .matrix import QRCode
from .module import ModuleType

__all__ = ["Mask", "apply_mask"]


class Mask(IntEnum):
    """Mask patterns; each applies only to data modules.

    In the conditions below ``x`` is the column and ``y`` the row.
    """

    #: ``(x + y) % 2 == 0``
    CHECKERBOARD = 0
    #: ``y % 2 == 0``
    HORIZONTAL_LINES = 1
    #: ``x % 3 == 0``
    VERTICAL_LINES = 2
    #: ``(x + y) % 3 == 0``
    DIAGONAL_LINES = 3
    #: ``(x // 3 + y // 2) % 2 == 0``
    LARGE_CHECKERBOARD = 4
    #: ``(x * y) % 2 + (x * y) % 3 == 0``
    FIELDS = 5
    #: ``((x * y) % 2 + (x * y) % 3) % 2 == 0``
    DIAMONDS = 6
    #: ``((x + y) % 2 + (x * y) % 3) % 2 == 0``
    MEADOW = 7

    def applies(self, row: int, column: int) -> bool:
        """Whether the module at ``(row, column)`` is flipped by this mask."""
        if self is Mask.CHECKERBOARD:
            return (row + column) % 2 == 0
        if self is Mask.HORIZONTAL_LINES:
            return row % 2 == 0
        if self is Mask.VERTICAL_LINES:
            return column % 3 == 0
        if self is Mask.DIAGONAL_LINES:
            return (row + column) % 3 == 0
        if self is Mask.LARGE_CHECKERBOARD:
            return (row // 2 + column // 3) % 2 == 0
        product = row * column
        if self is Mask.FIELDS:
            return product % 2 + product % 3 == 0
        if self is Mask.DIAMONDS:
            return (product % 2 + product % 3) % 2 == 0
        return ((row + column) % 2 + product % 3) % 2 == 0


def apply_mask(qr: QRCode, mask: Mask) -> None:
    """Toggle, in place, every data module of ``qr`` selected by ``mask``."""
    mask = Mask(mask)
    for row_index, row in enumerate(qr):
        for column_index, module in enumerate(row):
            if module.module_type is ModuleType.DATA and mask.applies(row_index, column_index):
                module.toggle()