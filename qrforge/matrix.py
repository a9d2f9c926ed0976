"""The square module matrix of a QR code and its terminal rendering."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List

from .module import Module

__all__ = ["QRCode"]

_EMPTY = " "
_BLOCK = "\u2588"
_TOP = "\u2580"
_BOTTOM = "\u2584"

_GLYPHS = {
    (True, True): _EMPTY,
    (True, False): _BOTTOM,
    (False, True): _TOP,
    (False, False): _BLOCK,
}


def _pair_line(top: Iterable[bool], bottom: Iterable[bool]) -> str:
    return "".join(_GLYPHS[(a, b)] for a, b in zip(top, bottom))


class QRCode:
    """A ``size`` x ``size`` grid of modules, plus the settings used to build it.

    ``qr[row][column]`` gives a module; rows are plain lists and can be
    assigned into.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._rows: List[List[Module]] = [
            [Module.data(Module.LIGHT) for _ in range(size)] for _ in range(size)
        ]
        self.version = None
        self.ecl = None
        self.mask = None
        self.mode = None

    def __getitem__(self, row: int) -> List[Module]:
        return self._rows[row]

    def __iter__(self) -> Iterator[List[Module]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return self.size

    def copy(self) -> "QRCode":
        """Return an independent copy of the matrix and its settings."""
        clone = QRCode.__new__(QRCode)
        clone.size = self.size
        clone._rows = [[Module(m.value, m.module_type) for m in row] for row in self._rows]
        clone.version = self.version
        clone.ecl = self.ecl
        clone.mask = self.mask
        clone.mode = self.mode
        return clone

    def to_str(self) -> str:
        """Render the matrix with a margin, two rows per text line."""
        n = self.size
        lines = [_BOTTOM + _pair_line([True] * n, [False] * n) + _BOTTOM]
        for i in range(0, n - 1, 2):
            top = (m.value for m in self._rows[i])
            bottom = (m.value for m in self._rows[i + 1])
            lines.append(_BLOCK + _pair_line(top, bottom) + _BLOCK)
        last = (m.value for m in self._rows[n - 1])
        lines.append(_BLOCK + _pair_line(last, [False] * n) + _BLOCK)
        return "\n".join(lines)

    def print(self) -> None:
        """Write the rendered matrix, followed by a newline, to standard output."""
        rendered = self.to_str()
        sys.stdout.write(rendered + "\n")
        sys.stdout.flush()

    def __repr__(self) -> str:
        return (
            f"QRCode(size={self.size}, version={self.version!r}, ecl={self.ecl!r}, "
            f"mask={self.mask!r}, mode={self.mode!r})"
        )