import pytest

from qrforge.masking import Mask, apply_mask
from qrforge.matrix import QRCode
from qrforge.module import Module


def _grid(text):
    return [[cell == "1" for cell in row] for row in text.split()]


EXPECTED = {
    Mask.CHECKERBOARD: _grid(
        """
        1010101010 0101010101 1010101010 0101010101 1010101010
        0101010101 1010101010 0101010101 1010101010 0101010101
        """
    ),
    Mask.HORIZONTAL_LINES: _grid(
        """
        1111111111 0000000000 1111111111 0000000000 1111111111
        0000000000 1111111111 0000000000 1111111111 0000000000
        """
    ),
    Mask.VERTICAL_LINES: _grid(" ".join(["1001001001"] * 10)),
    Mask.DIAGONAL_LINES: _grid(
        """
        1001001001 0010010010 0100100100 1001001001 0010010010
        0100100100 1001001001 0010010010 0100100100 1001001001
        """
    ),
    Mask.LARGE_CHECKERBOARD: _grid(
        """
        1110001110 1110001110 0001110001 0001110001 1110001110
        1110001110 0001110001 0001110001 1110001110 1110001110
        """
    ),
    Mask.FIELDS: _grid(
        """
        1111111111 1000001000 1001001001 1010101010 1001001001
        1000001000 1111111111 1000001000 1001001001 1010101010
        """
    ),
    Mask.DIAMONDS: _grid(
        """
        1111111111 1110001110 1101101101 1010101010 1011011011
        1000111000 1111111111 1110001110 1101101101 1010101010
        """
    ),
    Mask.MEADOW: _grid(
        """
        1010101010 0001110001 1000111000 0101010101 1110001110
        0111000111 1010101010 0001110001 1000111000 0101010101
        """
    ),
}


def _values(qr):
    return [[module.value for module in row] for row in qr]


@pytest.mark.parametrize("mask", list(Mask))
def test_mask_on_empty_matrix(mask):
    qr = QRCode(10)
    apply_mask(qr, mask)
    assert _values(qr) == EXPECTED[mask]


@pytest.mark.parametrize("mask", list(Mask))
def test_mask_twice_restores_matrix(mask):
    qr = QRCode(12)
    qr[3][5].value = True
    qr[7][1].value = True
    before = _values(qr)
    apply_mask(qr, mask)
    apply_mask(qr, mask)
    assert _values(qr) == before


def test_mask_skips_function_modules():
    qr = QRCode(10)
    qr[0][0] = Module.finder_pattern(Module.LIGHT)
    qr[2][2] = Module.timing(Module.DARK)
    apply_mask(qr, Mask.CHECKERBOARD)
    assert qr[0][0].value is False
    assert qr[2][2].value is True
    assert qr[0][2].value is True


def test_mask_accepts_integer():
    qr = QRCode(10)
    apply_mask(qr, 1)
    assert _values(qr) == EXPECTED[Mask.HORIZONTAL_LINES]