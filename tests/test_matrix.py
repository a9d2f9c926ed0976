import pytest

from qrforge.matrix import QRCode
from qrforge.module import Module, ModuleType


def test_default_matrix_is_light_data():
    qr = QRCode(5)
    assert len(qr) == 5
    for row in qr:
        assert len(row) == 5
        assert all(m.value is False for m in row)
        assert all(m.module_type == ModuleType.DATA for m in row)


def test_default_settings_are_unset():
    qr = QRCode(3)
    assert (qr.version, qr.ecl, qr.mask, qr.mode) == (None, None, None, None)


def test_indexing_allows_assignment():
    qr = QRCode(4)
    qr[2][3] = Module.timing(True)
    assert qr[2][3].module_type == ModuleType.TIMING
    assert qr[2][3].value is True
    assert qr[3][2].value is False


def test_copy_is_independent():
    qr = QRCode(3)
    qr.version = "v"
    qr[0][0].toggle()
    clone = qr.copy()
    clone[0][0].toggle()
    clone[1][1] = Module.alignment(True)
    assert qr[0][0].value is True
    assert clone[0][0].value is False
    assert qr[1][1].module_type == ModuleType.DATA
    assert clone.version == "v"


def test_to_str_shape():
    qr = QRCode(5)
    lines = qr.to_str().split("\n")
    assert len(lines) == 4
    assert all(len(line) == 7 for line in lines)


def test_to_str_top_margin_is_bottom_halves():
    qr = QRCode(5)
    first = qr.to_str().split("\n")[0]
    assert set(first) == {"\u2584"}


def test_to_str_light_matrix_is_solid():
    qr = QRCode(3)
    lines = qr.to_str().split("\n")
    assert all(set(line) == {"\u2588"} for line in lines[1:])


def test_to_str_dark_top_of_pair():
    qr = QRCode(3)
    qr[0][0].value = True
    lines = qr.to_str().split("\n")
    assert lines[1][1] == "\u2584"
    assert lines[1][2] == "\u2588"


def test_to_str_dark_bottom_of_pair():
    qr = QRCode(3)
    qr[1][1].value = True
    assert qr.to_str().split("\n")[1][2] == "\u2580"


def test_to_str_both_dark_is_blank():
    qr = QRCode(3)
    qr[0][2].value = True
    qr[1][2].value = True
    assert qr.to_str().split("\n")[1][3] == " "


def test_to_str_last_odd_row():
    qr = QRCode(3)
    qr[2][1].value = True
    assert qr.to_str().split("\n")[2][2] == "\u2584"


def test_print_writes_rendering(capsys):
    qr = QRCode(3)
    qr[1][0].value = True
    qr.print()
    assert capsys.readouterr().out == qr.to_str() + "\n"


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        QRCode(0)