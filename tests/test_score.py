import pytest

from qrforge.layout import create_matrix, transpose
from qrforge.masking import Mask, apply_mask
from qrforge.matrix import QRCode
from qrforge.module import Module
from qrforge.score import (
    dark_module_score,
    line_scores,
    pattern_and_line_score,
    score,
    square_score,
)
from qrforge.tables import PERCENT_SCORE, Version

T = True
F = False


def _data_line(values):
    return [Module.data(v) for v in values]


def test_finder_like_pattern_scores_forty():
    assert line_scores(_data_line([T, F, T, T, T, F, T])) == (40, 0)


def test_pattern_ignored_outside_data():
    line = [Module.finder_pattern(v) for v in [T, F, T, T, T, F, T]]
    assert line_scores(line) == (0, 0)


def test_run_of_five_scores():
    assert line_scores(_data_line([F] * 5)) == (0, 3)


def test_short_run_scores_nothing():
    assert line_scores(_data_line([F, F, F, F, T, T, T, T])) == (0, 0)


def test_longer_run_scores_more():
    short = line_scores(_data_line([T] * 6))[1]
    longer = line_scores(_data_line([T] * 9))[1]
    assert longer - short == 3


@pytest.mark.parametrize("size", [2, 3, 5, 10])
def test_uniform_matrix_squares(size):
    assert square_score(QRCode(size)) == 3 * (size - 1) ** 2


def test_checkerboard_has_no_squares():
    qr = QRCode(10)
    apply_mask(qr, Mask.CHECKERBOARD)
    assert square_score(qr) == 0


def test_dark_score_all_light():
    assert dark_module_score(QRCode(10)) == PERCENT_SCORE[0]


def test_dark_score_half_dark():
    qr = QRCode(10)
    apply_mask(qr, Mask.CHECKERBOARD)
    assert dark_module_score(qr) == PERCENT_SCORE[50]


def test_symmetric_matrix_rows_equal_columns():
    qr = QRCode(10)
    apply_mask(qr, Mask.MEADOW)
    rows, columns, _ = pattern_and_line_score(qr, transpose(qr))
    assert rows == columns


def test_uniform_matrix_runs_sum_over_rows():
    qr = QRCode(10)
    per_row = line_scores(qr[0])[1]
    rows, columns, patterns = pattern_and_line_score(qr, transpose(qr))
    assert rows == 10 * per_row
    assert columns == rows
    assert patterns == 0


def test_swapping_arguments_swaps_row_and_column():
    qr = create_matrix(Version.V02)
    apply_mask(qr, Mask.DIAMONDS)
    t = transpose(qr)
    rows, columns, patterns = pattern_and_line_score(qr, t)
    assert pattern_and_line_score(t, qr) == (columns, rows, patterns)


def test_total_is_sum_of_parts():
    qr = create_matrix(Version.V03)
    apply_mask(qr, Mask.LARGE_CHECKERBOARD)
    t = transpose(qr)
    rows, columns, patterns = pattern_and_line_score(qr, t)
    assert score(qr, t) == rows + columns + patterns + square_score(qr) + dark_module_score(qr)