"""Penalty scoring of a masked matrix; the lower the score, the better the mask."""

from __future__ import annotations

from typing import Sequence, Tuple

from .matrix import QRCode
from .module import Module, ModuleType
from .tables import PERCENT_SCORE

__all__ = [
    "line_scores",
    "square_score",
    "dark_module_score",
    "pattern_and_line_score",
    "score",
]

_PATTERN_LEN = 7
_PATTERN = 0b101_1101
_PATTERN_WINDOW = (1 << _PATTERN_LEN) - 1


def line_scores(line: Sequence[Module]) -> Tuple[int, int]:
    """Score one row or column: ``(finder_like_pattern_score, run_score)``.

    Each dark-light-dark-dark-dark-light-dark pattern among data modules
    adds 40; each run of N >= 5 same-coloured modules adds N - 2.
    """
    if not line:
        return 0, 0

    run_score = 0
    pattern_score = 0

    count = 1
    current = not line[0].value
    window = 0
    count_data = 0

    for module in line:
        value = module.value
        window = ((window << 1) | int(value)) & _PATTERN_WINDOW
        count_data += 1

        if value != current:
            if count >= 5:
                run_score += count - 2
            count = 0
            current = value

        if module.module_type is not ModuleType.DATA:
            if count >= 5:
                run_score += count - 2
            count_data = 0
            count = 0
            continue

        if count_data >= _PATTERN_LEN and window == _PATTERN:
            pattern_score += 40

        count += 1

    if count >= 5:
        run_score += count - 2

    return pattern_score, run_score


def square_score(qr: QRCode) -> int:
    """Add 3 for every 2x2 block of a single colour."""
    total = 0
    for upper, lower in zip(qr[: qr.size - 1], qr[1:]) if False else zip(
        (qr[i] for i in range(qr.size - 1)), (qr[i] for i in range(1, qr.size))
    ):
        count_data = 2
        for j in range(qr.size - 1):
            right_upper = upper[j + 1]
            right_lower = lower[j + 1]
            if (
                right_upper.module_type is not ModuleType.DATA
                or right_lower.module_type is not ModuleType.DATA
            ):
                count_data = 0

            values = {upper[j].value, lower[j].value, right_upper.value, right_lower.value}
            if count_data >= 2 and len(values) == 1:
                total += 3

            count_data += 1
    return total


def dark_module_score(qr: QRCode) -> int:
    """Penalty for the proportion of dark modules straying from 50%."""
    total = qr.size * qr.size
    dark = sum(1 for row in qr for module in row if module.value == Module.DARK)
    percent = min(dark * 100 // total, len(PERCENT_SCORE) - 1)
    return PERCENT_SCORE[percent]


def pattern_and_line_score(qr: QRCode, transposed: QRCode) -> Tuple[int, int, int]:
    """``(row_run_score, column_run_score, pattern_score)`` over the whole matrix."""
    row_score = 0
    column_score = 0
    pattern_score = 0
    for row, column in zip(qr, transposed):
        row_pattern, row_runs = line_scores(row)
        column_pattern, column_runs = line_scores(column)
        row_score += row_runs
        column_score += column_runs
        pattern_score += row_pattern + column_pattern
    return row_score, column_score, pattern_score


def score(qr: QRCode, transposed: QRCode) -> int:
    """Total penalty score of ``qr``; ``transposed`` supplies its columns."""
    row_score, column_score, pattern_score = pattern_and_line_score(qr, transposed)
    return (
        row_score
        + pattern_score
        + column_score
        + dark_module_score(qr)
        + square_score(qr)
    )