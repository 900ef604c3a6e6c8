"""
Test the top-three handicap calculation.
"""

from __future__ import annotations

import logging

import pytest

from golfscores.analysis.handicap import (
    calculate_handicap,
    has_enough_scores,
    rank_scores,
)
from golfscores.models import Score


def _scores(*values: int):
    return [Score(v, f"Course {i}", "2024-01-01") for i, v in enumerate(values)]


def test_handicap_of_exactly_three_scores():
    assert calculate_handicap(_scores(70, 85, 90)) == pytest.approx((90 + 85 + 70) / 3)


def test_handicap_uses_only_top_three():
    assert calculate_handicap(_scores(100, 90, 80, 70)) == 90.0


def test_handicap_with_ties():
    assert calculate_handicap(_scores(80, 90, 90, 90, 60)) == 90.0


@pytest.mark.parametrize("values", [(), (72,), (72, 80)])
def test_handicap_needs_three_scores(values, caplog):
    with caplog.at_level(logging.WARNING, logger="golfscores.analysis.handicap"):
        assert calculate_handicap(_scores(*values)) == 0
    assert "Not enough scores" in caplog.text
    assert has_enough_scores(_scores(*values)) is False


def test_handicap_does_not_reorder_input():
    scores = _scores(70, 100, 85, 90)
    original = list(scores)

    calculate_handicap(scores)
    assert scores == original


def test_rank_scores_returns_new_list_highest_first():
    scores = _scores(70, 100, 85)
    ranked = rank_scores(scores)

    assert [s.score for s in ranked] == [100, 85, 70]
    assert ranked is not scores
    assert [s.score for s in scores] == [70, 100, 85]


def test_handicap_returns_float():
    assert isinstance(calculate_handicap(_scores(70, 71, 72)), float)
