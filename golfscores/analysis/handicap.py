"""
Handicap calculation.

The "handicap" here is a simplified figure: the mean of a player's three
highest recorded scores. It is not the regulation golf handicap.
"""

from __future__ import annotations

from typing import List, Sequence

from golfscores.logging import get_logger
from golfscores.models import Score

logger = get_logger(__name__)

HANDICAP_ROUND_COUNT = 3


def rank_scores(scores: Sequence[Score]) -> List[Score]:
    """Return a new list of scores, highest first. The input is left as is."""
    return sorted(scores, key=lambda s: s.score, reverse=True)


def has_enough_scores(scores: Sequence[Score]) -> bool:
    return len(scores) >= HANDICAP_ROUND_COUNT


def calculate_handicap(scores: Sequence[Score]) -> float:
    """Average of the top three scores, or 0.0 when fewer than three exist."""
    if not has_enough_scores(scores):
        logger.warning(
            "Not enough scores to calculate handicap: %d recorded, at least %d needed",
            len(scores),
            HANDICAP_ROUND_COUNT,
        )
        return 0.0

    top = rank_scores(scores)[:HANDICAP_ROUND_COUNT]
    return sum(s.score for s in top) / HANDICAP_ROUND_COUNT
