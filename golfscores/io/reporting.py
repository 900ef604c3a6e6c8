"""
Score listing output.

Renders a player's rounds as a numbered table for the terminal.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from golfscores.models import SCORE_HEADER, Score


def scores_to_frame(scores: Sequence[Score]) -> pd.DataFrame:
    """Build a DataFrame of scores in entry order with a 1-based index."""
    df = pd.DataFrame([s.to_row() for s in scores], columns=list(SCORE_HEADER))
    df["Score"] = df["Score"].astype(int)
    df.index = pd.RangeIndex(start=1, stop=len(df) + 1)
    return df


def format_scores_listing(player_name: str, scores: Sequence[Score]) -> str:
    heading = f"Score data for {player_name}"
    if not scores:
        return f"{heading}\nNo scores recorded yet."
    return f"{heading}\n{scores_to_frame(scores).to_string()}"
