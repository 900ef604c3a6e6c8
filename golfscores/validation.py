"""
Input validation for values typed in at the prompt.

All helpers are pure: they never prompt or print. Re-asking for input after a
rejection is the caller's job.
"""

from __future__ import annotations

import os
import re

from golfscores.logging import get_logger

logger = get_logger(__name__)

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_date(candidate: str) -> bool:
    """Return True when ``candidate`` looks like YYYY-MM-DD.

    Surrounding whitespace is ignored. Only the shape is checked, so a value
    such as ``2024-02-30`` is accepted.
    """
    if candidate is None:
        return False
    return DATE_PATTERN.match(candidate.strip()) is not None


def parse_score(raw: str, allow_zero_fallback: bool = False) -> int:
    """Convert a typed score to an int.

    Raises ValueError for non-numeric input unless ``allow_zero_fallback`` is
    set, in which case the score degrades to 0.
    """
    text = (raw or "").strip()
    try:
        return int(text)
    except ValueError:
        if allow_zero_fallback:
            logger.warning("Could not convert score %r to int; recording 0", text)
            return 0
        raise ValueError(f"Score must be a whole number, got {text!r}") from None


def validate_player_name(name: str) -> str:
    """Return the trimmed player name, or raise ValueError if it cannot be a file stem."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValueError("Player name must not be empty")
    separators = {os.sep, "/", "\\"}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in cleaned for sep in separators) or cleaned in {".", ".."}:
        raise ValueError(f"Player name {cleaned!r} cannot be used as a file name")
    return cleaned
