"""
Interactive score tracker session.

Reads menu choices line by line and drives the store, the handicap
calculation and the listing. All state lives in ``run_session``; the input
and output callables are injected so the loop can be driven from tests.
"""

from __future__ import annotations

from typing import Callable, List

from golfscores.analysis.handicap import (
    HANDICAP_ROUND_COUNT,
    calculate_handicap,
    has_enough_scores,
)
from golfscores.config.models import TrackerConfig
from golfscores.io.reporting import format_scores_listing
from golfscores.io.score_store import load_scores, save_scores
from golfscores.logging import get_logger
from golfscores.models import Score
from golfscores.validation import parse_score, validate_date

logger = get_logger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

MENU = (
    "Please choose an option:\n"
    "1. Add a new golf score\n"
    "2. Calculate your current handicap score\n"
    "3. View all scores\n"
    "Type 'Q' or 'q' to quit."
)


def prompt_score(read_line: ReadLine, write: Write, allow_zero_fallback: bool = False) -> int:
    while True:
        raw = read_line("Enter your score: ")
        try:
            return parse_score(raw, allow_zero_fallback=allow_zero_fallback)
        except ValueError as e:
            write(f"Error: {e}")


def prompt_course(read_line: ReadLine) -> str:
    return read_line("Enter the course: ").strip()


def prompt_date(read_line: ReadLine, write: Write) -> str:
    while True:
        date = read_line("Enter date played in yyyy-mm-dd format: ").strip()
        if validate_date(date):
            return date
        write("Invalid date format. Please enter the date in yyyy-mm-dd format.")


def prompt_new_score(read_line: ReadLine, write: Write, config: TrackerConfig) -> Score:
    value = prompt_score(read_line, write, config.allow_invalid_score_as_zero)
    course = prompt_course(read_line)
    date = prompt_date(read_line, write)
    return Score(value, course, date)


def _store_kwargs(config: TrackerConfig) -> dict:
    return {
        "data_dir": config.data_dir,
        "extension": config.file_extension,
        "encoding": config.encoding,
    }


def _save(player_name: str, entered: List[Score], config: TrackerConfig, write: Write) -> bool:
    try:
        added = save_scores(player_name, entered, **_store_kwargs(config))
    except (OSError, ValueError) as e:
        write(f"Error saving scores: {e}")
        return False
    if added:
        write(f"Scores saved to file titled {player_name}{config.file_extension} in {config.data_dir}")
    return True


def _load(player_name: str, config: TrackerConfig, write: Write) -> List[Score]:
    try:
        return load_scores(player_name, **_store_kwargs(config))
    except OSError as e:
        write(f"Error loading scores: {e}")
        return []


def show_handicap(player_name: str, config: TrackerConfig, write: Write) -> float:
    scores = _load(player_name, config, write)
    handicap = calculate_handicap(scores)
    if has_enough_scores(scores):
        write(f"Your average golf score is: {handicap:.2f}")
    else:
        write(
            f"Not enough scores to calculate handicap. "
            f"At least {HANDICAP_ROUND_COUNT} scores are needed."
        )
    return handicap


def show_scores(player_name: str, config: TrackerConfig, write: Write) -> List[Score]:
    scores = _load(player_name, config, write)
    write(format_scores_listing(player_name, scores))
    return scores


def run_session(
    player_name: str,
    config: TrackerConfig,
    read_line: ReadLine = input,
    write: Write = print,
) -> int:
    """Run the menu loop until the player quits or input ends. Returns an exit code."""
    entered: List[Score] = []
    logger.info("Starting session for %s (data dir: %s)", player_name, config.data_dir)

    while True:
        write(MENU)
        try:
            choice = read_line("> ").strip()
        except EOFError:
            choice = "q"

        try:
            if choice == "1":
                entered.append(prompt_new_score(read_line, write, config))
                _save(player_name, entered, config, write)
            elif choice == "2":
                show_handicap(player_name, config, write)
            elif choice == "3":
                show_scores(player_name, config, write)
            elif choice in ("q", "Q"):
                if _save(player_name, entered, config, write):
                    write("Exiting... Data saved.")
                else:
                    write("Exiting... Some scores could not be saved.")
                return 0
            else:
                write(f"Unrecognised option {choice!r}.")
        except EOFError:
            write("Input ended before the score was complete; it was not recorded.")
            _save(player_name, entered, config, write)
            return 0
