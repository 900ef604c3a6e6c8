"""
Player Score Store

One CSV file per player, named ``<player><extension>`` inside the data
directory. The file is only ever appended to: the header is written once when
the file is empty and each round is written at most once.
"""

from __future__ import annotations

import csv
import os
from pathlib import Path
from typing import Iterable, List, Optional, Set, Union

from golfscores.logging import get_logger
from golfscores.models import SCORE_HEADER, Score, ScoreKey
from golfscores.validation import validate_player_name

logger = get_logger(__name__)

DEFAULT_EXTENSION = ".csv"
DEFAULT_ENCODING = "utf-8"
LINE_TERMINATOR = "\n"


def player_file_path(
    player_name: str,
    data_dir: Union[str, Path] = ".",
    extension: str = DEFAULT_EXTENSION,
) -> Path:
    """Return the score file path for a player."""
    name = validate_player_name(player_name)
    return Path(data_dir) / f"{name}{extension}"


def _row_to_score(record: List[str]) -> Optional[Score]:
    if len(record) < 3:
        return None
    try:
        value = int(record[0].strip())
    except ValueError:
        return None
    return Score(value, record[1], record[2])


def _row_key(record: List[str]) -> Optional[ScoreKey]:
    score = _row_to_score(record)
    return score.key if score is not None else None


def _read_records(path: Path, encoding: str) -> List[List[str]]:
    with path.open("r", encoding=encoding, newline="") as f:
        return list(csv.reader(f))


def load_scores(
    player_name: str,
    data_dir: Union[str, Path] = ".",
    extension: str = DEFAULT_EXTENSION,
    encoding: str = DEFAULT_ENCODING,
) -> List[Score]:
    """Load every valid round from a player's file, in file order.

    A missing file is an empty history. A file that cannot be decoded or
    parsed is logged as a warning and also treated as empty. Rows with fewer
    than three fields or a non-integer score (including the header) are
    skipped individually.
    """
    path = player_file_path(player_name, data_dir, extension)
    try:
        records = _read_records(path, encoding)
    except FileNotFoundError:
        logger.info("No score history found for %s at %s", player_name, path)
        return []
    except (csv.Error, UnicodeDecodeError) as e:
        logger.warning("Could not read score file %s: %s", path, e)
        return []

    scores: List[Score] = []
    skipped = 0
    for line_no, record in enumerate(records, start=1):
        score = _row_to_score(record)
        if score is None:
            if record and tuple(field.strip() for field in record) != SCORE_HEADER:
                logger.debug("Skipping malformed row %d in %s: %r", line_no, path, record)
                skipped += 1
            continue
        scores.append(score)

    if skipped:
        logger.info("Skipped %d malformed row(s) in %s", skipped, path)
    logger.info("Loaded %d score(s) for %s", len(scores), player_name)
    return scores


def read_existing_keys(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> Set[ScoreKey]:
    """Return the dedup keys of rows already present in ``path``.

    Keys are built the same way as for rows read by ``load_scores``, so ``070``
    on disk matches a score of 70. Raises ValueError when the file exists but
    cannot be decoded or parsed, since duplicates could not be ruled out.
    """
    p = Path(path)
    try:
        records = _read_records(p, encoding)
    except FileNotFoundError:
        return set()
    except (csv.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Could not read existing rows from {p}: {e}") from e

    keys: Set[ScoreKey] = set()
    for record in records:
        key = _row_key(record)
        if key is not None:
            keys.add(key)
    return keys


def _ends_with_newline(path: Path) -> bool:
    with path.open("rb") as f:
        f.seek(-1, 2)
        return f.read(1) in (b"\n", b"\r")


def save_scores(
    player_name: str,
    new_scores: Iterable[Score],
    data_dir: Union[str, Path] = ".",
    extension: str = DEFAULT_EXTENSION,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """Append rounds not yet on disk to the player's file.

    Safe to call repeatedly with overlapping scores: a round whose
    (score, course, date) is already present is skipped. The header is
    written only when the file is empty. Returns the number of rows appended.
    OSError is logged and re-raised, as is ValueError when the existing file
    cannot be read; nothing is appended in either case and rows already on
    disk are never rewritten.
    """
    path = player_file_path(player_name, data_dir, extension)
    try:
        existing = read_existing_keys(path, encoding)
    except (OSError, ValueError) as e:
        logger.error("Not saving to %s, existing scores could not be read: %s", path, e)
        raise

    pending: List[List[str]] = []
    for score in new_scores:
        if score.key in existing:
            continue
        existing.add(score.key)
        pending.append(score.to_row())

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding=encoding, newline="") as f:
            writer = csv.writer(f, lineterminator=LINE_TERMINATOR)
            if os.fstat(f.fileno()).st_size == 0:
                writer.writerow(SCORE_HEADER)
            elif pending and not _ends_with_newline(path):
                f.write(LINE_TERMINATOR)
            writer.writerows(pending)
    except OSError as e:
        logger.error("Failed to save scores to %s: %s", path, e)
        raise

    if pending:
        logger.info("Saved %d new score(s) to %s", len(pending), path)
    else:
        logger.debug("No new scores to save for %s", player_name)
    return len(pending)
