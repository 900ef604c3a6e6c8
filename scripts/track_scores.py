#!/usr/bin/env python3
"""
Golf Score Tracker

Records golf scores for one player in <data-dir>/<player>.csv and reports a
simple handicap (the mean of the player's three highest scores).

Usage:
    python scripts/track_scores.py
    python scripts/track_scores.py --player alice --data-dir scores
    python scripts/track_scores.py --config config/score_tracker_config.json --log-level DEBUG
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from golfscores.app import run_session
from golfscores.config import load_tracker_config
from golfscores.logging import init_logging, get_logger
from golfscores.validation import validate_player_name
from utils import (
    add_config_argument,
    add_data_dir_argument,
    add_log_level_argument,
    resolve_data_dir,
    setup_encoding,
)

logger = get_logger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Record golf scores and calculate a simple handicap")
    add_log_level_argument(parser)
    add_data_dir_argument(parser)
    add_config_argument(parser)
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument("--player", default=None, help="Player name (asked interactively when omitted)")
    args = parser.parse_args()

    setup_encoding()

    try:
        config = load_tracker_config(args.config).with_args(args)
    except (FileNotFoundError, ValueError) as e:
        init_logging("ERROR")
        logger.error("Invalid configuration: %s", e)
        return 1

    init_logging(config.log_level, config.log_file)

    try:
        config.data_dir = resolve_data_dir(config.data_dir)
    except OSError as e:
        logger.error("Cannot use data directory %s: %s", config.data_dir, e)
        return 1

    raw_name = args.player
    if raw_name is None:
        try:
            raw_name = input("Enter your name: ")
        except EOFError:
            raw_name = ""
    try:
        player_name = validate_player_name(raw_name)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    return run_session(player_name, config)


if __name__ == "__main__":
    sys.exit(main())
