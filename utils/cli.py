from __future__ import annotations

from argparse import ArgumentParser


def add_log_level_argument(parser: ArgumentParser) -> None:
    """Add a standard --log-level flag to an ArgumentParser.

    No default, so a level from the config file is kept unless overridden.
    """
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: from config, else INFO)",
    )


def add_data_dir_argument(parser: ArgumentParser) -> None:
    """Add a standard --data-dir flag to an ArgumentParser."""
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory holding the per-player score files (default: from config, else current directory)",
    )


def add_config_argument(parser: ArgumentParser) -> None:
    """Add a standard --config flag to an ArgumentParser."""
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a score_tracker_config.json file",
    )
