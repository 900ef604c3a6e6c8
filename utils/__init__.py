"""Utility package for shared helpers used by CLI scripts."""

from .encoding import setup_encoding  # re-export for convenience
from .cli import add_log_level_argument, add_data_dir_argument, add_config_argument
from .paths import resolve_data_dir

__all__ = [
    "setup_encoding",
    "add_log_level_argument",
    "add_data_dir_argument",
    "add_config_argument",
    "resolve_data_dir",
]
