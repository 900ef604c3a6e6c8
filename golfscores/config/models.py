from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional
import argparse


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TrackerConfig:
    data_dir: Path = Path(".")
    file_extension: str = ".csv"
    encoding: str = "utf-8"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    # Record 0 for a non-numeric score instead of asking again
    allow_invalid_score_as_zero: bool = False

    def validate(self) -> None:
        if not self.file_extension.startswith("."):
            raise ValueError("file_extension must start with '.'")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if not self.encoding:
            raise ValueError("encoding must not be empty")

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "TrackerConfig":
        valid_keys = {f.name for f in fields(TrackerConfig)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        if "data_dir" in filtered:
            filtered["data_dir"] = Path(filtered["data_dir"])
        if "allow_invalid_score_as_zero" in filtered:
            filtered["allow_invalid_score_as_zero"] = bool(filtered["allow_invalid_score_as_zero"])
        config = TrackerConfig(**filtered)
        config.validate()
        return config

    def with_args(self, args: argparse.Namespace) -> "TrackerConfig":
        """Return a copy with any command-line overrides applied."""
        overrides: Dict[str, Any] = {}
        if getattr(args, "data_dir", None):
            overrides["data_dir"] = Path(args.data_dir)
        if getattr(args, "log_level", None):
            overrides["log_level"] = args.log_level
        if getattr(args, "log_file", None):
            overrides["log_file"] = args.log_file
        config = replace(self, **overrides)
        config.validate()
        return config
