from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional, Union

from .models import TrackerConfig
from ..logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = "score_tracker_config.json"
DATA_DIR_ENV_VAR = "GOLF_SCORES_DATA_DIR"


def load_tracker_config(
    config_path: Optional[Union[str, Path]] = None,
    base_dir: Optional[Union[str, Path]] = None,
) -> TrackerConfig:
    """Load tracker settings.

    An explicit ``config_path`` must exist. Otherwise ``config/<name>`` and then
    ``<name>`` under ``base_dir`` (default: working directory) are tried, and
    defaults are used when neither exists. ``GOLF_SCORES_DATA_DIR`` overrides
    the data directory from any source.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        config = _read_config(path)
    else:
        root = Path(base_dir) if base_dir else Path.cwd()
        candidates = [
            root / "config" / CONFIG_FILENAME,
            root / CONFIG_FILENAME,
        ]
        config = None
        for path in candidates:
            if path.exists():
                config = _read_config(path)
                break
        if config is None:
            logger.debug("No %s found under %s; using defaults", CONFIG_FILENAME, root)
            config = TrackerConfig()

    env_data_dir = os.environ.get(DATA_DIR_ENV_VAR)
    if env_data_dir:
        config.data_dir = Path(env_data_dir)
    return config


def _read_config(path: Path) -> TrackerConfig:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config in {path} must be a JSON object")
    logger.info("Loaded tracker config from %s", path)
    return TrackerConfig.from_dict(data)
