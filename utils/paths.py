from __future__ import annotations

from pathlib import Path


def resolve_data_dir(data_dir: str | Path) -> Path:
    """Resolve the score data directory, creating it when missing.

    Raises NotADirectoryError if the path exists but is a file.
    """
    p = Path(data_dir).expanduser()
    if p.exists() and not p.is_dir():
        raise NotADirectoryError(f"Data directory is not a directory: {p}")
    p.mkdir(parents=True, exist_ok=True)
    return p
