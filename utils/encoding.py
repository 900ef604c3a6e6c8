from __future__ import annotations

import sys


def setup_encoding() -> None:
    """Switch stdout/stderr to UTF-8 so course names print on any console.

    Idempotent. Streams without ``reconfigure`` (e.g. pytest capture) are left alone.
    """
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8", errors="replace")
