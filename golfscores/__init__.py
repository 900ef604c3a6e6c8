"""Lightweight package initializer for golfscores.

Submodules are imported explicitly by callers so that importing the package
does not pull in pandas unless the reporting helpers are used.
"""

__all__ = []
