"""Persistence and reporting helpers for player score files."""
