"""Statistics computed from a player's recorded rounds."""
