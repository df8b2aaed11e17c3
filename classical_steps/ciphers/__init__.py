"""Per-cipher step generators."""
