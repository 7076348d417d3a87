"""Command-line interface for fieldcheck."""
