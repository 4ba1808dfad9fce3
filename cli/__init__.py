"""Command-line interface for passarg."""
