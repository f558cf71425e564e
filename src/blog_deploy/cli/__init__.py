"""Command-line entry helpers."""
