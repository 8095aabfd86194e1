"""Command-line interface for termai."""

from termai.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
