"""Bookscan CLI.

Command-line search over scanned book dumps, built with Click and Rich.
"""

from bookscan.cli.main import cli

__all__ = ["cli"]
