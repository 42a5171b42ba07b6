"""Pytest configuration and fixtures for CLI tests."""

import json

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Click CLI test runner bound to the bookscan command group."""

    class BookscanCliRunner(CliRunner):
        def invoke(self, args, **kwargs):  # type: ignore
            """Invoke the bookscan CLI with a list of arguments."""
            from bookscan.cli.main import cli

            return super().invoke(cli, args, **kwargs)

    return BookscanCliRunner()


@pytest.fixture
def books_file(tmp_path, twenty_leagues_in):
    """Twenty Leagues books file in JSON form."""
    path = tmp_path / "books.json"
    path.write_text(json.dumps(twenty_leagues_in))
    return path


@pytest.fixture
def malformed_books_file(tmp_path):
    """Books file whose only book has no Content."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"Title": "ASDF", "ISBN": "9876"}]))
    return path
