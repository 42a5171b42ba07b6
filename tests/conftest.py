"""Pytest configuration and fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Isolate environment variables for each test.

    This prevents test pollution where one test's environment
    changes affect other tests.
    """
    original_env = os.environ.copy()
    monkeypatch.delenv("BOOKSCAN_FORMAT", raising=False)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def twenty_leagues_in() -> list[dict]:
    """One book with three scanned lines, in decoded JSON form."""
    return [
        {
            "Title": "Twenty Thousand Leagues Under the Sea",
            "ISBN": "9780000528531",
            "Content": [
                {
                    "Page": 31,
                    "Line": 8,
                    "Text": "now simply went on by her own momentum.  The dark-",
                },
                {
                    "Page": 31,
                    "Line": 9,
                    "Text": "ness was then profound; and however good the Canadian's",
                },
                {
                    "Page": 31,
                    "Line": 10,
                    "Text": "eyes were, I asked myself how he had managed to see, and",
                },
            ],
        }
    ]


@pytest.fixture
def multiple_books() -> list[dict]:
    """Two books with two scanned lines each, in decoded JSON form."""
    return [
        {
            "Title": "Klara and the Sun",
            "ISBN": "9780593317171",
            "Content": [
                {
                    "Page": 4,
                    "Line": 10,
                    "Text": "And not only could I see every window up to the rooftop, I",
                },
                {
                    "Page": 5,
                    "Line": 12,
                    "Text": "and disappointed. But once we'd seated ourselves on the Striped Sofa,",
                },
            ],
        },
        {
            "Title": "Because Internet",
            "ISBN": "9780735210936",
            "Content": [
                {
                    "Page": 71,
                    "Line": 22,
                    "Text": "An article reminiscing about the early-2000s teen internet high-",
                },
                {
                    "Page": 23,
                    "Line": 3,
                    "Text": "AIM shut down, a tech culture reporter recalled how in middle",
                },
            ],
        },
    ]
