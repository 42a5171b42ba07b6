"""Tests for loading books from files."""

import json
import logging

import msgspec
import pytest

from bookscan import BookLoadError, MalformedInputError, dump_result, load_books, search


@pytest.fixture
def books_json(tmp_path, twenty_leagues_in):
    """Books file in JSON list form."""
    path = tmp_path / "books.json"
    path.write_text(json.dumps(twenty_leagues_in))
    return path


class TestLoadBooks:
    """Test load_books."""

    def test_load_json_list(self, books_json, twenty_leagues_in):
        assert load_books(books_json) == twenty_leagues_in

    def test_load_json_with_books_key(self, tmp_path, multiple_books):
        path = tmp_path / "books.json"
        path.write_text(json.dumps({"books": multiple_books}))

        assert load_books(path) == multiple_books

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "books.yaml"
        path.write_text(
            "- Title: Klara and the Sun\n"
            "  ISBN: '9780593317171'\n"
            "  Content:\n"
            "    - Page: 4\n"
            "      Line: 10\n"
            "      Text: And not only could I see every window\n"
        )

        books = load_books(path)

        assert books[0]["ISBN"] == "9780593317171"
        assert search("window", books).total_found == 1

    def test_load_yml_with_books_key(self, tmp_path):
        path = tmp_path / "books.yml"
        path.write_text("books:\n  - ISBN: '1'\n    Content: []\n")

        assert load_books(path) == [{"ISBN": "1", "Content": []}]

    def test_load_is_not_validated(self, tmp_path):
        """Shape errors surface from the search engine, not the loader."""
        path = tmp_path / "books.json"
        path.write_text(json.dumps([{"Title": "ASDF", "ISBN": "9876"}]))

        books = load_books(path)

        with pytest.raises(MalformedInputError):
            search("abcd", books)

    def test_logs_book_count(self, books_json, caplog):
        with caplog.at_level(logging.INFO, logger="bookscan.loader"):
            load_books(books_json)

        assert "Loaded 1 books" in caplog.text

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "books.txt"
        path.write_text("[]")

        with pytest.raises(BookLoadError, match="unsupported file type"):
            load_books(path)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.json"

        with pytest.raises(BookLoadError) as exc_info:
            load_books(path)

        assert exc_info.value.path == path

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "books.json"
        path.write_text("[{")

        with pytest.raises(BookLoadError, match="invalid content"):
            load_books(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "books.yaml"
        path.write_text("invalid: yaml: content:")

        with pytest.raises(BookLoadError, match="invalid content"):
            load_books(path)

    @pytest.mark.parametrize("document", ['"text"', "42", '{"entries": []}'])
    def test_wrong_top_level_shape(self, tmp_path, document):
        path = tmp_path / "books.json"
        path.write_text(document)

        with pytest.raises(BookLoadError, match="expected a list of books"):
            load_books(path)


class TestDumpResult:
    """Test dump_result."""

    def test_dump_result(self, twenty_leagues_in):
        output = dump_result(search("the", twenty_leagues_in))

        assert b"\n" in output
        assert msgspec.json.decode(output) == {
            "SearchTerm": "the",
            "Results": [{"ISBN": "9780000528531", "Page": 31, "Line": 9}],
        }
