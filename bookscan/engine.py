"""Search engine for finding a term in scanned book text.

The engine answers one question: on which page/line of which book does a
term appear?  Matching is a literal, case-sensitive substring test.  There is
no tokenization, normalization or ranking; results come back in the order
the books and their lines were given.

Input is validated eagerly.  Every book and every content line is checked
and converted to the record types in :mod:`bookscan.models` before any text
is scanned, so a malformed element anywhere in the input fails the whole call
and no partial result is ever produced.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .exceptions import InvalidArgumentError, MalformedInputError
from .models import Book, ContentLine, SearchResult

_MISSING = object()


def _is_array(value: Any) -> bool:
    """Check for an ordered sequence that is not a string."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _get(obj: Any, key: str, attr: str) -> Any:
    """Read a field from a mapping by wire key or from a record by attribute."""
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    if isinstance(obj, (Book, ContentLine)):
        return getattr(obj, attr)
    return _MISSING


class SearchEngine:
    """Validate scanned books and find every line containing a term."""

    def search(self, search_term: str, books: Sequence[Any]) -> SearchResult:
        """Find every line whose text contains ``search_term``.

        Args:
            search_term: Literal text to look for. The empty string matches
                every line.
            books: Ordered books, as :class:`Book` records or mappings with
                ``Title``, ``ISBN`` and ``Content`` keys.

        Returns:
            SearchResult echoing the term, with one Match per matching line
            in book-then-line order.

        Raises:
            InvalidArgumentError: If the term is not a string or books is
                not an ordered sequence.
            MalformedInputError: If any book lacks Content or any line lacks
                a string Text.
        """
        return SearchResult.from_hits(search_term, self.locate(search_term, books))

    def locate(
        self, search_term: str, books: Sequence[Any]
    ) -> list[tuple[Book, ContentLine]]:
        """Find the book and line record for every line containing the term.

        Takes the same arguments and raises the same errors as
        :meth:`search`. Books are validated once, and each hit keeps its own
        book record so callers never have to look books up by ISBN.
        """
        if not isinstance(search_term, str):
            raise InvalidArgumentError("searchTerm", "searchTerm is not a string")

        return [
            (book, line)
            for book in self.validate(books)
            for line in book.content
            if search_term in line.text
        ]

    def validate(self, books: Sequence[Any]) -> tuple[Book, ...]:
        """Check the whole book collection and convert it to records.

        Raises:
            InvalidArgumentError: If books is not an ordered sequence.
            MalformedInputError: On the first malformed book or line.
        """
        if not _is_array(books):
            raise InvalidArgumentError("books", "books is not an array")

        return tuple(
            self._validate_book(book, index) for index, book in enumerate(books)
        )

    def _validate_book(self, book: Any, book_index: int) -> Book:
        content = _get(book, "Content", "content")
        if content is _MISSING or content is None:
            raise MalformedInputError("book is missing Content", book_index)
        if not _is_array(content):
            raise MalformedInputError("book Content is not an array", book_index)

        lines = tuple(
            self._validate_line(line, book_index, line_index)
            for line_index, line in enumerate(content)
        )

        title = _get(book, "Title", "title")
        isbn = _get(book, "ISBN", "isbn")
        return Book(
            title=None if title is _MISSING else title,
            isbn=None if isbn is _MISSING else isbn,
            content=lines,
        )

    def _validate_line(
        self, line: Any, book_index: int, line_index: int
    ) -> ContentLine:
        text = _get(line, "Text", "text")
        if not isinstance(text, str):
            raise MalformedInputError(
                "content is missing Text or Text is not a string",
                book_index,
                line_index,
            )

        page = _get(line, "Page", "page")
        number = _get(line, "Line", "line")
        return ContentLine(
            text=text,
            page=None if page is _MISSING else page,
            line=None if number is _MISSING else number,
        )


_default_engine = SearchEngine()


def search(search_term: str, books: Sequence[Any]) -> SearchResult:
    """Search books with a shared engine.

    See :meth:`SearchEngine.search`.
    """
    return _default_engine.search(search_term, books)


find_search_term_in_books = search
