"""Data models for scanned books and search results using msgspec.

Attribute names are snake_case; the encoded (wire) names are the PascalCase
keys used by book dumps: ``Title``, ``ISBN``, ``Content``, ``Page``,
``Line``, ``Text``, ``SearchTerm`` and ``Results``.
"""

from __future__ import annotations

from typing import Any

import msgspec


class ContentLine(msgspec.Struct, frozen=True, kw_only=True, rename="pascal"):
    """One line of scanned text at a page/line coordinate."""

    text: str
    page: int | None = None
    line: int | None = None


class Book(msgspec.Struct, frozen=True, kw_only=True, rename="pascal"):
    """A scanned book.

    The ISBN is an opaque identifier and is never checked for format.
    """

    content: tuple[ContentLine, ...]
    title: str | None = None
    isbn: str | None = msgspec.field(default=None, name="ISBN")

    @property
    def line_count(self) -> int:
        """Number of scanned lines in the book."""
        return len(self.content)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Book:
        """Create a book from its encoded mapping form."""
        return msgspec.convert(data, cls)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the encoded mapping form, with Content as a list."""
        return msgspec.json.decode(msgspec.json.encode(self))


class Match(msgspec.Struct, frozen=True, kw_only=True):
    """Location of one content line containing the search term."""

    isbn: str | None = msgspec.field(name="ISBN")
    page: int | None = msgspec.field(name="Page")
    line: int | None = msgspec.field(name="Line")

    @classmethod
    def at(cls, book: Book, line: ContentLine) -> Match:
        """Create the match for one line of a book."""
        return cls(isbn=book.isbn, page=line.page, line=line.line)


class SearchResult(msgspec.Struct, kw_only=True, rename="pascal"):
    """Search term and the ordered matches found for it."""

    search_term: str
    results: list[Match] = msgspec.field(default_factory=list)

    @classmethod
    def from_hits(
        cls, search_term: str, hits: list[tuple[Book, ContentLine]]
    ) -> SearchResult:
        """Build a result from matching (book, line) pairs, keeping their order."""
        return cls(
            search_term=search_term,
            results=[Match.at(book, line) for book, line in hits],
        )

    @property
    def total_found(self) -> int:
        """Number of matching lines."""
        return len(self.results)

    @property
    def is_empty(self) -> bool:
        """Check if no lines matched."""
        return not self.results

    @property
    def isbns(self) -> list[str | None]:
        """ISBNs of books with at least one match, in first-match order.

        ISBNs are collected as dict keys, so every ISBN must be hashable.
        An unhashable one (a decoded JSON list, say) raises TypeError.
        """
        seen: dict[str | None, None] = {}
        for match in self.results:
            seen.setdefault(match.isbn, None)
        return list(seen)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the encoded mapping form."""
        return msgspec.to_builtins(self)

    def to_json(self) -> bytes:
        """Encode as JSON."""
        return msgspec.json.encode(self)
