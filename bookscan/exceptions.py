"""Exception classes for bookscan."""

from __future__ import annotations

from pathlib import Path


class BookscanError(Exception):
    """Base exception for all bookscan errors."""

    pass


class SearchError(BookscanError):
    """Base exception for search input errors."""

    pass


class InvalidArgumentError(SearchError, TypeError):
    """Raised when a top-level search argument has the wrong type."""

    def __init__(self, argument: str, message: str):
        """Initialize with argument name and message."""
        self.argument = argument
        super().__init__(message)


class MalformedInputError(SearchError, ValueError):
    """Raised when a book or content line is missing a required field."""

    def __init__(
        self,
        message: str,
        book_index: int | None = None,
        line_index: int | None = None,
    ):
        """Initialize with message and location of the bad element."""
        self.book_index = book_index
        self.line_index = line_index
        super().__init__(message)

    @property
    def location(self) -> str:
        """Human readable position of the offending element."""
        if self.book_index is None:
            return ""
        if self.line_index is None:
            return f"books[{self.book_index}]"
        return f"books[{self.book_index}].Content[{self.line_index}]"


class BookLoadError(BookscanError):
    """Raised when a books file cannot be read or decoded."""

    def __init__(self, path: Path | str, details: str = ""):
        """Initialize with path and details."""
        self.path = Path(path)
        message = f"Cannot load books from {path}"
        if details:
            message += f": {details}"
        super().__init__(message)
