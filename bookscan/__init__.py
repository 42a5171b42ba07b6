"""Find search terms in scanned book text.

Main components:
- SearchEngine: validates books and finds every line containing a term
- Book, ContentLine, SearchResult, Match: msgspec record types
- load_books: read books from JSON or YAML files
"""

from .engine import SearchEngine, find_search_term_in_books, search
from .exceptions import (
    BookLoadError,
    BookscanError,
    InvalidArgumentError,
    MalformedInputError,
    SearchError,
)
from .loader import dump_result, load_books
from .models import Book, ContentLine, Match, SearchResult

__all__ = [
    # Search
    "SearchEngine",
    "search",
    "find_search_term_in_books",
    # Models
    "Book",
    "ContentLine",
    "Match",
    "SearchResult",
    # Loading
    "load_books",
    "dump_result",
    # Errors
    "BookscanError",
    "SearchError",
    "InvalidArgumentError",
    "MalformedInputError",
    "BookLoadError",
]

__version__ = "1.0.0"
