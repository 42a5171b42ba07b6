"""Load scanned books from JSON or YAML files.

The loader only decodes files. It hands back plain Python objects so that
shape problems inside a book are reported by the search engine with its own
error messages.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import msgspec
import yaml

from .exceptions import BookLoadError
from .models import SearchResult

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def load_books(path: Path | str) -> list[Any]:
    """Read a list of books from a file.

    The document is either a list of books or a mapping with a ``books``
    key holding that list.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        The decoded books, unvalidated

    Raises:
        BookLoadError: If the file cannot be read, decoded, or has the
            wrong top-level shape
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise BookLoadError(path, f"unsupported file type '{suffix or path.name}'")

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise BookLoadError(path, str(e)) from e

    logger.debug(f"Decoding {len(raw)} bytes from {path}")

    try:
        if suffix in JSON_SUFFIXES:
            data = msgspec.json.decode(raw)
        else:
            data = yaml.safe_load(raw)
    except (msgspec.DecodeError, yaml.YAMLError) as e:
        raise BookLoadError(path, f"invalid content: {e}") from e

    if isinstance(data, dict) and "books" in data:
        data = data["books"]

    if not isinstance(data, list):
        raise BookLoadError(
            path, "expected a list of books or a mapping with 'books'"
        )

    logger.info(f"Loaded {len(data)} books from {path}")
    return data


def dump_result(result: SearchResult) -> bytes:
    """Encode a search result as indented JSON."""
    return msgspec.json.format(result.to_json(), indent=2)
