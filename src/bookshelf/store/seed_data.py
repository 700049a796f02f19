"""
Dataset loading.

The built-in seed data is used unless a JSON file of the form
``{"authors": [...], "books": [...]}`` is configured.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import DatasetError
from ..logging import get_logger
from .data_store import DataStore

logger = get_logger(__name__)


SEED_AUTHORS: list[dict[str, Any]] = [
    {"id": 1, "name": "Ursula K. Le Guin"},
    {"id": 2, "name": "Octavia E. Butler"},
    {"id": 3, "name": "Italo Calvino"},
]

SEED_BOOKS: list[dict[str, Any]] = [
    {"id": 1, "title": "A Wizard of Earthsea", "authorId": 1},
    {"id": 2, "title": "The Dispossessed", "authorId": 1},
    {"id": 3, "title": "Kindred", "authorId": 2},
    {"id": 4, "title": "Parable of the Sower", "authorId": 2},
    {"id": 5, "title": "Invisible Cities", "authorId": 3},
]


def load_data_store(path: str | Path | None = None) -> DataStore:
    """Load the dataset from ``path``, or the seed data when no path is given.

    Raises:
        DatasetError: If the file cannot be read or holds invalid records
    """
    if path is None:
        store = DataStore.from_records(SEED_AUTHORS, SEED_BOOKS)
        source = "seed"
    else:
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DatasetError(f"Failed to read dataset file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise DatasetError(f"Dataset file {path} must contain a JSON object")

        authors = raw.get("authors", [])
        books = raw.get("books", [])
        if not isinstance(authors, list) or not isinstance(books, list):
            raise DatasetError(f"Dataset file {path}: 'authors' and 'books' must be arrays")

        store = DataStore.from_records(authors, books)
        source = str(path)

    # Dangling references only fail when queried
    dangling = store.dangling_books()
    if dangling:
        logger.warning(
            "Books reference unknown authors",
            book_ids=[book.id for book in dangling],
        )

    logger.info(
        "Dataset loaded",
        source=source,
        authors=len(store.list_authors()),
        books=len(store.list_books()),
    )
    return store
