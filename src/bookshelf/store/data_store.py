"""
Read-only in-memory store for authors and books.

Collections are loaded once and never mutated, so a single store instance is
shared by every request without locking. Lookups scan the collections in
insertion order; there is no secondary index.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from ..errors import DatasetError
from .models import Author, Book


class DataStore:
    """Immutable authors/books collections with relational lookups."""

    def __init__(self, authors: Iterable[Author], books: Iterable[Book]):
        self._authors: tuple[Author, ...] = tuple(authors)
        self._books: tuple[Book, ...] = tuple(books)

    @classmethod
    def from_records(
        cls,
        authors: Iterable[Mapping[str, Any]],
        books: Iterable[Mapping[str, Any]],
    ) -> DataStore:
        """Build a store from raw mappings, validating each record."""
        try:
            return cls(
                (Author.model_validate(record) for record in authors),
                (Book.model_validate(record) for record in books),
            )
        except ValidationError as e:
            raise DatasetError(f"Invalid dataset record: {e}") from e

    def list_authors(self) -> tuple[Author, ...]:
        return self._authors

    def list_books(self) -> tuple[Book, ...]:
        return self._books

    def find_author_by_id(self, author_id: int) -> Author | None:
        """Return the author with the given id, or None when absent."""
        for author in self._authors:
            if author.id == author_id:
                return author
        return None

    def list_books_by_author(self, author_id: int) -> list[Book]:
        return [book for book in self._books if book.author_id == author_id]

    def dangling_books(self) -> list[Book]:
        """Books whose author_id matches no author."""
        author_ids = {author.id for author in self._authors}
        return [book for book in self._books if book.author_id not in author_ids]

    def __repr__(self) -> str:
        return f"DataStore(authors={len(self._authors)}, books={len(self._books)})"
