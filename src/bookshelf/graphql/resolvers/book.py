from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import AuthorNotFoundError
from ...logging import get_logger
from ...store.models import Book as BookRecord
from .author import get_store, to_author_type

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


def to_book_type(record: BookRecord) -> Book:
    from ..types.book import Book as BookType

    return BookType(id=record.id, author_id=record.author_id, title=record.title)


def resolve_books(info: strawberry.Info) -> list[Book]:
    return [to_book_type(record) for record in get_store(info).list_books()]


def resolve_book_author(book: Book, info: strawberry.Info) -> Author:
    """
    Resolve the author of a book.

    Book.author is non-null, so a dangling author_id raises instead of
    returning None; the error nulls the nearest nullable ancestor.
    """
    record = get_store(info).find_author_by_id(book.author_id)
    if record is None:
        logger.info("Author not found", book_id=book.id, author_id=book.author_id)
        raise AuthorNotFoundError(book.id, book.author_id)

    return to_author_type(record)
