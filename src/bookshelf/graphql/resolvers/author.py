from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...store import DataStore
from ...store.models import Author as AuthorRecord

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book


def get_store(info: strawberry.Info) -> DataStore:
    return info.context["store"]


def to_author_type(record: AuthorRecord) -> Author:
    from ..types.author import Author as AuthorType

    return AuthorType(id=record.id, name=record.name)


def resolve_authors(info: strawberry.Info) -> list[Author]:
    return [to_author_type(record) for record in get_store(info).list_authors()]


def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """Books written by this author, in dataset order."""
    from .book import to_book_type

    return [to_book_type(record) for record in get_store(info).list_books_by_author(author.id)]
