"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .author import Author


@strawberry.type(description="A book.")
class Book:
    """Book type for GraphQL API."""

    id: strawberry.Private[int]
    author_id: strawberry.Private[int]
    title: str = strawberry.field(description="The book's title.")

    @strawberry.field(description="The author of this book.")
    def author(self, info: strawberry.Info) -> Annotated["Author", strawberry.lazy(".author")]:
        from ..resolvers.book import resolve_book_author

        return resolve_book_author(self, info)
