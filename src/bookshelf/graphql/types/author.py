"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .book import Book


@strawberry.type(description="An author.")
class Author:
    """Author type for GraphQL API."""

    id: strawberry.Private[int]
    name: str = strawberry.field(description="The author's name.")

    @strawberry.field(description="A list of books relating to this author.")
    def books(
        self, info: strawberry.Info
    ) -> list[Annotated["Book", strawberry.lazy(".book")] | None] | None:
        from ..resolvers.author import resolve_author_books

        return resolve_author_books(self, info)
