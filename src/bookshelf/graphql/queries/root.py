"""
Root GraphQL query definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book


@strawberry.type(description="Root query type.")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="List all authors.")
    def authors(self, info: strawberry.Info) -> list[Author]:
        from ..resolvers.author import resolve_authors

        return resolve_authors(info)

    @strawberry.field(description="List all books.")
    def books(self, info: strawberry.Info) -> list[Book]:
        from ..resolvers.book import resolve_books

        return resolve_books(info)
