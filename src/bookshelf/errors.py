"""
Error types for the Bookshelf API

Resolver errors deriving from BookshelfError are expected domain errors and
their messages reach the client. Anything else raised during execution is
treated as an internal fault.
"""

from collections.abc import Sequence


class BookshelfError(Exception):
    """Base exception for Bookshelf domain errors."""

    pass


class SchemaStartupError(BookshelfError):
    """The GraphQL type graph is structurally invalid; the server must not start."""

    def __init__(self, errors: Sequence[str]):
        self.errors = list(errors)
        super().__init__(f"GraphQL schema validation failed: {'; '.join(self.errors)}")


class DatasetError(BookshelfError):
    """The dataset could not be loaded."""

    pass


class TransportError(BookshelfError):
    """An HTTP request was rejected before reaching the operation pipeline."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(reason)


class AuthorNotFoundError(BookshelfError, LookupError):
    """A book references an author id that does not exist."""

    def __init__(self, book_id: int, author_id: int):
        self.book_id = book_id
        self.author_id = author_id
        super().__init__(f"Author {author_id} referenced by book {book_id} was not found.")
