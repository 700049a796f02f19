"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookshelf.store import DataStore

SMALL_AUTHORS = [{"id": 10, "name": "A1"}]
SMALL_BOOKS = [{"id": 1, "title": "T1", "authorId": 10}]


@pytest.fixture
def small_store() -> DataStore:
    """One author with one book."""
    return DataStore.from_records(SMALL_AUTHORS, SMALL_BOOKS)


@pytest.fixture
def library_store() -> DataStore:
    """Two authors, three books, insertion order deliberately interleaved."""
    return DataStore.from_records(
        [{"id": 1, "name": "Le Guin"}, {"id": 2, "name": "Butler"}],
        [
            {"id": 1, "title": "The Dispossessed", "authorId": 1},
            {"id": 2, "title": "Kindred", "authorId": 2},
            {"id": 3, "title": "The Lathe of Heaven", "authorId": 1},
        ],
    )


@pytest.fixture
def dangling_store() -> DataStore:
    """A book whose author does not exist."""
    return DataStore.from_records(
        [{"id": 10, "name": "A1"}],
        [
            {"id": 1, "title": "T1", "authorId": 10},
            {"id": 2, "title": "Orphan", "authorId": 99},
        ],
    )


@pytest.fixture
def app(small_store: DataStore) -> FastAPI:
    from bookshelf.api.app import create_app

    return create_app(store=small_store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
