"""Tests for dataset loading."""

import json

import pytest

from bookshelf.errors import DatasetError
from bookshelf.store import load_data_store
from bookshelf.store.seed_data import SEED_AUTHORS, SEED_BOOKS


def test_seed_data_loaded_by_default():
    store = load_data_store()
    assert len(store.list_authors()) == len(SEED_AUTHORS)
    assert len(store.list_books()) == len(SEED_BOOKS)
    assert store.dangling_books() == []


def test_load_from_file(tmp_path):
    path = tmp_path / "library.json"
    path.write_text(
        json.dumps(
            {
                "authors": [{"id": 7, "name": "Calvino"}],
                "books": [{"id": 1, "title": "Invisible Cities", "authorId": 7}],
            }
        )
    )

    store = load_data_store(path)

    assert store.find_author_by_id(7).name == "Calvino"
    assert store.list_books_by_author(7)[0].title == "Invisible Cities"


def test_dangling_references_are_loaded(tmp_path):
    path = tmp_path / "library.json"
    path.write_text(json.dumps({"authors": [], "books": [{"id": 1, "title": "T", "authorId": 3}]}))

    store = load_data_store(str(path))

    assert [book.id for book in store.dangling_books()] == [1]


def test_missing_file_raises(tmp_path):
    with pytest.raises(DatasetError, match="Failed to read dataset file"):
        load_data_store(tmp_path / "missing.json")


def test_malformed_json_raises(tmp_path):
    path = tmp_path / "library.json"
    path.write_text("{not json")
    with pytest.raises(DatasetError):
        load_data_store(path)


@pytest.mark.parametrize("content", ["[]", '{"authors": {}, "books": []}'])
def test_wrong_shape_raises(tmp_path, content):
    path = tmp_path / "library.json"
    path.write_text(content)
    with pytest.raises(DatasetError):
        load_data_store(path)
