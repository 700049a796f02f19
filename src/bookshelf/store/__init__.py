"""
In-memory dataset for the Bookshelf API
"""

from .data_store import DataStore
from .models import Author, Book
from .seed_data import load_data_store

__all__ = ["Author", "Book", "DataStore", "load_data_store"]
