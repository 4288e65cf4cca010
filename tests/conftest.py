"""
Pytest configuration and shared fixtures
"""
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

# Service modules import each other as top-level modules
service_path = Path(__file__).parent.parent / "bookstore_service"
sys.path.insert(0, str(service_path))


def make_book(title, author, genre, published_year, price, in_stock=True):
    return {
        "_id": ObjectId(),
        "title": title,
        "author": author,
        "genre": genre,
        "published_year": published_year,
        "price": price,
        "in_stock": in_stock,
    }


@pytest.fixture
def sample_docs():
    """A handful of raw book documents as the driver would return them."""
    return [
        make_book("1984", "George Orwell", "Fiction", 1949, 10.99),
        make_book("Moby Dick", "Herman Melville", "Fiction", 1851, 9.99),
        make_book("The Road", "Cormac McCarthy", "Fiction", 2006, 13.25),
        make_book("Educated", "Tara Westover", "Memoir", 2018, 16.00),
    ]


def make_cursor(docs):
    """Chainable cursor double: sort/skip/limit return itself, iteration yields *docs*."""
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.__iter__.side_effect = lambda: iter(list(docs))
    return cursor


def _index_name(keys):
    return "_".join(f"{field}_{direction}" for field, direction in keys)


@pytest.fixture
def mock_collection(sample_docs):
    """MagicMock standing in for a pymongo Collection."""
    collection = MagicMock()
    collection.name = "books"
    collection.full_name = "plp_bookstore.books"
    collection.find.return_value = make_cursor(sample_docs)
    collection.aggregate.return_value = []
    collection.update_one.return_value = MagicMock(matched_count=1, modified_count=1)
    collection.delete_one.return_value = MagicMock(deleted_count=1)
    collection.create_index.side_effect = _index_name
    collection.database.command.return_value = {
        "queryPlanner": {"winningPlan": {"stage": "COLLSCAN"}},
        "executionStats": {"nReturned": 1, "totalDocsExamined": 4},
        "ok": 1.0,
    }
    return collection
