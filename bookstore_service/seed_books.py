#!/usr/bin/env python3
"""
Bookstore seed helper
=====================

Usage:
    python seed_books.py [--drop]

Inserts a small sample catalog into the configured collection so the
query runner has something to work on.  ``--drop`` empties the
collection first; without it the books are appended.
"""

import sys
from typing import List, Optional, Sequence

from pymongo.collection import Collection

from cluster_manager import create_client, get_collection, ping
from config import COLLECTION_NAME, DATABASE_NAME, MONGO_URI
from logger import logger
from models import Book

SAMPLE_BOOKS: List[Book] = [
    Book(title="To Kill a Mockingbird", author="Harper Lee", genre="Fiction",
         published_year=1960, price=12.99, in_stock=True),
    Book(title="1984", author="George Orwell", genre="Dystopian",
         published_year=1949, price=10.99, in_stock=True),
    Book(title="The Great Gatsby", author="F. Scott Fitzgerald", genre="Fiction",
         published_year=1925, price=9.99, in_stock=True),
    Book(title="Brave New World", author="Aldous Huxley", genre="Dystopian",
         published_year=1932, price=11.50, in_stock=False),
    Book(title="The Hobbit", author="J.R.R. Tolkien", genre="Fantasy",
         published_year=1937, price=14.99, in_stock=True),
    Book(title="The Catcher in the Rye", author="J.D. Salinger", genre="Fiction",
         published_year=1951, price=8.99, in_stock=True),
    Book(title="Pride and Prejudice", author="Jane Austen", genre="Romance",
         published_year=1813, price=7.99, in_stock=True),
    Book(title="The Lord of the Rings", author="J.R.R. Tolkien", genre="Fantasy",
         published_year=1954, price=19.99, in_stock=True),
    Book(title="Animal Farm", author="George Orwell", genre="Political Satire",
         published_year=1945, price=8.50, in_stock=False),
    Book(title="The Alchemist", author="Paulo Coelho", genre="Fiction",
         published_year=1988, price=10.99, in_stock=True),
    Book(title="Moby Dick", author="Herman Melville", genre="Adventure",
         published_year=1851, price=12.50, in_stock=False),
    Book(title="The Road", author="Cormac McCarthy", genre="Fiction",
         published_year=2006, price=13.25, in_stock=True),
    Book(title="The Night Circus", author="Erin Morgenstern", genre="Fantasy",
         published_year=2011, price=15.40, in_stock=True),
    Book(title="Educated", author="Tara Westover", genre="Memoir",
         published_year=2018, price=16.00, in_stock=True),
]


def seed_collection(
    collection: Collection,
    books: Sequence[Book] = SAMPLE_BOOKS,
    drop: bool = False,
) -> int:
    """Insert *books* into *collection* and return how many were inserted."""
    if drop:
        deleted = collection.delete_many({}).deleted_count
        logger.info("Removed %d existing documents from %s", deleted, collection.full_name)

    if not books:
        return 0

    result = collection.insert_many([book.to_document() for book in books])
    inserted = len(result.inserted_ids)
    logger.info("Inserted %d books into %s", inserted, collection.full_name)
    return inserted


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    drop = "--drop" in argv
    unknown = [arg for arg in argv if arg != "--drop"]
    if unknown:
        print(f"Usage: python {sys.argv[0]} [--drop]", file=sys.stderr)
        return 2

    client = create_client(MONGO_URI)
    try:
        ping(client)
        collection = get_collection(client, DATABASE_NAME, COLLECTION_NAME)
        return 0 if seed_collection(collection, drop=drop) else 1
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
