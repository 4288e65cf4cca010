"""
Query catalog: the fixed, ordered set of operations run against the
``books`` collection.

Each operation is a plain function that takes a pymongo ``Collection`` and
returns plain Python data.  Filters, projections and pipelines live in
module-level constants so they can be inspected without a server.

Operations 4, 5 and 15 mutate persistent state (a price, a document, the
index set); the rest are read-only.
"""

from typing import Any, Callable, Dict, List, Tuple

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

from logger import logger

# ---------------------- CONSTANTS ----------------------

PAGE_SIZE = 5

FICTION_FILTER = {"genre": "Fiction"}
AFTER_2000_FILTER = {"published_year": {"$gt": 2000}}
ORWELL_FILTER = {"author": "George Orwell"}
IN_STOCK_AFTER_2010_FILTER = {"in_stock": True, "published_year": {"$gt": 2010}}

PRICE_UPDATE_FILTER = {"title": "1984"}
PRICE_UPDATE = {"$set": {"price": 13.99}}

DELETE_FILTER = {"title": "Moby Dick"}

SUMMARY_PROJECTION = {"title": 1, "author": 1, "price": 1, "_id": 0}

AVG_PRICE_BY_GENRE_PIPELINE = [
    {"$group": {"_id": "$genre", "avgPrice": {"$avg": "$price"}}},
]

TOP_AUTHOR_PIPELINE = [
    {"$group": {"_id": "$author", "count": {"$sum": 1}}},
    {"$sort": {"count": -1}},
    {"$limit": 1},
]

BY_DECADE_PIPELINE = [
    {
        "$group": {
            "_id": {"$floor": {"$divide": ["$published_year", 10]}},
            "count": {"$sum": 1},
        }
    },
    {
        "$project": {
            "decade": {
                "$concat": [{"$toString": {"$multiply": ["$_id", 10]}}, "s"]
            },
            "count": 1,
            "_id": 0,
        }
    },
]

TITLE_INDEX = [("title", ASCENDING)]
AUTHOR_YEAR_INDEX = [("author", ASCENDING), ("published_year", ASCENDING)]

EXPLAIN_FILTER = {"title": "1984"}
EXPLAIN_VERBOSITY = "executionStats"


# ---------------------- BASIC QUERIES ----------------------

def find_fiction(collection: Collection) -> List[Dict[str, Any]]:
    return list(collection.find(FICTION_FILTER))


def find_published_after_2000(collection: Collection) -> List[Dict[str, Any]]:
    return list(collection.find(AFTER_2000_FILTER))


def find_by_orwell(collection: Collection) -> List[Dict[str, Any]]:
    return list(collection.find(ORWELL_FILTER))


def update_1984_price(collection: Collection) -> Dict[str, int]:
    """Set the price of "1984".  Touches at most one document."""
    result = collection.update_one(PRICE_UPDATE_FILTER, PRICE_UPDATE)
    logger.info(
        "update_one %s: matched %d, modified %d",
        PRICE_UPDATE_FILTER, result.matched_count, result.modified_count,
    )
    return {
        "matched_count": result.matched_count,
        "modified_count": result.modified_count,
    }


def delete_moby_dick(collection: Collection) -> Dict[str, int]:
    """Delete "Moby Dick".  Removes at most one document."""
    result = collection.delete_one(DELETE_FILTER)
    logger.info("delete_one %s: deleted %d", DELETE_FILTER, result.deleted_count)
    return {"deleted_count": result.deleted_count}


# ---------------------- ADVANCED QUERIES ----------------------

def find_in_stock_after_2010(collection: Collection) -> List[Dict[str, Any]]:
    return list(collection.find(IN_STOCK_AFTER_2010_FILTER))


def find_summaries(collection: Collection) -> List[Dict[str, Any]]:
    """Title, author and price of every book, without ``_id``."""
    return list(collection.find({}, SUMMARY_PROJECTION))


def find_sorted_by_price(collection: Collection, direction: int = ASCENDING) -> List[Dict[str, Any]]:
    return list(collection.find().sort("price", direction))


def find_price_ascending(collection: Collection) -> List[Dict[str, Any]]:
    return find_sorted_by_price(collection, ASCENDING)


def find_price_descending(collection: Collection) -> List[Dict[str, Any]]:
    return find_sorted_by_price(collection, DESCENDING)


def find_page(collection: Collection, page: int, page_size: int = PAGE_SIZE) -> List[Dict[str, Any]]:
    """Return one page in server default order.

    No sort is applied, so page boundaries are only as stable as the
    server's natural order.
    """
    page = max(1, page)
    skip = (page - 1) * page_size
    cursor = collection.find()
    if skip:
        cursor = cursor.skip(skip)
    return list(cursor.limit(page_size))


def find_first_page(collection: Collection) -> List[Dict[str, Any]]:
    return find_page(collection, 1)


def find_second_page(collection: Collection) -> List[Dict[str, Any]]:
    return find_page(collection, 2)


# ---------------------- AGGREGATIONS ----------------------

def average_price_by_genre(collection: Collection) -> List[Dict[str, Any]]:
    return list(collection.aggregate(AVG_PRICE_BY_GENRE_PIPELINE))


def top_author(collection: Collection) -> List[Dict[str, Any]]:
    """Author with the most books.  Ties are broken by the server."""
    return list(collection.aggregate(TOP_AUTHOR_PIPELINE))


def count_by_decade(collection: Collection) -> List[Dict[str, Any]]:
    return list(collection.aggregate(BY_DECADE_PIPELINE))


# ---------------------- INDEXING ----------------------

def create_indexes(collection: Collection) -> List[str]:
    """Create the title and (author, published_year) indexes.

    ``create_index`` is a no-op on the server when an identical index
    already exists, so this is safe to repeat.
    """
    names = [
        collection.create_index(TITLE_INDEX),
        collection.create_index(AUTHOR_YEAR_INDEX),
    ]
    logger.info("Indexes ensured: %s", ", ".join(names))
    return names


def explain_title_lookup(collection: Collection) -> Dict[str, Any]:
    """Explain plan for ``find({"title": "1984"})`` with execution stats."""
    return collection.database.command(
        "explain",
        {"find": collection.name, "filter": EXPLAIN_FILTER},
        verbosity=EXPLAIN_VERBOSITY,
    )


# ---------------------- CATALOG ----------------------

Operation = Callable[[Collection], Any]

CATALOG: List[Tuple[str, Operation]] = [
    ("Fiction", find_fiction),
    ("After 2000", find_published_after_2000),
    ("George Orwell", find_by_orwell),
    ("Update price of 1984", update_1984_price),
    ("Delete Moby Dick", delete_moby_dick),
    ("In-stock after 2010", find_in_stock_after_2010),
    ("Projection", find_summaries),
    ("Price asc", find_price_ascending),
    ("Price desc", find_price_descending),
    ("Page 1", find_first_page),
    ("Page 2", find_second_page),
    ("Avg price by genre", average_price_by_genre),
    ("Top author", top_author),
    ("By decade", count_by_decade),
    ("Indexes", create_indexes),
    ('Explain (title = "1984")', explain_title_lookup),
]
