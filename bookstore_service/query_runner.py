"""
Query runner: executes the query catalog in order against one collection
and prints a labeled section per operation.

One client is opened per run and closed exactly once, whether the run
completes or fails.  The first failure ends the run; nothing is retried.
"""

import sys
from typing import Any, List, Optional, TextIO, Tuple

from pymongo.collection import Collection

from cluster_manager import create_client, get_collection, ping
from logger import logger
from query_catalog import CATALOG, Operation
from response_formatter import format_section


def run_catalog(
    collection: Collection,
    out: Optional[TextIO] = None,
    catalog: Optional[List[Tuple[str, Operation]]] = None,
) -> None:
    """Run every catalog operation in order, writing each result to *out*.

    Exceptions propagate unchanged; operations after the failing one are
    not started.
    """
    out = out if out is not None else sys.stdout
    catalog = catalog if catalog is not None else CATALOG

    for step, (label, operation) in enumerate(catalog, 1):
        logger.debug("Step %d/%d: %s", step, len(catalog), label)
        result: Any = operation(collection)
        print(format_section(label, result), file=out)

    logger.info("Completed %d operations on %s", len(catalog), collection.full_name)


def run(
    mongo_uri: str,
    database_name: str,
    collection_name: str,
    out: Optional[TextIO] = None,
) -> bool:
    """Connect, run the catalog, disconnect.

    Returns ``True`` when every operation completed and ``False`` when a
    failure stopped the run.  The failure is logged with its traceback.
    """
    client = None
    try:
        client = create_client(mongo_uri)
        ping(client)
        collection = get_collection(client, database_name, collection_name)
        run_catalog(collection, out=out)
        return True
    except Exception:
        logger.exception("Query run against %s.%s failed", database_name, collection_name)
        return False
    finally:
        if client is not None:
            client.close()
