from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from config import SERVER_SELECTION_TIMEOUT_MS
from logger import logger


def create_client(mongo_uri: str) -> MongoClient:
    """Create a MongoClient with a bounded server selection timeout.

    Construction does not touch the network; the first round trip is
    ``ping`` (or the first query).
    """
    return MongoClient(mongo_uri, serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS)


def ping(client: MongoClient) -> None:
    """Force a round trip so an unreachable server fails early."""
    try:
        client.admin.command("ping")
    except ServerSelectionTimeoutError as e:
        raise ConnectionError(
            "MongoDB server selection timed out; is the bookstore database reachable at MONGO_URI?"
        ) from e
    except ConnectionFailure as e:
        raise ConnectionError("Failed to connect to MongoDB server") from e
    logger.info("Connected to MongoDB")


def get_collection(client: MongoClient, database_name: str, collection_name: str) -> Collection:
    return client[database_name][collection_name]
