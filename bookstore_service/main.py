#!/usr/bin/env python3
"""
Bookstore query runner.

Usage:
    python main.py

Connection settings come from the environment (or a ``.env`` file):
``MONGO_URI``, ``DATABASE_NAME``, ``COLLECTION_NAME``.
"""

from config import COLLECTION_NAME, DATABASE_NAME, MONGO_URI
from query_runner import run


def main() -> None:
    # Failures are logged by the runner; the process exits normally either way.
    run(MONGO_URI, DATABASE_NAME, COLLECTION_NAME)


if __name__ == "__main__":
    main()
