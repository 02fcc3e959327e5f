"""Database connections package."""

from blogsum.db.dynamodb import DynamoDBClient, dynamodb
from blogsum.db.postgres import dispose_engine, get_engine, get_session_factory, init_db

__all__ = [
    "get_session_factory",
    "get_engine",
    "init_db",
    "dispose_engine",
    "dynamodb",
    "DynamoDBClient",
]
