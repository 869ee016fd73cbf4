import logging
from typing import Optional, Union
from .nosql_adapter import NoSQLAdapter
from .mongo_adapter import MongoAdapter

logger = logging.getLogger(__name__)

RecordStore = Union[NoSQLAdapter, MongoAdapter]


def get_record_store(mongodb_uri: Optional[str] = None, db_path: str = "archive.db") -> RecordStore:
    """Pick the record store: MongoDB when a connection string is configured, SQLite otherwise."""
    if mongodb_uri:
        logger.info("Using MongoDB record store")
        return MongoAdapter(mongodb_uri)

    logger.info(f"Using SQLite record store at {db_path}")
    return NoSQLAdapter(db_path)


def init_db(mongodb_uri: Optional[str] = None, db_path: str = "archive.db") -> RecordStore:
    """Create the record store and make sure its collections exist."""
    store = get_record_store(mongodb_uri, db_path)
    store.init_collections()
    return store
