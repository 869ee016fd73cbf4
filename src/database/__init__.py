"""
Record store for the archive.

Document adapters with one interface: MongoAdapter for deployed environments and
NoSQLAdapter (SQLite JSON documents) for local development and tests.
"""

from .local import RecordStore, get_record_store, init_db
from .mongo_adapter import MongoAdapter
from .nosql_adapter import NoSQLAdapter
from .schemas import COLLECTIONS, DOCUMENT_SCHEMAS, validate_document

__all__ = [
    'RecordStore', 'get_record_store', 'init_db',
    'MongoAdapter', 'NoSQLAdapter',
    'COLLECTIONS', 'DOCUMENT_SCHEMAS', 'validate_document',
]
