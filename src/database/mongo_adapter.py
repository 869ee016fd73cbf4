"""
MongoDB adapter for the archive collections.
Provides the same interface as NoSQLAdapter on native MongoDB collections.
"""

import os
import logging
from typing import Dict, Any, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.errors import ConnectionFailure

from .schemas import COLLECTIONS

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = 'archive'


class MongoAdapter:
    """MongoDB adapter for document-based database operations"""

    def __init__(self, connection_string: Optional[str] = None):
        self.connection_string = connection_string or os.getenv('MONGODB_URI')
        if not self.connection_string:
            raise ValueError("MongoDB connection string required. Set MONGODB_URI environment variable or pass connection_string")

        self.client = None
        self.db = None
        self._connect()

    def _connect(self) -> None:
        """Establish MongoDB connection"""
        try:
            # tz_aware so stored datetimes come back as UTC-aware values
            self.client = MongoClient(self.connection_string, tz_aware=True)
            self.db = self.client.get_default_database(default=DEFAULT_DATABASE_NAME)

            # Test connection
            self.client.admin.command('ping')
            logger.info(f"Connected to MongoDB database: {self.db.name}")

        except ConnectionFailure as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    def _collection(self, collection: str):
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
        return self.db[collection]

    @staticmethod
    def _strip_object_id(document: Dict[str, Any]) -> Dict[str, Any]:
        """Expose `id` instead of Mongo's `_id`.

        Rows written by other tools only carry `_id`; its string form is used.
        """
        object_id = document.pop('_id', None)
        if 'id' not in document and object_id is not None:
            document['id'] = str(object_id)
        return document

    @staticmethod
    def _id_filter(doc_id: str) -> Dict[str, Any]:
        """Match a row by `id`, or by `_id` for rows that only carry an ObjectId."""
        if ObjectId.is_valid(doc_id):
            return {"$or": [{"id": doc_id}, {"_id": ObjectId(doc_id)}]}
        return {"id": doc_id}

    def init_collections(self) -> None:
        """Initialize MongoDB indexes"""
        try:
            for collection_name in COLLECTIONS:
                self.db[collection_name].create_index([("id", ASCENDING)], unique=True, sparse=True)

            self.db['videos'].create_index([("eventName", ASCENDING), ("createdAt", ASCENDING)])
            self.db['videos'].create_index([("createdAt", DESCENDING)])
            self.db['lrmi'].create_index([("year", ASCENDING)])
            self.db['newsletter'].create_index([("year", ASCENDING)])
            self.db['calendar'].create_index([("date", ASCENDING)])

            logger.info("MongoDB collections and indexes initialized successfully")

        except Exception as e:
            logger.error(f"Error initializing MongoDB collections: {e}")
            raise

    def create_document(self, collection: str, document: Dict[str, Any]) -> str:
        """Create a new document in the collection"""
        try:
            # insert_one adds `_id` to the dict it is given
            self._collection(collection).insert_one(dict(document))
            doc_id = document['id']
            logger.info(f"Created document in {collection} with ID: {doc_id}")
            return doc_id

        except Exception as e:
            logger.error(f"Error creating document in {collection}: {e}")
            raise

    def get_document(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Get a document by ID"""
        try:
            document = self._collection(collection).find_one(self._id_filter(doc_id))
            if document:
                return self._strip_object_id(document)
            return None

        except Exception as e:
            logger.error(f"Error getting document from {collection}: {e}")
            raise

    def delete_document(self, collection: str, doc_id: str) -> bool:
        """Delete a document by ID"""
        try:
            result = self._collection(collection).delete_one(self._id_filter(doc_id))
            success = result.deleted_count > 0

            if success:
                logger.info(f"Deleted document from {collection} with ID: {doc_id}")
            else:
                logger.warning(f"No document found to delete in {collection} with ID: {doc_id}")

            return success

        except Exception as e:
            logger.error(f"Error deleting document from {collection}: {e}")
            raise

    def append_to_list(self, collection: str, doc_id: str, field: str, item: Dict[str, Any]) -> bool:
        """Append an item to a list field with `$push`"""
        try:
            result = self._collection(collection).update_one(self._id_filter(doc_id), {"$push": {field: item}})
            success = result.matched_count > 0

            if success:
                logger.info(f"Appended to {field} of {collection} document {doc_id}")
            else:
                logger.warning(f"No document found to append to in {collection} with ID: {doc_id}")

            return success

        except Exception as e:
            logger.error(f"Error appending to document in {collection}: {e}")
            raise

    def query_documents(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Dict[str, Any]]:
        """Query documents by field equality"""
        try:
            cursor = self._collection(collection).find(query or {}).skip(offset)
            if limit is not None:
                cursor = cursor.limit(limit)

            return [self._strip_object_id(doc) for doc in cursor]

        except Exception as e:
            logger.error(f"Error querying documents from {collection}: {e}")
            raise

    def count_documents(self, collection: str, query: Optional[Dict[str, Any]] = None) -> int:
        """Count documents matching query"""
        try:
            return self._collection(collection).count_documents(query or {})
        except Exception as e:
            logger.error(f"Error counting documents in {collection}: {e}")
            raise

    def close(self) -> None:
        """Close MongoDB connection"""
        if self.client:
            self.client.close()
            logger.info("MongoDB connection closed")
