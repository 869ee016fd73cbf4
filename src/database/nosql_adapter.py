"""
SQLite document adapter for the archive collections.
Stores each collection as a table of JSON documents keyed by the record id and
exposes the same interface as MongoAdapter, so local development and tests run
without a MongoDB server.
"""

import sqlite3
import json
import logging
from typing import Dict, Any, List, Optional
from datetime import datetime
from .schemas import COLLECTIONS

logger = logging.getLogger(__name__)


class NoSQLAdapter:
    """Document store backed by SQLite JSON columns"""

    def __init__(self, db_path: str = "archive.db"):
        self.db_path = db_path

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection"""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _table(self, collection: str) -> str:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
        return f"{collection}_docs"

    def _serialize_document(self, document: Dict[str, Any]) -> str:
        """Serialize document to JSON string"""
        def json_serializer(obj):
            if isinstance(obj, datetime):
                return obj.isoformat()
            raise TypeError(f"Object of type {type(obj)} is not JSON serializable")

        return json.dumps(document, default=json_serializer)

    def _deserialize_document(self, json_str: str) -> Dict[str, Any]:
        """Deserialize JSON string to document"""
        return json.loads(json_str)

    def init_collections(self) -> None:
        """Create one document table per collection"""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            for collection in COLLECTIONS:
                cursor.execute(f'''
                    CREATE TABLE IF NOT EXISTS {self._table(collection)} (
                        doc_id TEXT PRIMARY KEY,
                        document TEXT NOT NULL,
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                ''')
            conn.commit()
            logger.info("NoSQL collections initialized successfully")
        except Exception as e:
            logger.error(f"Error initializing collections: {e}")
            raise
        finally:
            conn.close()

    def create_document(self, collection: str, document: Dict[str, Any]) -> str:
        """Insert a document; its `id` field becomes the primary key"""
        table = self._table(collection)
        conn = self._get_connection()
        try:
            doc_id = document['id']
            conn.execute(
                f'INSERT INTO {table} (doc_id, document) VALUES (?, ?)',
                (doc_id, self._serialize_document(document))
            )
            conn.commit()
            logger.info(f"Created document in {collection} with ID: {doc_id}")
            return doc_id
        except Exception as e:
            logger.error(f"Error creating document in {collection}: {e}")
            raise
        finally:
            conn.close()

    def get_document(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Get a document by ID"""
        table = self._table(collection)
        conn = self._get_connection()
        try:
            row = conn.execute(f'SELECT document FROM {table} WHERE doc_id = ?', (doc_id,)).fetchone()
            if row:
                return self._deserialize_document(row['document'])
            return None
        except Exception as e:
            logger.error(f"Error getting document from {collection}: {e}")
            raise
        finally:
            conn.close()

    def delete_document(self, collection: str, doc_id: str) -> bool:
        """Delete a document by ID"""
        table = self._table(collection)
        conn = self._get_connection()
        try:
            cursor = conn.execute(f'DELETE FROM {table} WHERE doc_id = ?', (doc_id,))
            success = cursor.rowcount > 0
            conn.commit()

            if success:
                logger.info(f"Deleted document from {collection} with ID: {doc_id}")
            else:
                logger.warning(f"No document found to delete in {collection} with ID: {doc_id}")

            return success
        except Exception as e:
            logger.error(f"Error deleting document from {collection}: {e}")
            raise
        finally:
            conn.close()

    def append_to_list(self, collection: str, doc_id: str, field: str, item: Dict[str, Any]) -> bool:
        """Append an item to a list field of a document.

        The read-modify-write runs in one IMMEDIATE transaction so concurrent
        appends to the same document are serialized.
        """
        table = self._table(collection)
        conn = self._get_connection()
        try:
            conn.execute('BEGIN IMMEDIATE')
            row = conn.execute(f'SELECT document FROM {table} WHERE doc_id = ?', (doc_id,)).fetchone()
            if row is None:
                conn.rollback()
                logger.warning(f"No document found to append to in {collection} with ID: {doc_id}")
                return False

            document = self._deserialize_document(row['document'])
            document.setdefault(field, []).append(item)
            conn.execute(
                f'UPDATE {table} SET document = ?, updated_at = CURRENT_TIMESTAMP WHERE doc_id = ?',
                (self._serialize_document(document), doc_id)
            )
            conn.commit()
            logger.info(f"Appended to {field} of {collection} document {doc_id}")
            return True
        except Exception as e:
            conn.rollback()
            logger.error(f"Error appending to document in {collection}: {e}")
            raise
        finally:
            conn.close()

    def query_documents(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[Dict[str, Any]]:
        """Query documents by top-level field equality"""
        table = self._table(collection)
        conn = self._get_connection()
        try:
            sql = f"SELECT document FROM {table}"
            where_clauses = []
            params: List[Any] = []

            for key, value in (query or {}).items():
                if key == 'id':
                    where_clauses.append("doc_id = ?")
                    params.append(value)
                else:
                    where_clauses.append("json_extract(document, ?) = ?")
                    params.extend([f"$.{key}", value])

            if where_clauses:
                sql += " WHERE " + " AND ".join(where_clauses)

            # insertion order, matching Mongo's natural order for a fresh collection
            sql += " ORDER BY rowid"

            if limit is not None:
                sql += " LIMIT ? OFFSET ?"
                params.extend([limit, offset])
            elif offset:
                sql += " LIMIT -1 OFFSET ?"
                params.append(offset)

            rows = conn.execute(sql, params).fetchall()
            return [self._deserialize_document(row['document']) for row in rows]
        except Exception as e:
            logger.error(f"Error querying documents from {collection}: {e}")
            raise
        finally:
            conn.close()

    def count_documents(self, collection: str, query: Optional[Dict[str, Any]] = None) -> int:
        """Count documents matching query"""
        return len(self.query_documents(collection, query))

    def close(self) -> None:
        """Connections are opened per operation; nothing to release"""
        pass
