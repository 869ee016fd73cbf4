"""
Record lifecycle coordinator.

Orders blob store and record store operations for every record kind:

- create: validate, upload the blob, then insert the row. If the insert fails
  the blob is deleted again (best effort) and the failure is reported.
- delete: read the row, delete its blob(s), then delete the row. If the blob
  delete fails the row is left in place.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from database.local import RecordStore
from database.schemas import DOCUMENT_SCHEMAS, DocEntry, validate_document

from archive_api.adapters.storage import BlobStore
from archive_api.errors import (
    InvalidRequestError,
    NotFoundError,
    RecordWriteError,
    StorageDeleteError,
)
from archive_api.lifecycle.keys import generate_content_key, new_record_id
from archive_api.lifecycle.kinds import RECORD_KINDS, RecordKind
from archive_api.lifecycle.ordering import order_calendar
from archive_api.lifecycle.urls import (
    PEOPLE_PHOTOS_PREFIX,
    RESEARCH_PDF_PREFIX,
    object_key,
    public_url,
)
from archive_api.utils.decorators import log_record_operation

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class BlobPayload:
    """An uploaded file: original name, bytes and MIME type."""

    filename: str
    content: bytes
    content_type: Optional[str] = None


class RecordLifecycle:
    """Create/list/delete for one record kind across the blob and record stores."""

    def __init__(
        self,
        kind: RecordKind,
        blob_store: BlobStore,
        record_store: RecordStore,
        delivery_base: str,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.kind = kind
        self.blob_store = blob_store
        self.record_store = record_store
        self.delivery_base = delivery_base
        self.clock = clock

    # ---- helpers ---------------------------------------------------------

    def _normalize(self, row: Row) -> Row:
        """Coerce a stored row to its schema types (e.g. ISO strings to datetimes)."""
        schema = DOCUMENT_SCHEMAS[self.kind.collection]
        return schema.model_validate(row).model_dump(by_alias=True)

    def _order(self, rows: List[Row]) -> List[Row]:
        if self.kind.order is None:
            return rows
        return self.kind.order(rows)

    def _decorate(self, row: Row) -> Row:
        if self.kind.url_field is None:
            return row
        row[self.kind.url_field] = public_url(
            self.delivery_base, self.kind.key_prefix(row), row[self.kind.key_field]
        )
        return row

    def _discard_blob(self, key: str) -> None:
        """Compensating delete after a failed row write. Never raises."""
        try:
            self.blob_store.delete(key)
            logger.warning(f"Removed blob {key} after failed {self.kind.name} write")
        except StorageDeleteError as e:
            logger.warning(f"Could not remove orphaned blob {key}: {e.message}")

    def _require_writable(self) -> None:
        if not self.kind.writable:
            raise InvalidRequestError(f"{self.kind.name} records are read-only")

    def blob_key(self, row: Row) -> str:
        return object_key(self.kind.key_prefix(row), row[self.kind.key_field])

    def blob_keys(self, row: Row) -> List[str]:
        """Every object key a row owns."""
        if not self.kind.has_blob:
            return []
        return [self.blob_key(row)]

    # ---- operations ------------------------------------------------------

    @log_record_operation
    def create(self, metadata: Row, payload: Optional[BlobPayload] = None) -> Row:
        """Store the payload (if the kind has one) and then the row; return the row."""
        self._require_writable()

        record = dict(metadata)
        record["id"] = new_record_id()
        if self.kind.created_at_field:
            record[self.kind.created_at_field] = self.clock()

        if self.kind.has_blob:
            if payload is None:
                raise InvalidRequestError(f"A file is required to create {self.kind.name} records")
            record[self.kind.key_field] = generate_content_key(payload.filename)

        # validate before touching either store
        document = validate_document(self.kind.collection, record)

        key = None
        if self.kind.has_blob:
            key = self.blob_key(document)
            self.blob_store.put(key, payload.content, payload.content_type)

        try:
            self.record_store.create_document(self.kind.collection, document)
        except Exception as e:
            if key is not None:
                self._discard_blob(key)
            raise RecordWriteError(f"Failed to save {self.kind.name} record: {e}") from e

        logger.info(f"Created {self.kind.name} record {document['id']}")
        return document

    def get(self, record_id: str) -> Row:
        row = self.record_store.get_document(self.kind.collection, record_id)
        if row is None:
            raise NotFoundError(f"{self.kind.name} record {record_id} not found")
        return row

    def rows(self, **filters: Any) -> List[Row]:
        """Matching rows, normalized but neither ordered nor decorated."""
        found = self.record_store.query_documents(self.kind.collection, filters)
        return [self._normalize(row) for row in found]

    def list(self, **filters: Any) -> List[Row]:
        """Matching rows in the kind's order, with public URLs filled in."""
        return [self._decorate(row) for row in self._order(self.rows(**filters))]

    def groups(self) -> List[Any]:
        """Distinct grouping values (event names, years) across all rows."""
        if self.kind.group is None:
            raise InvalidRequestError(f"{self.kind.name} records have no grouping")
        return self.kind.group(self.rows())

    @log_record_operation
    def delete(self, record_id: str) -> Row:
        """Delete a record's blobs and then its row; return the row as it was."""
        self._require_writable()

        row = self.get(record_id)

        keys = self.blob_keys(row)
        if keys and self.kind.batch_delete:
            self.blob_store.delete_many(keys)
        else:
            for key in keys:
                self.blob_store.delete(key)

        try:
            deleted = self.record_store.delete_document(self.kind.collection, record_id)
        except Exception as e:
            raise RecordWriteError(f"Failed to delete {self.kind.name} record {record_id}: {e}") from e

        if not deleted:
            raise NotFoundError(f"{self.kind.name} record {record_id} not found")

        logger.info(f"Deleted {self.kind.name} record {record_id} and {len(keys)} blob(s)")
        return row


class CalendarLifecycle(RecordLifecycle):
    """Calendar listing splits events around the current time."""

    def _order(self, rows: List[Row]) -> List[Row]:
        return order_calendar(rows, self.clock())


class ProfileLifecycle(RecordLifecycle):
    """Profiles own a photo plus an append-only list of research PDFs."""

    docs_field = "docs"
    # S3 DeleteObjects takes at most 1000 keys and the photo needs one of them
    max_docs = 999

    def blob_keys(self, row: Row) -> List[str]:
        keys = [object_key(PEOPLE_PHOTOS_PREFIX, row["img"])]
        keys.extend(
            object_key(RESEARCH_PDF_PREFIX, doc["fileName"])
            for doc in row.get(self.docs_field) or []
        )
        return keys

    @log_record_operation
    def append_doc(self, profile_id: str, title: str, payload: BlobPayload) -> Row:
        """Upload a research PDF and append it to the profile's document list."""
        # resolve first so an unknown or full profile never leaves a blob behind
        profile = self.get(profile_id)
        if len(profile.get(self.docs_field) or []) >= self.max_docs:
            raise InvalidRequestError(
                f"Profile {profile_id} already has {self.max_docs} documents"
            )

        content_key = generate_content_key(payload.filename)
        entry = DocEntry(
            title=title,
            file_name=content_key,
            link=public_url(self.delivery_base, RESEARCH_PDF_PREFIX, content_key),
        ).model_dump(by_alias=True)

        key = object_key(RESEARCH_PDF_PREFIX, content_key)
        self.blob_store.put(key, payload.content, payload.content_type)

        try:
            appended = self.record_store.append_to_list(
                self.kind.collection, profile_id, self.docs_field, entry
            )
        except Exception as e:
            self._discard_blob(key)
            raise RecordWriteError(f"Failed to add document to profile {profile_id}: {e}") from e

        if not appended:
            self._discard_blob(key)
            raise NotFoundError(f"associates record {profile_id} not found")

        logger.info(f"Added document {content_key} to profile {profile_id}")
        return entry


LIFECYCLE_CLASSES = {
    "associates": ProfileLifecycle,
    "calendar": CalendarLifecycle,
}


def build_lifecycles(
    blob_store: BlobStore,
    record_store: RecordStore,
    delivery_base: str,
    clock: Callable[[], datetime] = utc_now,
) -> Dict[str, RecordLifecycle]:
    """One coordinator per record kind, keyed by kind name."""
    return {
        name: LIFECYCLE_CLASSES.get(name, RecordLifecycle)(
            kind, blob_store, record_store, delivery_base, clock
        )
        for name, kind in RECORD_KINDS.items()
    }
