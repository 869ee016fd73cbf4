"""
Blob store backed by an S3 bucket.
"""

import logging
from typing import List, Optional, Protocol

from archive_api.s3.delete_objects import delete_s3_object, delete_s3_objects
from archive_api.s3.read_objects import bucket_exists
from archive_api.s3.write_objects import upload_s3_object

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    """Operations the record lifecycle needs from object storage.

    Implementations raise StorageWriteError / StorageDeleteError on failure.
    """

    def put(self, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        ...

    def delete(self, key: str) -> None:
        ...

    def delete_many(self, keys: List[str]) -> None:
        ...


class S3BlobStore:
    """Stores payloads as objects in one S3 bucket."""

    def __init__(self, bucket_name: str, s3_client):
        self.bucket_name = bucket_name
        self.s3_client = s3_client
        logger.info(f"Using S3 bucket: {bucket_name}")

    def put(self, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        upload_s3_object(
            bucket_name=self.bucket_name,
            object_key=key,
            file_content=content,
            s3_client=self.s3_client,
            content_type=content_type,
        )

    def delete(self, key: str) -> None:
        delete_s3_object(self.bucket_name, key, self.s3_client)

    def delete_many(self, keys: List[str]) -> None:
        """Delete all keys in one DeleteObjects request."""
        delete_s3_objects(self.bucket_name, keys, self.s3_client)

    def is_available(self) -> bool:
        return bucket_exists(self.bucket_name, self.s3_client)
