"""Functions for writing objects to an S3 bucket--the "C" in CRUD."""

import logging
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from archive_api.errors import StorageWriteError

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

logger = logging.getLogger(__name__)


def upload_s3_object(
    bucket_name: str,
    object_key: str,
    file_content: bytes,
    s3_client: "S3Client",
    content_type: Optional[str] = None,
) -> None:
    """
    Upload a file to an S3 bucket.

    :param bucket_name: The name of the S3 bucket.
    :param object_key: path to the object in the S3 bucket.
    :param file_content: The content of the file to upload.
    :param s3_client: The boto3 S3 client.
    :param content_type: The MIME type of the file, e.g. "application/pdf".
    :raises StorageWriteError: if S3 rejects the upload.
    """
    content_type = content_type or "application/octet-stream"
    try:
        s3_client.put_object(
            Bucket=bucket_name,
            Key=object_key,
            Body=file_content,
            ContentType=content_type,
        )
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Error uploading {object_key} to bucket {bucket_name}: {e}")
        raise StorageWriteError(f"Failed to upload {object_key}: {e}", keys=[object_key]) from e

    logger.info(f"Uploaded {len(file_content)} bytes to s3://{bucket_name}/{object_key}")
