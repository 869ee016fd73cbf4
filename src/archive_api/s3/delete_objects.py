"""Functions for deleting objects from an S3 bucket--the "D" in CRUD."""

import logging
from typing import List

from botocore.exceptions import BotoCoreError, ClientError

from archive_api.errors import StorageDeleteError

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

logger = logging.getLogger(__name__)


def delete_s3_object(bucket_name: str, object_key: str, s3_client: "S3Client") -> None:
    """
    Delete one object from an S3 bucket.

    :param bucket_name: The name of the S3 bucket.
    :param object_key: path to the object in the S3 bucket.
    :param s3_client: The boto3 S3 client.
    :raises StorageDeleteError: if S3 rejects the delete.
    """
    try:
        s3_client.delete_object(Bucket=bucket_name, Key=object_key)
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Error deleting {object_key} from bucket {bucket_name}: {e}")
        raise StorageDeleteError(f"Failed to delete {object_key}: {e}", keys=[object_key]) from e

    logger.info(f"Deleted s3://{bucket_name}/{object_key}")


def delete_s3_objects(bucket_name: str, object_keys: List[str], s3_client: "S3Client") -> None:
    """
    Delete several objects from an S3 bucket with a single DeleteObjects call.

    S3 reports per-key failures in the response body rather than raising, so any
    entry under `Errors` is treated as a failure of the whole batch.

    :param bucket_name: The name of the S3 bucket.
    :param object_keys: paths to the objects in the S3 bucket (at most 1000).
    :param s3_client: The boto3 S3 client.
    :raises StorageDeleteError: if the call fails or any key could not be deleted.
    """
    try:
        response = s3_client.delete_objects(
            Bucket=bucket_name,
            Delete={
                "Objects": [{"Key": key} for key in object_keys],
                "Quiet": True,
            },
        )
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Error batch deleting {len(object_keys)} objects from bucket {bucket_name}: {e}")
        raise StorageDeleteError(f"Failed to delete {len(object_keys)} objects: {e}", keys=object_keys) from e

    errors = response.get("Errors") or []
    if errors:
        failed_keys = [error.get("Key", "") for error in errors]
        logger.error(f"S3 refused to delete {failed_keys} from bucket {bucket_name}")
        raise StorageDeleteError(f"Failed to delete objects: {', '.join(failed_keys)}", keys=failed_keys)

    logger.info(f"Deleted {len(object_keys)} objects from s3://{bucket_name}")
