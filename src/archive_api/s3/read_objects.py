"""Functions for reading objects from an S3 bucket--the "R" in CRUD."""

from botocore.exceptions import ClientError

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...


def bucket_exists(bucket_name: str, s3_client: "S3Client") -> bool:
    """Check that the bucket is reachable with the configured credentials."""
    try:
        s3_client.head_bucket(Bucket=bucket_name)
        return True
    except ClientError as err:
        error_code = err.response["Error"]["Code"]
        if error_code in ("404", "NoSuchBucket", "403"):
            return False
        raise
