import boto3
import pytest

from archive_api.adapters.storage import S3BlobStore
from archive_api.errors import StorageDeleteError, StorageWriteError
from tests.consts import TEST_BUCKET_NAME, TEST_PDF_CONTENT, TEST_REGION


def bucket_keys(s3_client) -> list:
    response = s3_client.list_objects_v2(Bucket=TEST_BUCKET_NAME)
    return sorted(obj["Key"] for obj in response.get("Contents", []))


@pytest.fixture
def s3_blob_store(mocked_aws) -> S3BlobStore:
    return S3BlobStore(TEST_BUCKET_NAME, mocked_aws)


def test_put_stores_content_and_type(s3_blob_store: S3BlobStore, mocked_aws):
    s3_blob_store.put("lrmi-pdf/abc.pdf", TEST_PDF_CONTENT, "application/pdf")

    response = mocked_aws.get_object(Bucket=TEST_BUCKET_NAME, Key="lrmi-pdf/abc.pdf")
    assert response["Body"].read() == TEST_PDF_CONTENT
    assert response["ContentType"] == "application/pdf"


def test_put_defaults_content_type(s3_blob_store: S3BlobStore, mocked_aws):
    s3_blob_store.put("gala/abc", b"raw")

    response = mocked_aws.head_object(Bucket=TEST_BUCKET_NAME, Key="gala/abc")
    assert response["ContentType"] == "application/octet-stream"


def test_delete_removes_the_object(s3_blob_store: S3BlobStore, mocked_aws):
    s3_blob_store.put("people-photos/a.jpg", b"jpeg")
    assert bucket_keys(mocked_aws) == ["people-photos/a.jpg"]

    s3_blob_store.delete("people-photos/a.jpg")

    assert bucket_keys(mocked_aws) == []


def test_delete_many_removes_every_key(s3_blob_store: S3BlobStore, mocked_aws):
    keys = ["people-photos/a.jpg", "research-pdf/b.pdf", "research-pdf/c.pdf"]
    for key in keys:
        s3_blob_store.put(key, b"content")

    s3_blob_store.delete_many(keys)

    assert bucket_keys(mocked_aws) == []


def test_put_to_missing_bucket_raises_storage_write_error(mocked_aws):
    store = S3BlobStore("bucket-that-does-not-exist", mocked_aws)

    with pytest.raises(StorageWriteError) as exc_info:
        store.put("lrmi-pdf/abc.pdf", TEST_PDF_CONTENT)

    assert exc_info.value.keys == ["lrmi-pdf/abc.pdf"]


def test_delete_from_missing_bucket_raises_storage_delete_error(mocked_aws):
    store = S3BlobStore("bucket-that-does-not-exist", mocked_aws)

    with pytest.raises(StorageDeleteError):
        store.delete("gala/abc.mp4")
    with pytest.raises(StorageDeleteError):
        store.delete_many(["gala/abc.mp4"])


def test_per_key_errors_fail_the_batch(s3_blob_store: S3BlobStore, monkeypatch):
    def partial_failure(**kwargs):
        return {
            "Deleted": [{"Key": "people-photos/a.jpg"}],
            "Errors": [{"Key": "research-pdf/b.pdf", "Code": "AccessDenied", "Message": "Access Denied"}],
        }

    monkeypatch.setattr(s3_blob_store.s3_client, "delete_objects", partial_failure)

    with pytest.raises(StorageDeleteError) as exc_info:
        s3_blob_store.delete_many(["people-photos/a.jpg", "research-pdf/b.pdf"])

    assert exc_info.value.keys == ["research-pdf/b.pdf"]


def test_is_available_reflects_bucket(s3_blob_store: S3BlobStore, mocked_aws):
    assert s3_blob_store.is_available()
    assert not S3BlobStore("bucket-that-does-not-exist", boto3.client("s3", region_name=TEST_REGION)).is_available()
