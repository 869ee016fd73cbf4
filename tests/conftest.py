import pytest
from fastapi.testclient import TestClient

from archive_api.config.settings import Settings
from archive_api.identity import CognitoIdentityDelegate
from archive_api.main import create_app
from tests.consts import (
    TEST_BUCKET_NAME,
    TEST_CLIENT_ID,
    TEST_DELIVERY_BASE,
    TEST_REGION,
    TEST_USER_POOL_ID,
)
from tests.fixtures.blob_store import blob_store  # noqa: F401
from tests.fixtures.clock import clock  # noqa: F401
from tests.fixtures.cognito import cognito_client  # noqa: F401
from tests.fixtures.db_client import record_store  # noqa: F401
from tests.fixtures.mocked_aws import mocked_aws  # noqa: F401


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        deployment_mode="aws-prod",
        aws_region=TEST_REGION,
        s3_bucket_name=TEST_BUCKET_NAME,
        cloudfront_url=TEST_DELIVERY_BASE,
        cognito_user_pool_id=TEST_USER_POOL_ID,
        cognito_client_id=TEST_CLIENT_ID,
        database_path=str(tmp_path / "archive.db"),
        _env_file=None,
    )


@pytest.fixture
def identity(cognito_client) -> CognitoIdentityDelegate:  # noqa: F811
    return CognitoIdentityDelegate(cognito_client, TEST_USER_POOL_ID, TEST_CLIENT_ID)


@pytest.fixture
def client(mocked_aws, record_store, test_settings, identity, clock):  # noqa: F811
    """App wired to moto S3, a temporary SQLite store and the fake Cognito client."""
    app = create_app(
        settings=test_settings,
        record_store=record_store,
        identity=identity,
        clock=clock,
    )
    with TestClient(app) as client:
        yield client
