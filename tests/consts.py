"""Constants shared by the test suite."""
from datetime import datetime, timezone

TEST_BUCKET_NAME = "some-bucket"
TEST_REGION = "us-east-1"
TEST_DELIVERY_BASE = "https://cdn.example.test"
TEST_USER_POOL_ID = "us-east-1_testpool"
TEST_CLIENT_ID = "test-client-id"

# the clock every test app starts from
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)

TEST_PDF_CONTENT = b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\ntrailer\n<</Root 1 0 R>>\n%%EOF"
TEST_JPEG_CONTENT = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00"
TEST_VIDEO_CONTENT = b"\x00\x00\x00\x18ftypmp42"
