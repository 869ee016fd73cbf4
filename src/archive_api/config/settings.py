# src/archive_api/config/settings.py
from typing import List, Optional
from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

DEPLOYMENT_MODES = ["local-dev", "aws-mock", "aws-prod"]
MOTO_SERVER_URL = "http://localhost:5000"


class Settings(BaseSettings):
    """
    Single source of truth for all application settings.

    Configuration precedence:
    1. Values passed to the constructor
    2. Environment variables
    3. .env file (if exists)
    4. Default values in this class (lowest priority)

    Usage:
        from archive_api.config import get_settings
        settings = get_settings()
        bucket_name = settings.s3_bucket_name
    """

    # Application Settings
    app_name: str = Field(
        default="archive-api",
        validation_alias=AliasChoices("APP_NAME"),
        description="Application name"
    )

    # Deployment Mode
    deployment_mode: str = Field(
        default="local-dev",
        validation_alias=AliasChoices("DEPLOYMENT_MODE"),
        description="Deployment mode: local-dev, aws-mock, or aws-prod"
    )

    # AWS Core Settings
    aws_region: str = Field(
        default="us-east-1",
        validation_alias=AliasChoices("BUCKET_REGION", "AWS_DEFAULT_REGION")
    )

    aws_access_key_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("ACCESS_KEY", "AWS_ACCESS_KEY_ID")
    )

    aws_secret_access_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SECRET_ACCESS_KEY", "AWS_SECRET_ACCESS_KEY")
    )

    aws_endpoint_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("AWS_ENDPOINT_URL")
    )

    # S3 / CloudFront
    s3_bucket_name: str = Field(
        default="archive-media",
        validation_alias=AliasChoices("BUCKET_NAME", "S3_BUCKET_NAME"),
        description="S3 bucket holding videos, photos and PDFs"
    )

    cloudfront_url: str = Field(
        default="http://localhost:8000/media",
        validation_alias=AliasChoices("CLOUDFRONT_URL"),
        description="Delivery base URL fronting the bucket"
    )

    # Cognito
    cognito_user_pool_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("COGNITO_USERPOOL_ID", "COGNITO_USER_POOL_ID")
    )

    cognito_client_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("COGNITO_CLIENT_ID")
    )

    # Record store
    mongodb_uri: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("MONGODB_URI", "DATABASE_URL"),
        description="MongoDB connection string; SQLite is used when unset"
    )

    database_path: str = Field(
        default="archive.db",
        validation_alias=AliasChoices("DATABASE_PATH"),
        description="SQLite file for local development"
    )

    # HTTP
    cors_origins: List[str] = Field(
        default=["http://localhost:5173"],
        validation_alias=AliasChoices("CORS_ORIGINS")
    )

    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT")
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL"),
        description="Logging level"
    )

    @field_validator('deployment_mode')
    def validate_deployment_mode(cls, v):
        """Validate deployment mode is one of the allowed values."""
        if v not in DEPLOYMENT_MODES:
            raise ValueError(f"Invalid deployment_mode: {v}. Must be one of {DEPLOYMENT_MODES}")
        return v

    @field_validator('cloudfront_url')
    def strip_trailing_slash(cls, v):
        """Public URLs are built as `<base>/<prefix>/<key>`."""
        return v.rstrip("/")

    @field_validator('log_level')
    def normalize_log_level(cls, v):
        return v.upper()

    @model_validator(mode='after')
    def apply_mode_defaults(self):
        """Local modes talk to a moto server with mock credentials unless told otherwise."""
        if self.deployment_mode in ["local-dev", "aws-mock"]:
            if self.aws_endpoint_url is None:
                self.aws_endpoint_url = MOTO_SERVER_URL
            if self.aws_access_key_id is None:
                self.aws_access_key_id = "mock"
            if self.aws_secret_access_key is None:
                self.aws_secret_access_key = "mock"
        # In aws-prod, None credentials let boto3 use the execution role
        return self

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one Settings instance per process.
    """
    return Settings()
