from datetime import datetime
from textwrap import dedent
from typing import Callable, Optional
import logging
import pydantic
from fastapi import FastAPI
from fastapi.routing import APIRoute
from fastapi.middleware.cors import CORSMiddleware

from database.local import RecordStore, init_db

from archive_api.adapters.storage import BlobStore, S3BlobStore
from archive_api.aws_clients import AWSClientManager, get_cognito_client, get_s3_client
from archive_api.config.settings import Settings, get_settings
from archive_api.errors import (
    ArchiveError,
    IdentityProviderError,
    NotFoundError,
    handle_archive_errors,
    handle_broad_exceptions,
    handle_identity_provider_errors,
    handle_not_found,
    handle_pydantic_validation_errors,
)
from archive_api.identity import CognitoIdentityDelegate
from archive_api.lifecycle import build_lifecycles
from archive_api.lifecycle.coordinator import utc_now
from archive_api.routers.associates import router as associates_router
from archive_api.routers.auth import router as auth_router
from archive_api.routers.calendar import router as calendar_router
from archive_api.routers.contacts import router as contacts_router
from archive_api.routers.documents import router as documents_router
from archive_api.routers.health import router as health_router
from archive_api.routers.media import router as media_router
from archive_api.routers.records import router as records_router

# Set up logging
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    record_store: Optional[RecordStore] = None,
    blob_store: Optional[BlobStore] = None,
    identity: Optional[CognitoIdentityDelegate] = None,
    clock: Callable[[], datetime] = utc_now,
) -> FastAPI:
    """Create a FastAPI application.

    Collaborators not passed in are built from settings: S3 and Cognito
    clients through AWSClientManager and the record store via init_db.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Archive API",
        summary="Videos, profiles, reports, newsletters and calendar events",
        version="v1",
        description=dedent(
            """\
        Records live in the record store; their files live in S3 and are served
        through the CDN base configured as `CLOUDFRONT_URL`.

        | Resource | Files stored under |
        | --- | --- |
        | videos | `<eventName>/` |
        | associates | `people-photos/`, `research-pdf/` |
        | lrmi | `lrmi-pdf/` |
        | newsletter | `newsletter-pdf/` |
        """
        ),
        docs_url="/docs",
        generate_unique_id_function=custom_generate_unique_id,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "OPTIONS", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    clients = AWSClientManager(settings)
    if record_store is None:
        logger.info("creating db")
        record_store = init_db(settings.mongodb_uri, settings.database_path)
    else:
        record_store.init_collections()
    blob_store = blob_store or S3BlobStore(settings.s3_bucket_name, get_s3_client(clients))
    identity = identity or CognitoIdentityDelegate(
        get_cognito_client(clients),
        settings.cognito_user_pool_id,
        settings.cognito_client_id,
    )

    app.state.settings = settings
    app.state.record_store = record_store
    app.state.blob_store = blob_store
    app.state.identity = identity
    app.state.lifecycles = build_lifecycles(blob_store, record_store, settings.cloudfront_url, clock)

    app.include_router(media_router, prefix="/api", tags=["videos"])
    app.include_router(associates_router, prefix="/api", tags=["associates"])
    app.include_router(calendar_router, prefix="/api", tags=["calendar"])
    app.include_router(documents_router, prefix="/api", tags=["documents"])
    app.include_router(contacts_router, prefix="/api", tags=["contacts"])
    app.include_router(records_router, prefix="/api", tags=["records"])
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(health_router, tags=["health"])

    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(IdentityProviderError, handle_identity_provider_errors)
    app.add_exception_handler(ArchiveError, handle_archive_errors)
    app.add_exception_handler(
        exc_class_or_status_code=pydantic.ValidationError,
        handler=handle_pydantic_validation_errors,
    )
    app.middleware("http")(handle_broad_exceptions)

    return app


def custom_generate_unique_id(route: APIRoute):
    """
    Generate prettier `operationId`s in the OpenAPI schema.

    These become the function names in generated client SDKs.
    """
    return f"{route.tags[0]}-{route.name}"


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)
