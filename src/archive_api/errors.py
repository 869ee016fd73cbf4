"""Error taxonomy for the archive and the FastAPI handlers that render it."""

import logging
from typing import Iterable, Optional

import pydantic
from fastapi import Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class ArchiveError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ArchiveError):
    """The record to read, append to or delete does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidRequestError(ArchiveError):
    """The request is missing something the operation needs (e.g. the file)."""

    status_code = status.HTTP_400_BAD_REQUEST


class StorageError(ArchiveError):
    """The blob store rejected an operation."""

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, message: str, keys: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.keys = list(keys or [])


class StorageWriteError(StorageError):
    """Uploading an object to the blob store failed."""


class StorageDeleteError(StorageError):
    """Deleting one or more objects from the blob store failed."""


class RecordWriteError(ArchiveError):
    """The record store failed to persist or remove a row."""


class IdentityProviderError(ArchiveError):
    """The identity provider refused or failed a request; passed through as 400."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, code: str = "IdentityProviderError"):
        super().__init__(message)
        self.code = code


async def handle_not_found(request: Request, exc: NotFoundError) -> PlainTextResponse:
    logger.info(f"{request.method} {request.url.path}: {exc.message}")
    return PlainTextResponse("Not found", status_code=exc.status_code)


async def handle_identity_provider_errors(request: Request, exc: IdentityProviderError) -> JSONResponse:
    logger.warning(f"Identity provider error on {request.url.path}: {exc.code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


async def handle_archive_errors(request: Request, exc: ArchiveError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def handle_pydantic_validation_errors(request: Request, exc: pydantic.ValidationError) -> JSONResponse:
    errors = exc.errors()
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": [
                {
                    "msg": error["msg"],
                    "loc": list(error["loc"]),
                    "input": str(error.get("input")),
                }
                for error in errors
            ]
        },
    )


async def handle_broad_exceptions(request: Request, call_next):
    """Handle any exception that goes unhandled by a more specific exception handler."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
