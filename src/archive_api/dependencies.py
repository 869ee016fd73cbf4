"""FastAPI dependencies resolving the per-app collaborators stored on `app.state`."""

from typing import Callable, Dict

from fastapi import Request, UploadFile

from archive_api.identity import CognitoIdentityDelegate
from archive_api.lifecycle import BlobPayload, RecordLifecycle


def get_lifecycles(request: Request) -> Dict[str, RecordLifecycle]:
    return request.app.state.lifecycles


def lifecycle_for(kind_name: str) -> Callable[[Request], RecordLifecycle]:
    """Dependency returning the coordinator for one record kind."""
    def dependency(request: Request) -> RecordLifecycle:
        return request.app.state.lifecycles[kind_name]

    dependency.__name__ = f"get_{kind_name}_lifecycle"
    return dependency


def get_identity_delegate(request: Request) -> CognitoIdentityDelegate:
    return request.app.state.identity


async def read_payload(upload: UploadFile) -> BlobPayload:
    """Buffer an uploaded file in memory."""
    content = await upload.read()
    return BlobPayload(
        filename=upload.filename or "",
        content=content,
        content_type=upload.content_type,
    )
