from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from archive_api.dependencies import lifecycle_for
from archive_api.lifecycle import RecordLifecycle

router = APIRouter()


@router.get("/contacts", response_model=List[Dict[str, Any]])
async def list_contacts(lifecycle: RecordLifecycle = Depends(lifecycle_for("contacts"))):
    """Contact rows as stored."""
    return lifecycle.list()
