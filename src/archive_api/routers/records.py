"""DELETE routes, one per writable record kind, generated from the kind table."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Path

from archive_api.dependencies import lifecycle_for
from archive_api.lifecycle import RECORD_KINDS, RecordLifecycle

router = APIRouter()


def _delete_endpoint(kind_name: str):
    async def delete_record(
        record_id: str = Path(..., description="Id of the record to delete"),
        lifecycle: RecordLifecycle = Depends(lifecycle_for(kind_name)),
    ) -> Dict[str, Any]:
        return lifecycle.delete(record_id)

    delete_record.__name__ = f"delete_{kind_name}"
    delete_record.__doc__ = (
        f"Delete a {kind_name} record and its stored files; returns the deleted record."
    )
    return delete_record


for kind in RECORD_KINDS.values():
    if kind.writable:
        router.add_api_route(
            f"/{kind.name}/{{record_id}}",
            _delete_endpoint(kind.name),
            methods=["DELETE"],
            name=f"delete_{kind.name}",
        )
