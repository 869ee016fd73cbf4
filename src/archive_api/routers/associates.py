from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Path, UploadFile

from archive_api.dependencies import lifecycle_for, read_payload
from archive_api.lifecycle import ProfileLifecycle
from archive_api.schemas import AssociateItem

router = APIRouter()


@router.get("/associates", response_model=List[AssociateItem])
async def list_associates(lifecycle: ProfileLifecycle = Depends(lifecycle_for("associates"))):
    """
    List staff profiles ordered by name; `img` is the photo's public URL.
    """
    return lifecycle.list()


@router.post("/associates")
async def create_associate(
    first_name: str = Form(..., alias="firstName"),
    last_name: str = Form(..., alias="lastName"),
    role: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    img: UploadFile = File(..., description="Profile photo"),
    lifecycle: ProfileLifecycle = Depends(lifecycle_for("associates")),
):
    """
    Upload a profile photo under `people-photos/` and record the profile.
    """
    payload = await read_payload(img)
    lifecycle.create(
        {"firstName": first_name, "lastName": last_name, "role": role, "bio": bio},
        payload,
    )
    return {}


@router.post("/associates/{profile_id}/docs")
async def add_associate_doc(
    profile_id: str = Path(..., description="Profile to attach the document to"),
    title: str = Form(...),
    pdf: UploadFile = File(..., description="Research PDF"),
    lifecycle: ProfileLifecycle = Depends(lifecycle_for("associates")),
):
    """
    Upload a research PDF under `research-pdf/` and append it to the profile's documents.
    """
    payload = await read_payload(pdf)
    lifecycle.append_doc(profile_id, title, payload)
    return {}
