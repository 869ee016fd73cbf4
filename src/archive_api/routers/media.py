from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Path, UploadFile

from archive_api.dependencies import lifecycle_for, read_payload
from archive_api.lifecycle import RecordLifecycle
from archive_api.schemas import VideoItem

router = APIRouter()


@router.get("/videos/{event_name}", response_model=List[VideoItem])
async def list_videos(
    event_name: str = Path(..., description="Event whose recordings to list"),
    lifecycle: RecordLifecycle = Depends(lifecycle_for("videos")),
):
    """
    List the recordings of one event, oldest first, each with its public URL.
    """
    return lifecycle.list(eventName=event_name)


@router.get("/events", response_model=List[str])
async def list_events(lifecycle: RecordLifecycle = Depends(lifecycle_for("videos"))):
    """
    List distinct event names, the event with the most recent upload first.
    """
    return lifecycle.groups()


@router.post("/videos")
async def create_video(
    event_name: str = Form(..., alias="eventName"),
    title: str = Form(...),
    desc: Optional[str] = Form(None),
    file: UploadFile = File(..., description="The video file"),
    lifecycle: RecordLifecycle = Depends(lifecycle_for("videos")),
):
    """
    Upload a video under `<eventName>/` and record it.
    """
    payload = await read_payload(file)
    lifecycle.create({"eventName": event_name, "title": title, "desc": desc}, payload)
    return {}
