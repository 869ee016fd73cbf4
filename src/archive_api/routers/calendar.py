from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Form

from archive_api.dependencies import lifecycle_for
from archive_api.lifecycle import CalendarLifecycle
from archive_api.schemas import CalendarItem

router = APIRouter()


@router.get("/calendar", response_model=List[CalendarItem])
async def list_calendar(lifecycle: CalendarLifecycle = Depends(lifecycle_for("calendar"))):
    """
    List calendar events: upcoming ones (latest first), then past ones (oldest first).
    """
    return lifecycle.list()


@router.post("/calendar")
async def create_calendar_event(
    title: str = Form(...),
    desc: Optional[str] = Form(None),
    date: datetime = Form(..., description="ISO 8601 date or datetime; a bare date is midnight UTC"),
    lifecycle: CalendarLifecycle = Depends(lifecycle_for("calendar")),
):
    """
    Record a calendar event. Calendar events have no file.
    """
    lifecycle.create({"title": title, "desc": desc, "date": date})
    return {}
