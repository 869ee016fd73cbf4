from typing import List

from fastapi import APIRouter, Depends, File, Form, Path, UploadFile

from archive_api.dependencies import lifecycle_for, read_payload
from archive_api.lifecycle import RecordLifecycle
from archive_api.schemas import LrmiItem, NewsletterItem

router = APIRouter()


@router.get("/lrmi", response_model=List[int])
async def list_lrmi_years(lifecycle: RecordLifecycle = Depends(lifecycle_for("lrmi"))):
    """Distinct report years, newest first."""
    return lifecycle.groups()


@router.get("/lrmi/{year}", response_model=List[LrmiItem])
async def list_lrmi_reports(
    year: int = Path(..., description="Report year"),
    lifecycle: RecordLifecycle = Depends(lifecycle_for("lrmi")),
):
    """Reports of one year by quarter, each with its public URL."""
    return lifecycle.list(year=year)


@router.post("/lrmi")
async def create_lrmi_report(
    year: int = Form(...),
    quarter: int = Form(...),
    pdf: UploadFile = File(..., description="Report PDF"),
    lifecycle: RecordLifecycle = Depends(lifecycle_for("lrmi")),
):
    """Upload a quarterly report under `lrmi-pdf/` and record it."""
    payload = await read_payload(pdf)
    lifecycle.create({"year": year, "quarter": quarter}, payload)
    return {}


@router.get("/newsletter", response_model=List[int])
async def list_newsletter_years(lifecycle: RecordLifecycle = Depends(lifecycle_for("newsletter"))):
    """Distinct newsletter years, newest first."""
    return lifecycle.groups()


@router.get("/newsletter/{year}", response_model=List[NewsletterItem])
async def list_newsletters(
    year: int = Path(..., description="Newsletter year"),
    lifecycle: RecordLifecycle = Depends(lifecycle_for("newsletter")),
):
    """Newsletters of one year, latest month first, each with its public URL."""
    return lifecycle.list(year=year)


@router.post("/newsletter")
async def create_newsletter(
    year: int = Form(...),
    month: int = Form(...),
    title: str = Form(...),
    pdf: UploadFile = File(..., description="Newsletter PDF"),
    lifecycle: RecordLifecycle = Depends(lifecycle_for("newsletter")),
):
    """Upload a newsletter under `newsletter-pdf/` and record it."""
    payload = await read_payload(pdf)
    lifecycle.create({"year": year, "month": month, "title": f"{title} (PDF)"}, payload)
    return {}
