"""
Document schemas for the archive collections.
Each collection stores camelCase documents; these models validate a document
before it is written and normalize documents read back from either adapter.
"""

from typing import Dict, Any, List, Optional, Type
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ArchiveDocument(BaseModel):
    """Base schema: camelCase on the wire and in storage, snake_case in Python"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Record identifier")


def _as_utc(value: datetime) -> datetime:
    # naive datetimes from the stores are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class VideoDocument(ArchiveDocument):
    """Schema for recorded event videos"""
    event_name: str = Field(..., min_length=1, description="Event the recording belongs to")
    file_name: str = Field(..., min_length=1, description="Content key of the video object")
    title: str = Field(..., description="Video title")
    desc: Optional[str] = Field(None, description="Free-text description")
    created_at: datetime = Field(..., description="Upload timestamp")

    @field_validator('event_name')
    def event_name_is_one_segment(cls, v):
        """The event name is the object key prefix, so it may not contain a slash"""
        if '/' in v:
            raise ValueError("eventName must not contain '/'")
        return v

    @field_validator('created_at')
    def created_at_is_utc(cls, v):
        return _as_utc(v)


# Research document embedded in an associate profile
class DocEntry(BaseModel):
    """Schema for an entry of a profile's ordered document list"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., description="Document title")
    file_name: str = Field(..., min_length=1, description="Content key of the PDF object")
    link: str = Field(..., description="Public delivery URL of the PDF")


class AssociateDocument(ArchiveDocument):
    """Schema for staff profiles"""
    img: str = Field(..., min_length=1, description="Content key of the profile photo")
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    role: Optional[str] = None
    bio: Optional[str] = None
    docs: List[DocEntry] = Field(default_factory=list, description="Append-only document list")


class CalendarDocument(ArchiveDocument):
    """Schema for calendar events"""
    title: str = Field(..., min_length=1)
    desc: Optional[str] = None
    date: datetime = Field(..., description="Event date")

    @field_validator('date')
    def date_is_utc(cls, v):
        return _as_utc(v)


class LrmiDocument(ArchiveDocument):
    """Schema for quarterly LRMI reports"""
    file_name: str = Field(..., min_length=1)
    year: int = Field(..., ge=1900, le=9999)
    quarter: int = Field(..., ge=1, le=4)


class NewsletterDocument(ArchiveDocument):
    """Schema for monthly newsletters"""
    file_name: str = Field(..., min_length=1)
    year: int = Field(..., ge=1900, le=9999)
    month: int = Field(..., ge=1, le=12)
    title: str = Field(..., min_length=1)


class ContactDocument(ArchiveDocument):
    """Contact rows are managed outside this service and passed through as-is"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='allow')


DOCUMENT_SCHEMAS: Dict[str, Type[ArchiveDocument]] = {
    'videos': VideoDocument,
    'associates': AssociateDocument,
    'calendar': CalendarDocument,
    'lrmi': LrmiDocument,
    'newsletter': NewsletterDocument,
    'contacts': ContactDocument,
}

COLLECTIONS = tuple(DOCUMENT_SCHEMAS)


def validate_document(collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a document and return it in its stored (camelCase) form.

    Raises pydantic.ValidationError when the document does not match the schema.
    """
    if collection not in DOCUMENT_SCHEMAS:
        raise ValueError(f"Unknown collection: {collection}")
    model = DOCUMENT_SCHEMAS[collection].model_validate(document)
    return model.model_dump(by_alias=True)
