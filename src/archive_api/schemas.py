####################################
# --- Request/response schemas --- #
####################################

from pydantic import ConfigDict, Field

from database.schemas import (
    AssociateDocument,
    CalendarDocument,
    LrmiDocument,
    NewsletterDocument,
    VideoDocument,
)


class VideoItem(VideoDocument):
    """Response item for `GET /api/videos/:eventName`."""
    url: str = Field(description="Public delivery URL of the video.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "5f0c6a0e4a9b4d1c8e2f3a4b5c6d7e8f",
                "eventName": "spring-symposium",
                "fileName": "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08.mp4",
                "title": "Opening keynote",
                "desc": "Welcome remarks and keynote",
                "createdAt": "2024-04-12T15:30:00Z",
                "url": "https://d111111abcdef8.cloudfront.net/spring-symposium/9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08.mp4",
            }
        }
    )


class AssociateItem(AssociateDocument):
    """Response item for `GET /api/associates`; `img` holds the photo's public URL."""


class CalendarItem(CalendarDocument):
    """Response item for `GET /api/calendar`."""


class LrmiItem(LrmiDocument):
    """Response item for `GET /api/lrmi/:year`."""
    url: str = Field(description="Public delivery URL of the report PDF.")


class NewsletterItem(NewsletterDocument):
    """Response item for `GET /api/newsletter/:year`."""
    url: str = Field(description="Public delivery URL of the newsletter PDF.")
