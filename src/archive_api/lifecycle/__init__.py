"""
Record lifecycle: keeps the blob store and the record store in step for every
archive record kind.
"""

from .coordinator import (
    BlobPayload,
    CalendarLifecycle,
    ProfileLifecycle,
    RecordLifecycle,
    build_lifecycles,
)
from .kinds import RECORD_KINDS, RecordKind
from .urls import public_url, split_public_url

__all__ = [
    'BlobPayload', 'CalendarLifecycle', 'ProfileLifecycle', 'RecordLifecycle',
    'build_lifecycles', 'RECORD_KINDS', 'RecordKind', 'public_url', 'split_public_url',
]
