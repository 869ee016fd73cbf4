"""Declarative table of the archive's record kinds."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from archive_api.lifecycle import ordering
from archive_api.lifecycle.urls import (
    LRMI_PDF_PREFIX,
    NEWSLETTER_PDF_PREFIX,
    PEOPLE_PHOTOS_PREFIX,
)

Row = Dict[str, Any]


def fixed_prefix(prefix: str) -> Callable[[Row], str]:
    return lambda row: prefix


@dataclass(frozen=True)
class RecordKind:
    """How one entity kind maps onto the two stores.

    `key_field` names the row attribute holding the blob's content key,
    `key_prefix` derives the object key prefix from the row, and `url_field`
    is where list results carry the public URL (it may overwrite `key_field`).
    `created_at_field`, when set, is stamped with the creation time.
    """

    name: str
    key_field: Optional[str] = None
    key_prefix: Optional[Callable[[Row], str]] = None
    url_field: Optional[str] = None
    order: Optional[Callable[[List[Row]], List[Row]]] = None
    group: Optional[Callable[[List[Row]], List[Any]]] = None
    created_at_field: Optional[str] = None
    batch_delete: bool = False
    writable: bool = True

    @property
    def collection(self) -> str:
        return self.name

    @property
    def has_blob(self) -> bool:
        return self.key_field is not None


VIDEOS = RecordKind(
    name="videos",
    key_field="fileName",
    key_prefix=lambda row: row["eventName"],
    url_field="url",
    order=ordering.order_media,
    created_at_field="createdAt",
    group=ordering.distinct_event_names,
)

ASSOCIATES = RecordKind(
    name="associates",
    key_field="img",
    key_prefix=fixed_prefix(PEOPLE_PHOTOS_PREFIX),
    url_field="img",
    order=ordering.order_profiles,
    batch_delete=True,
)

# ordered by CalendarLifecycle, which needs the current time
CALENDAR = RecordKind(name="calendar")

LRMI = RecordKind(
    name="lrmi",
    key_field="fileName",
    key_prefix=fixed_prefix(LRMI_PDF_PREFIX),
    url_field="url",
    order=ordering.order_reports,
    group=ordering.distinct_years,
)

NEWSLETTER = RecordKind(
    name="newsletter",
    key_field="fileName",
    key_prefix=fixed_prefix(NEWSLETTER_PDF_PREFIX),
    url_field="url",
    order=ordering.order_newsletters,
    group=ordering.distinct_years,
)

CONTACTS = RecordKind(name="contacts", writable=False)

RECORD_KINDS: Dict[str, RecordKind] = {
    kind.name: kind
    for kind in (VIDEOS, ASSOCIATES, CALENDAR, LRMI, NEWSLETTER, CONTACTS)
}
