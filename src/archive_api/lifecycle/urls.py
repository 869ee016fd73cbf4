"""Object keys and public delivery URLs."""

from typing import Tuple

PEOPLE_PHOTOS_PREFIX = "people-photos"
RESEARCH_PDF_PREFIX = "research-pdf"
LRMI_PDF_PREFIX = "lrmi-pdf"
NEWSLETTER_PDF_PREFIX = "newsletter-pdf"


def object_key(prefix: str, key: str) -> str:
    """Path of a blob inside the bucket."""
    return f"{prefix}/{key}"


def public_url(delivery_base: str, prefix: str, key: str) -> str:
    """URL under which the CDN serves the blob stored at `prefix/key`."""
    return f"{delivery_base}/{object_key(prefix, key)}"


def split_public_url(delivery_base: str, url: str) -> Tuple[str, str]:
    """Inverse of public_url: recover (prefix, key) from a delivery URL.

    Content keys never contain '/', so the key is the last path segment.
    """
    head = f"{delivery_base}/"
    if not url.startswith(head):
        raise ValueError(f"{url} is not served from {delivery_base}")
    prefix, _, key = url[len(head):].rpartition("/")
    return prefix, key
