"""Content keys and record ids."""

import secrets
import uuid

CONTENT_KEY_BYTES = 32


def file_extension(filename: str) -> str:
    """Text after the last dot of the uploaded filename, or '' when there is none."""
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1]


def generate_content_key(filename: str, nbytes: int = CONTENT_KEY_BYTES) -> str:
    """Random hex key from the OS CSPRNG, suffixed with the original extension.

    >>> len(generate_content_key("talk.mp4"))
    68
    """
    key = secrets.token_hex(nbytes)
    extension = file_extension(filename)
    if extension:
        return f"{key}.{extension}"
    return key


def new_record_id() -> str:
    return uuid.uuid4().hex
