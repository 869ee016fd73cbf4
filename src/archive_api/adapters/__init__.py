"""
Adapter layer for the archive API.

Wraps the S3 object functions behind the blob store interface used by the
record lifecycle.
"""

from .storage import BlobStore, S3BlobStore

__all__ = ['BlobStore', 'S3BlobStore']
