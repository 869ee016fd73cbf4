"""
Configuration management for the archive API.

Pydantic settings read from the environment and `.env`, accepting the variable
names used by the existing deployment (BUCKET_NAME, CLOUDFRONT_URL, ...).
"""

from .settings import Settings, get_settings

__all__ = ['Settings', 'get_settings']
