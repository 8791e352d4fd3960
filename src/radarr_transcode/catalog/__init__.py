"""Radarr catalog access.

This package provides two levels of functionality:
- core: Movie and encoded-file records built from Radarr JSON
- radarr_client: HTTP client that fetches the full movie catalog
"""

from .core import (
    EncodedFile,
    MediaAsset,
)
from .radarr_client import RadarrClient

__all__ = [
    "EncodedFile",
    "MediaAsset",
    "RadarrClient",
]
