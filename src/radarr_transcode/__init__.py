"""
A triage tool that feeds a transcoder job queue from a Radarr library.

This package pulls the movie catalog from Radarr, picks out the movies whose
encoded file is not yet HEVC, ranks them by size so the biggest savings come
first, and submits them one at a time to the transcoder's job queue.

The package is organized into several categories:
- Catalog access (Radarr movies and their encoded-file metadata).
- Candidate triage (filtering and ranking).
- Job queue submission and response interpretation.
- Utility functions for configuration, logging and size formatting.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
