"""
A module providing constants, configuration, logging and size formatting
for the catalog triage and job submission tasks.
"""

from .constants import (
    DEFAULT_MOVIE_COUNT,
    HEVC_CODECS,
    RADARR_API_KEY,
    RADARR_MOVIE_ENDPOINT,
    RADARR_URL,
    REQUEST_TIMEOUT,
    STATUS_DRY_RUN,
    STATUS_FAILED,
    STATUS_SCHEDULED,
    STATUS_UNKNOWN,
    TRANSCODER_JOB_ENDPOINT,
    TRANSCODER_TOKEN,
    TRANSCODER_URL,
    TRIAGE_TIMEOUT,
)
from .logger import LogLevel

__all__ = [
    "DEFAULT_MOVIE_COUNT",
    "HEVC_CODECS",
    "RADARR_API_KEY",
    "RADARR_MOVIE_ENDPOINT",
    "RADARR_URL",
    "REQUEST_TIMEOUT",
    "STATUS_SCHEDULED",
    "STATUS_FAILED",
    "STATUS_UNKNOWN",
    "STATUS_DRY_RUN",
    "TRANSCODER_JOB_ENDPOINT",
    "TRANSCODER_TOKEN",
    "TRANSCODER_URL",
    "TRIAGE_TIMEOUT",
    "LogLevel",
]
