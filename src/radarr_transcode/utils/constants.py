"""
Constants and configuration settings for catalog triage and job submission.

This module contains the settings used to talk to Radarr and to the transcoder
job queue. Connection details are read from the environment (a `.env` file in
the working directory is loaded first), while the codec set, endpoints and
status strings used for reporting are fixed here.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Radarr API configuration
RADARR_API_KEY = os.getenv("RADARR_API_KEY")
RADARR_URL = os.getenv("RADARR_URL")
RADARR_MOVIE_ENDPOINT = "/api/v3/movie"

# Transcoder job queue configuration
TRANSCODER_URL = os.getenv("TRANSCODER_URL")
TRANSCODER_TOKEN = os.getenv("TRANSCODER_TOKEN")
TRANSCODER_JOB_ENDPOINT = "/api/v1/job/"

# Network timeout in seconds, applied to both Radarr and the transcoder.
# TRIAGE_TIMEOUT is kept as the raw string; TriageConfig.validate converts it.
REQUEST_TIMEOUT = 30.0
TRIAGE_TIMEOUT = os.getenv("TRIAGE_TIMEOUT")

# Run settings
DEFAULT_MOVIE_COUNT = 10

# Codec identifiers Radarr reports for files that are already HEVC
HEVC_CODECS = frozenset({"x265", "h265"})

# Binary size units, smallest first
SIZE_UNITS = ("KB", "MB", "GB", "TB", "PB", "EB")

# Submission status codes
STATUS_SCHEDULED = "SCHEDULED"
STATUS_FAILED = "FAILED"
STATUS_UNKNOWN = "UNKNOWN"
STATUS_DRY_RUN = "DRY-RUN"
