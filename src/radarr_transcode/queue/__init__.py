"""Transcoder job queue submission.

This package provides two levels of functionality:
- response: Parsing and classification of job queue responses
- client: HTTP submission of a single file to the job queue
"""

from .response import (
    FailedItem,
    OutcomeTag,
    QueueResponse,
    ScheduledItem,
    SubmissionOutcome,
    interpret_response,
    parse_response,
)
from .client import (
    TranscoderClient,
    submit,
)

__all__ = [
    # Responses
    "FailedItem",
    "OutcomeTag",
    "QueueResponse",
    "ScheduledItem",
    "SubmissionOutcome",
    "interpret_response",
    "parse_response",
    # Submission
    "TranscoderClient",
    "submit",
]
