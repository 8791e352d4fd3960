"""
Parsing and classification of transcoder job queue responses.

The queue answers a job submission with three arrays:

    {"scheduled": [...], "failed": [...], "skipped": [...]}

A submission is SCHEDULED when anything was scheduled, FAILED when nothing was
scheduled but something failed, and UNKNOWN otherwise. `skipped` is kept as
the raw JSON value the service sent and is never used for the decision.
A body that cannot be parsed is an error, never a classification.
"""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from radarr_transcode.errors import ResponseParseError
from radarr_transcode.utils import STATUS_DRY_RUN, STATUS_FAILED, STATUS_SCHEDULED, STATUS_UNKNOWN

# Any decoded JSON value, passed through uninterpreted
RawPayload = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


class OutcomeTag(Enum):
    SCHEDULED = STATUS_SCHEDULED
    FAILED = STATUS_FAILED
    SKIPPED = STATUS_DRY_RUN
    UNKNOWN = STATUS_UNKNOWN


@dataclass
class ScheduledItem:
    source_path: str = ""
    destination_path: str = ""
    id: str = ""
    events: RawPayload = None

    @classmethod
    def from_json(cls, record: Dict[str, Any]) -> "ScheduledItem":
        return cls(
            source_path=record.get("sourcePath") or "",
            destination_path=record.get("destinationPath") or "",
            id=record.get("id") or "",
            events=record.get("events"),
        )


@dataclass
class FailedItem:
    source_path: str = ""
    destination_path: str = ""
    error: str = ""
    priority: int = 0
    force_completed: bool = False
    force_failed: bool = False
    force_executing: bool = False
    force_added: bool = False

    @classmethod
    def from_json(cls, record: Dict[str, Any]) -> "FailedItem":
        return cls(
            source_path=record.get("sourcePath") or "",
            destination_path=record.get("destinationPath") or "",
            error=record.get("error") or "",
            priority=record.get("priority") or 0,
            force_completed=bool(record.get("forceCompleted")),
            force_failed=bool(record.get("forceFailed")),
            force_executing=bool(record.get("forceExecuting")),
            force_added=bool(record.get("forceAdded")),
        )


@dataclass
class QueueResponse:
    scheduled: List[ScheduledItem] = field(default_factory=list)
    failed: List[FailedItem] = field(default_factory=list)
    skipped: RawPayload = None


@dataclass
class SubmissionOutcome:
    """Result of one submission attempt (or of a dry-run selection)."""

    tag: OutcomeTag
    source_path: Optional[str] = None
    destination_path: Optional[str] = None
    error: Optional[str] = None
    http_status: Optional[int] = None
    response: Optional[QueueResponse] = None

    @property
    def succeeded(self) -> bool:
        return self.tag is OutcomeTag.SCHEDULED


def _records(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Return the array stored under `key`, treating missing/null as empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(r, dict) for r in value):
        raise ResponseParseError(f"Field '{key}' must be a list of objects")
    return value


def parse_response(body: bytes) -> QueueResponse:
    """Decode a job queue response body, raising ResponseParseError when malformed."""
    try:
        data = json.loads(body)
    except (ValueError, TypeError) as e:
        raise ResponseParseError(f"Invalid JSON response: {e}") from e

    if not isinstance(data, dict):
        raise ResponseParseError(f"Expected a JSON object, got {type(data).__name__}")

    return QueueResponse(
        scheduled=[ScheduledItem.from_json(r) for r in _records(data, "scheduled")],
        failed=[FailedItem.from_json(r) for r in _records(data, "failed")],
        skipped=data.get("skipped"),
    )


def interpret_response(body: bytes, http_status: Optional[int] = None) -> SubmissionOutcome:
    """
    Classify a job queue response.

    The parsed body decides the outcome; `http_status` is only carried along
    for reporting, so a non-2xx status with scheduled items is still SCHEDULED.

    Args:
        body: Raw response body
        http_status: Status code of the HTTP response, if any

    Returns:
        SubmissionOutcome tagged SCHEDULED, FAILED or UNKNOWN

    Raises:
        ResponseParseError: If the body is not a valid queue response
    """
    response = parse_response(body)

    if response.scheduled:
        item = response.scheduled[0]
        return SubmissionOutcome(OutcomeTag.SCHEDULED, item.source_path, item.destination_path,
                                 http_status=http_status, response=response)

    if response.failed:
        item = response.failed[0]
        return SubmissionOutcome(OutcomeTag.FAILED, item.source_path, item.destination_path,
                                 error=item.error, http_status=http_status, response=response)

    return SubmissionOutcome(OutcomeTag.UNKNOWN, http_status=http_status, response=response)
