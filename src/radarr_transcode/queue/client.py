"""
Client for submitting transcode jobs to the transcoder job queue.

Each submission is a single POST of the encoded file path. The response body
is interpreted whatever the HTTP status, since the queue reports failures in
the body as well; only network-level problems are raised as errors. Nothing
is retried, so a file is submitted at most once per call.
"""
from typing import Optional

import requests

from radarr_transcode.errors import ConfigurationError, TransportError
from radarr_transcode.utils import LogLevel, logger
from radarr_transcode.utils.constants import REQUEST_TIMEOUT, TRANSCODER_JOB_ENDPOINT
from .response import SubmissionOutcome, interpret_response


class TranscoderClient:
    """Client for the transcoder's job queue API."""

    def __init__(self, base_url: str, token: str, timeout: float = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        if not base_url or not token:
            raise ConfigurationError("Transcoder URL and token are required.")

        self.job_url = f"{base_url.rstrip('/')}{TRANSCODER_JOB_ENDPOINT}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        })

    def submit(self, file_path: str) -> SubmissionOutcome:
        """
        Submit one file to the job queue.

        Args:
            file_path: Absolute path of the encoded file to transcode

        Returns:
            SubmissionOutcome with the HTTP status recorded

        Raises:
            TransportError: On connection, DNS, timeout or body read failure
            ResponseParseError: If the response body is malformed
        """
        logger.log("queue.submit", LogLevel.INFO, file=file_path)

        try:
            resp = self.session.post(self.job_url, json={"SourcePath": file_path}, timeout=self.timeout)
            body = resp.content
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Submitting {file_path} failed: {e}") from e

        if not resp.ok:
            logger.log("queue.http_status", LogLevel.WARN,
                       file=file_path,
                       status=resp.status_code,
                       reason=resp.reason,
                       body=resp.text)

        return interpret_response(body, http_status=resp.status_code)


def submit(file_path: str, base_url: str, token: str, timeout: float = REQUEST_TIMEOUT) -> SubmissionOutcome:
    """Submit a single file with a one-off client."""
    with requests.Session() as session:
        return TranscoderClient(base_url, token, timeout=timeout, session=session).submit(file_path)
