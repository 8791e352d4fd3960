"""Exceptions raised while triaging the catalog and submitting jobs.

Rejections and unexpected responses from the job queue are not exceptions:
they come back as FAILED or UNKNOWN outcomes so the dispatch loop can carry on.
Everything here ends the run.
"""


class TriageError(Exception):
    """Base exception for triage and submission errors."""

    pass


class ConfigurationError(TriageError):
    """A required option is missing or invalid."""

    pass


class CatalogFetchError(TriageError):
    """The Radarr movie catalog could not be retrieved."""

    pass


class TransportError(TriageError):
    """A job submission failed at the network level."""

    pass


class ResponseParseError(TriageError):
    """The job queue returned a body that is not a valid queue response."""

    pass
