"""Builders and stand-ins for catalog, triage and job queue tests."""
import json

from radarr_transcode.catalog import EncodedFile, MediaAsset
from radarr_transcode.queue import SubmissionOutcome, interpret_response


def make_movie(title: str, size: int | None = None, codec: str | None = "h264") -> MediaAsset:
    """Create a movie; `size=None` means Radarr has no file for it."""
    if size is None:
        return MediaAsset(title=title, library_path=f"/movies/{title}")
    return MediaAsset(
        title=title,
        library_path=f"/movies/{title}",
        encoded_file=EncodedFile(f"/movies/{title}/{title}.mkv", size, codec),
    )


def queue_body(scheduled=(), failed=(), skipped=()) -> bytes:
    """Encode a job queue response body."""
    return json.dumps({"scheduled": list(scheduled), "failed": list(failed), "skipped": list(skipped)}).encode()


class FakeCatalog:
    def __init__(self, movies):
        self.movies = list(movies)
        self.calls = 0

    def get_movies(self):
        self.calls += 1
        return list(self.movies)


class FakeQueue:
    """Job queue stand-in that interprets canned bodies, one per submission."""

    def __init__(self, bodies=None, status: int = 200):
        self.bodies = list(bodies or [])
        self.status = status
        self.submitted: list[str] = []

    def submit(self, file_path: str) -> SubmissionOutcome:
        self.submitted.append(file_path)
        if self.bodies:
            body = self.bodies.pop(0)
        else:
            body = queue_body(scheduled=[{"sourcePath": file_path, "destinationPath": file_path + ".out"}])
        if isinstance(body, Exception):
            raise body
        return interpret_response(body, http_status=self.status)


