"""
Triage pipeline: Radarr catalog -> candidates -> transcoder job queue.

A run fetches the catalog once, keeps the movies that still need an HEVC
transcode, ranks them largest first, and submits the top N one at a time.
Rejected and unexpected submissions are reported and the loop moves on;
network and parse errors end the run.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Tuple

from tqdm import tqdm

from radarr_transcode import triage
from radarr_transcode.catalog import MediaAsset
from radarr_transcode.errors import ConfigurationError
from radarr_transcode.queue import OutcomeTag, SubmissionOutcome
from radarr_transcode.utils import DEFAULT_MOVIE_COUNT, LogLevel, logger
from radarr_transcode.utils.file_util import human_readable_size


class Catalog(Protocol):
    def get_movies(self) -> List[MediaAsset]: ...


class JobQueue(Protocol):
    def submit(self, file_path: str) -> SubmissionOutcome: ...


class PipelineState(Enum):
    FETCHING = "fetching"
    FILTERING = "filtering"
    RANKING = "ranking"
    DISPATCHING = "dispatching"
    DONE = "done"


@dataclass
class RunSummary:
    """Aggregated result of a pipeline run."""

    dry_run: bool
    catalog_size: int = 0
    candidate_count: int = 0
    selected: List[MediaAsset] = field(default_factory=list)
    outcomes: List[Tuple[MediaAsset, SubmissionOutcome]] = field(default_factory=list)

    def _count(self, tag: OutcomeTag) -> int:
        return sum(1 for _, outcome in self.outcomes if outcome.tag is tag)

    @property
    def scheduled(self) -> int:
        return self._count(OutcomeTag.SCHEDULED)

    @property
    def failed(self) -> int:
        return self._count(OutcomeTag.FAILED)

    @property
    def unknown(self) -> int:
        return self._count(OutcomeTag.UNKNOWN)

    @property
    def succeeded(self) -> bool:
        return self.failed == 0 and self.unknown == 0


class TriagePipeline:
    """Runs one triage pass from catalog fetch to the last submission."""

    def __init__(self, catalog: Catalog, transcoder: Optional[JobQueue],
                 limit: int = DEFAULT_MOVIE_COUNT, dry_run: bool = False):
        if transcoder is None and not dry_run:
            raise ConfigurationError("A transcoder client is required unless running in dry-run mode.")
        if limit < 0:
            raise ConfigurationError(f"Number of movies must not be negative, got {limit}")

        self.catalog = catalog
        self.transcoder = transcoder
        self.limit = limit
        self.dry_run = dry_run
        self.state = PipelineState.FETCHING

    def _advance(self, state: PipelineState) -> None:
        logger.log("pipeline.state", LogLevel.DEBUG, previous=self.state.value, state=state.value)
        self.state = state

    def run(self) -> RunSummary:
        """
        Run the pipeline once.

        Returns:
            RunSummary with one outcome per selected movie

        Raises:
            CatalogFetchError: If the catalog cannot be fetched
            TransportError: If a submission fails at the network level
            ResponseParseError: If the job queue returns a malformed body
        """
        summary = RunSummary(dry_run=self.dry_run)

        self.state = PipelineState.FETCHING
        movies = self.catalog.get_movies()
        summary.catalog_size = len(movies)

        self._advance(PipelineState.FILTERING)
        candidates = [m for m in movies if triage.is_candidate(m)]
        summary.candidate_count = len(candidates)
        logger.log("triage.filtered", LogLevel.INFO, movies=len(movies), candidates=len(candidates))

        self._advance(PipelineState.RANKING)
        summary.selected = triage.rank_candidates(candidates)[:self.limit]

        self._advance(PipelineState.DISPATCHING)
        for movie in tqdm(summary.selected, desc="Submitting movies", disable=self.dry_run):
            summary.outcomes.append((movie, self._dispatch(movie)))

        self._advance(PipelineState.DONE)
        logger.log("run.summary", LogLevel.INFO,
                   dry_run=self.dry_run,
                   selected=len(summary.selected),
                   scheduled=summary.scheduled,
                   failed=summary.failed,
                   unknown=summary.unknown)
        return summary

    def _dispatch(self, movie: MediaAsset) -> SubmissionOutcome:
        """Report one candidate and submit it unless this is a dry run."""
        encoded = movie.encoded_file
        logger.log("triage.candidate", LogLevel.INFO,
                   title=movie.title,
                   path=movie.library_path,
                   codec=encoded.video_codec,
                   size=human_readable_size(triage.movie_size(movie)),
                   file=encoded.file_path)

        if self.dry_run:
            return SubmissionOutcome(OutcomeTag.SKIPPED, source_path=encoded.file_path)

        outcome = self.transcoder.submit(encoded.file_path)
        if outcome.tag is OutcomeTag.SCHEDULED:
            logger.log("queue.scheduled", LogLevel.INFO,
                       title=movie.title,
                       source=outcome.source_path,
                       destination=outcome.destination_path)
        elif outcome.tag is OutcomeTag.FAILED:
            logger.log("queue.failed", LogLevel.ERROR,
                       title=movie.title,
                       source=outcome.source_path,
                       error=outcome.error,
                       status=outcome.http_status)
        else:
            logger.log("queue.unknown", LogLevel.ERROR,
                       title=movie.title,
                       file=encoded.file_path,
                       status=outcome.http_status,
                       error="movie was neither scheduled nor failed")
        return outcome
