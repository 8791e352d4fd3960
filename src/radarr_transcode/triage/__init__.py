"""Candidate selection: which movies still need an HEVC transcode."""

from .core import (
    is_candidate,
    movie_size,
    rank_candidates,
)

__all__ = [
    "is_candidate",
    "movie_size",
    "rank_candidates",
]
