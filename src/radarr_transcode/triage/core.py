"""
Functions to pick which movies should be sent to the transcoder.

A movie is a candidate when Radarr knows its encoded file and the file's
video codec is not already HEVC. Candidates are ranked by file size, largest
first, since those give back the most disk space once re-encoded.
"""
from typing import Iterable, List

from radarr_transcode.catalog import MediaAsset
from radarr_transcode.utils import HEVC_CODECS


def is_candidate(movie: MediaAsset) -> bool:
    """Check if a movie has an encoded file with a known, non-HEVC codec."""
    codec = movie.video_codec
    return movie.encoded_file is not None and codec is not None and codec not in HEVC_CODECS


def movie_size(movie: MediaAsset) -> int:
    """Size of the movie's encoded file, or 0 when there is none."""
    if movie.encoded_file is not None:
        return movie.encoded_file.size_bytes
    return 0


def rank_candidates(movies: Iterable[MediaAsset]) -> List[MediaAsset]:
    """Return a new list ordered by encoded file size, largest first."""
    return sorted(movies, key=movie_size, reverse=True)
