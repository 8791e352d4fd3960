"""
Movie records as read from the Radarr catalog.

Only the fields triage needs are kept: the title, the library path, and the
encoded file (path on disk, size and video codec) when Radarr has one.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class EncodedFile:
    file_path: str
    size_bytes: int = 0
    video_codec: Optional[str] = None

    @classmethod
    def from_radarr(cls, record: Dict[str, Any]) -> "EncodedFile":
        """Build from a Radarr `movieFile` object."""
        media_info = record.get("mediaInfo")
        # No mediaInfo means Radarr has not analyzed the file yet
        codec = media_info.get("videoCodec", "") if media_info else None
        return cls(
            file_path=record.get("path", ""),
            size_bytes=int(record.get("size") or 0),
            video_codec=codec,
        )


@dataclass(frozen=True)
class MediaAsset:
    title: str
    library_path: str
    encoded_file: Optional[EncodedFile] = None

    @classmethod
    def from_radarr(cls, record: Dict[str, Any]) -> "MediaAsset":
        """Build from a Radarr movie object (GET /api/v3/movie)."""
        movie_file = record.get("movieFile")
        return cls(
            title=record.get("title", ""),
            library_path=record.get("path", ""),
            encoded_file=EncodedFile.from_radarr(movie_file) if movie_file else None,
        )

    @property
    def video_codec(self) -> Optional[str]:
        return self.encoded_file.video_codec if self.encoded_file else None
