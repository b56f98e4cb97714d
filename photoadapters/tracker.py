"""Tracking of takeout files seen under several folders, keyed by name and size."""

from __future__ import annotations

import csv
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Iterator, Optional, TextIO

__all__ = ["CSV_HEADER", "FileKey", "FileTracker", "TrackStatus", "TrackingInfo"]

CSV_HEADER = (
    "File",
    "Size",
    "Count",
    "Duplicated",
    "Uploaded",
    "Status",
    "Date",
    "Albums",
    "Paths",
)

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"


class TrackStatus(str, Enum):
    """What happened to a tracked file."""

    NONE = ""
    UPLOADED = "Uploaded"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class FileKey:
    """Identifies a file by its base name and its size in bytes."""

    base_name: str
    size: int


@dataclass
class TrackingInfo:
    """Folders where a file was seen, how often, and its status."""

    paths: list[str] = field(default_factory=list)
    count: int = 0
    status: TrackStatus = TrackStatus.NONE
    date_taken: Optional[datetime] = None
    albums: list[str] = field(default_factory=list)

    @property
    def uploaded(self) -> bool:
        return self.status is TrackStatus.UPLOADED


class FileTracker:
    """Thread-safe registry of files found in the takeout parts."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tracks: dict[FileKey, TrackingInfo] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._tracks)

    def __iter__(self) -> Iterator[FileKey]:
        with self._lock:
            keys = sorted(self._tracks)
        return iter(keys)

    def add(self, base_name: str, size: int, directory: str) -> TrackingInfo:
        """Record that the file was found in ``directory``; return its tracking."""
        key = FileKey(base_name, size)
        with self._lock:
            track = self._tracks.setdefault(key, TrackingInfo())
            track.paths.append(directory)
            track.count += 1
            return _copy(track)

    def get(self, base_name: str, size: int) -> TrackingInfo:
        """Return a copy of the tracking of a file, empty when it is unknown."""
        with self._lock:
            track = self._tracks.get(FileKey(base_name, size))
            return _copy(track) if track is not None else TrackingInfo()

    def mark_uploaded(self, base_name: str, size: int) -> None:
        """Flag the file as handed over, so later copies count as duplicates."""
        key = FileKey(base_name, size)
        with self._lock:
            self._tracks.setdefault(key, TrackingInfo()).status = TrackStatus.UPLOADED

    def write_csv(self, stream: TextIO) -> None:
        """Write one CSV line per tracked file, sorted by name then size."""
        writer = csv.writer(stream, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        with self._lock:
            items = sorted(self._tracks.items())
        for key, track in items:
            writer.writerow(
                (
                    key.base_name,
                    str(key.size),
                    str(track.count),
                    str(track.count - 1),
                    "1" if track.uploaded else "0",
                    str(track.status),
                    track.date_taken.strftime(_DATE_FORMAT) if track.date_taken else "",
                    ",".join(track.albums),
                    ",".join(track.paths),
                )
            )


def _copy(track: TrackingInfo) -> TrackingInfo:
    return replace(track, paths=list(track.paths), albums=list(track.albums))