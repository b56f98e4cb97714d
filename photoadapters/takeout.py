"""Per-directory catalog of a Google Photos takeout, pairing media with JSON files."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from photoadapters.gpjson import TakeoutMetadata
from photoadapters.matchers import MATCHERS

__all__ = ["AssetFile", "DirectoryCatalog", "MatchedFile", "original_title"]

IsMedia = Callable[[str], bool]


def _ext(name: str) -> str:
    dot = name.rfind(".")
    slash = name.rfind("/")
    return name[dot:] if dot > slash else ""


def _trim_suffix(s: str, suffix: str) -> str:
    return s[: -len(suffix)] if suffix and s.endswith(suffix) else s


def original_title(title: str, file_name: str) -> str:
    """Original file name of an asset from its JSON title and its file name.

    Superfluous extensions of the title are dropped and the file's
    extension is applied when the title does not end with it. An empty
    title leaves the base name of ``file_name``.
    """
    if not title:
        return file_name.rsplit("/", 1)[-1]
    file_ext = _ext(file_name)
    title_ext = _ext(title)
    if title_ext != file_ext:
        title = _trim_suffix(title, title_ext)
        title_ext = _ext(title)
        if title_ext != file_ext:
            title = _trim_suffix(title, title_ext) + file_ext
    return title


@dataclass
class AssetFile:
    """A media file found in a takeout directory, waiting for its JSON."""

    base: str
    size: int
    date: Optional[datetime] = None


@dataclass
class MatchedFile:
    """A media file ready to be handed over, with its metadata when found."""

    base: str
    size: int
    date: Optional[datetime]
    original_file_name: str
    metadata: Optional[TakeoutMetadata] = None
    json_name: Optional[str] = None
    matcher: Optional[str] = None

    @property
    def date_taken(self) -> Optional[datetime]:
        return self.metadata.date_taken if self.metadata is not None else None


@dataclass
class DirectoryCatalog:
    """All JSON and media files of one directory of the takeout."""

    jsons: dict[str, TakeoutMetadata] = field(default_factory=dict)
    unmatched: dict[str, AssetFile] = field(default_factory=dict)
    matched: dict[str, MatchedFile] = field(default_factory=dict)

    def add_json(self, base: str, metadata: TakeoutMetadata) -> None:
        """Keep the asset metadata read from the JSON file named ``base``."""
        self.jsons[base] = metadata

    def add_file(self, base: str, size: int, date: Optional[datetime] = None) -> bool:
        """Register a media file; False when the name is already in the directory."""
        if base in self.unmatched or base in self.matched:
            return False
        self.unmatched[base] = AssetFile(base=base, size=size, date=date)
        return True

    def _make(
        self,
        file: AssetFile,
        metadata: Optional[TakeoutMetadata],
        json_name: Optional[str],
        matcher: Optional[str],
    ) -> MatchedFile:
        title = file.base
        if metadata is not None and metadata.file_name:
            title = original_title(metadata.file_name, file.base)
        return MatchedFile(
            base=file.base,
            size=file.size,
            date=file.date,
            original_file_name=title,
            metadata=metadata,
            json_name=json_name,
            matcher=matcher,
        )

    def solve(self, is_media: IsMedia, keep_json_less: bool = False) -> list[str]:
        """Associate media files with JSON files, matcher by matcher.

        Returns the sorted names of files left without metadata. With
        ``keep_json_less`` those files are still moved to ``matched``.
        """
        json_names = sorted(self.jsons)
        for matcher_name, matcher in MATCHERS:
            for json_name in json_names:
                metadata = self.jsons[json_name]
                for base in sorted(self.unmatched):
                    if matcher(json_name, base, is_media):
                        file = self.unmatched.pop(base)
                        self.matched[base] = self._make(
                            file, metadata, json_name, matcher_name
                        )
        missing = sorted(self.unmatched)
        if keep_json_less:
            for base in missing:
                file = self.unmatched.pop(base)
                self.matched[base] = self._make(file, None, None, None)
        return missing