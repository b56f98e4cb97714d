"""Options for importing assets from a folder tree, and album/tag naming."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from datetime import tzinfo
from enum import Enum
from typing import Optional

__all__ = [
    "DEFAULT_BANNED_FILES",
    "AlbumFolderMode",
    "ImportFolderOptions",
    "album_name_for",
    "folder_tag",
    "parse_folder_mode",
]

DEFAULT_BANNED_FILES: tuple[str, ...] = (
    "@eaDir/",
    "@__thumb/",  # QNAP
    "SYNOFILE_THUMB_*.*",  # Synology
    "Lightroom Catalog/",
    "thumbnails/",  # Android photo
    ".DS_Store/",  # macOS custom attributes
    "/._*",  # macOS resource files
    ".photostructure/",
)


class AlbumFolderMode(str, Enum):
    """How albums are derived from the folder structure."""

    NONE = "NONE"
    FOLDER = "FOLDER"
    PATH = "PATH"

    def __str__(self) -> str:
        return self.value


def parse_folder_mode(value: str) -> AlbumFolderMode:
    """Parse a folder-as-album flag value; only FOLDER and PATH are accepted."""
    normalized = value.strip().upper()
    if normalized in (AlbumFolderMode.FOLDER.value, AlbumFolderMode.PATH.value):
        return AlbumFolderMode(normalized)
    raise ValueError(
        "invalid value for folder mode, expected "
        f"{AlbumFolderMode.FOLDER}, {AlbumFolderMode.PATH} or {AlbumFolderMode.NONE}"
    )


@dataclass
class ImportFolderOptions:
    """Settings controlling how a folder tree is imported."""

    use_path_as_album_name: AlbumFolderMode = AlbumFolderMode.NONE
    album_name_path_separator: str = " / "
    import_into_album: str = ""
    banned_files: list[str] = field(default_factory=lambda: list(DEFAULT_BANNED_FILES))
    recursive: bool = True
    ignore_sidecar_files: bool = False
    stack_jpg_with_raw: bool = False
    stack_burst_photos: bool = False
    manage_epson_fastfoto: bool = False
    tags: list[str] = field(default_factory=list)
    folder_as_tags: bool = False
    session_tag: bool = False
    take_date_from_filename: bool = True
    picasa_album: bool = False
    tz: Optional[tzinfo] = None

    def validate(self) -> None:
        """Raise ValueError when incompatible options are combined."""
        if self.import_into_album and self.use_path_as_album_name != AlbumFolderMode.NONE:
            raise ValueError("cannot use both --into-album and --folder-as-album")


def album_name_for(
    mode: AlbumFolderMode, fs_name: str, directory: str, separator: str
) -> Optional[str]:
    """Album title for files in ``directory`` of the file system named ``fs_name``.

    ``directory`` is slash separated and ``"."`` for the root. Returns None
    when the mode does not create albums.
    """
    if mode == AlbumFolderMode.FOLDER:
        return fs_name if directory == "." else posixpath.basename(directory)
    if mode == AlbumFolderMode.PATH:
        parts = [fs_name] if fs_name else []
        if directory != ".":
            parts.extend(directory.split("/"))
        return separator.join(parts)
    return None


def folder_tag(fs_name: str, directory: str) -> Optional[str]:
    """Tag describing the folder holding an asset, or None when it would be empty."""
    tag = fs_name
    if directory != ".":
        tag = posixpath.normpath(posixpath.join(tag, directory))
    return tag or None