"""Locating sidecar files (XMP, JSON) next to media files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional, Union

__all__ = ["find_sidecar"]


def _ext(name: str) -> str:
    dot = name.rfind(".")
    slash = name.rfind("/")
    return name[dot:] if dot > slash else ""


def _suffix_matches(suffix: str, ext: str) -> bool:
    """Case-insensitive, character by character, with dots taken literally."""
    if len(suffix) != len(ext):
        return False
    for got, want in zip(suffix, ext):
        if want == ".":
            if got != ".":
                return False
        elif got not in (want.lower(), want.upper()):
            return False
    return True


def _search(root: Path, stem: str, ext: str) -> Optional[str]:
    folder, _, prefix = stem.rpartition("/")
    try:
        entries = sorted(os.listdir(root / folder if folder else root))
    except OSError:
        return None
    for entry in entries:
        if entry.startswith(prefix) and _suffix_matches(entry[len(prefix):], ext):
            return f"{folder}/{entry}" if folder else entry
    return None


def find_sidecar(
    directory: Union[str, "os.PathLike[str]"],
    name: str,
    ext: str,
    is_media: Callable[[str], bool],
) -> Optional[str]:
    """Find the sidecar with extension ``ext`` for the media file ``name``.

    ``name`` is a slash-separated path relative to ``directory``. The
    sidecar is first looked for as ``name + ext``, then, when the media
    extension is supported, as the name without its extension plus ``ext``.
    The extension is compared case-insensitively. Returns the relative
    path of the sidecar, or None.
    """
    root = Path(directory)
    found = _search(root, name, ext)
    if found is not None:
        return found
    media_ext = _ext(name)
    if not is_media(media_ext):
        return None
    stem = name[: len(name) - len(media_ext)]
    return _search(root, stem, ext)