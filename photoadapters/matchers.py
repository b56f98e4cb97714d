"""Rules associating Google Photos takeout JSON files with media files.

Each matcher receives the JSON file name, the media file name and a
predicate telling whether an extension denotes a supported media type.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

__all__ = [
    "MATCHERS",
    "find_matcher",
    "get_file_index",
    "match_edited_name",
    "match_fast_track",
    "match_forgotten_duplicates",
    "match_normal",
]

IsMedia = Callable[[str], bool]

_SUPPLEMENTAL = "supplemental-metadata"
_TRUNCATED_LENGTH = 46
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def _ext(name: str) -> str:
    """Return the extension of the last path element, dot included."""
    dot = name.rfind(".")
    slash = name.rfind("/")
    return name[dot:] if dot > slash else ""


def _trim_suffix(s: str, suffix: str) -> str:
    return s[: -len(suffix)] if suffix and s.endswith(suffix) else s


def _byte_len(s: str) -> int:
    return len(s.encode("utf-8"))


def _is_int(s: str) -> bool:
    return bool(_INT_RE.fullmatch(s)) and _INT_MIN <= int(s) <= _INT_MAX


def _is_supplemental_fragment(fragment: str) -> bool:
    return _SUPPLEMENTAL.startswith(fragment)


def get_file_index(name: str) -> tuple[str, str]:
    """Split a ``(n)`` duplicate index out of ``name``.

    Returns the name without the index and the index text, or the
    unchanged name and an empty string when there is no numeric index.
    """
    open_pos = name.rfind("(")
    if open_pos >= 0:
        close_pos = name.rfind(")")
        if close_pos > open_pos:
            index = name[open_pos + 1 : close_pos]
            if _is_int(index):
                return name[:open_pos] + name[close_pos + 1 :], index
    return name, ""


def match_fast_track(json_name: str, file_name: str, is_media: IsMedia) -> bool:
    """The file is named exactly as the JSON without its extension."""
    return _trim_suffix(json_name, _ext(json_name)) == file_name


def match_normal(json_name: str, file_name: str, is_media: IsMedia) -> bool:
    """Match names with duplicate indexes, supplemental metadata and truncation."""
    file_name, file_index = get_file_index(file_name)
    json_name, json_index = get_file_index(json_name)
    if file_index != json_index:
        return False

    p2 = json_name.rfind(".")
    if p2 >= 0 and _byte_len(json_name[:p2]) > 1:
        p1 = json_name.rfind(".", 0, p2)
        if p1 >= 0 and _byte_len(json_name[:p1]) > 1:
            if _is_supplemental_fragment(json_name[p1 + 1 : p2]):
                json_name = json_name[:p1] + json_name[p2:]

    json_name = _trim_suffix(json_name, _ext(json_name))
    if json_name == file_name:
        return True

    if _byte_len(file_name) > _TRUNCATED_LENGTH:
        if len(file_name) > _TRUNCATED_LENGTH:
            return file_name[:_TRUNCATED_LENGTH] == json_name
        trimmed = _trim_suffix(file_name, _ext(file_name))
        return trimmed[:-1] == json_name
    return False


def match_forgotten_duplicates(json_name: str, file_name: str, is_media: IsMedia) -> bool:
    """The file name extends the JSON name by fewer than ten characters."""
    json_name = _trim_suffix(json_name, _ext(json_name))
    file_name = _trim_suffix(file_name, _ext(file_name))
    if file_name.startswith(json_name):
        return len(file_name) - len(json_name) < 10
    return False


def match_edited_name(json_name: str, file_name: str, is_media: IsMedia) -> bool:
    """The file is an edited copy whose name starts with the JSON's media name."""
    if get_file_index(file_name)[1]:
        return False
    base = _trim_suffix(json_name, _ext(json_name))
    p1 = base.rfind(".")
    if p1 >= 0 and _byte_len(base[:p1]) > 1:
        if _is_supplemental_fragment(base[p1 + 1 :]):
            base = json_name[:p1]

    ext = _ext(base)
    if ext and is_media(ext):
        base = _trim_suffix(base, ext)
        file_name = _trim_suffix(file_name, _ext(file_name))
    return file_name.startswith(base)


MATCHERS: tuple[tuple[str, Callable[[str, str, IsMedia], bool]], ...] = (
    ("matchFastTrack", match_fast_track),
    ("matchNormal", match_normal),
    ("matchForgottenDuplicates", match_forgotten_duplicates),
    ("matchEditedName", match_edited_name),
)


def find_matcher(json_name: str, file_name: str, is_media: IsMedia) -> Optional[str]:
    """Return the name of the first matcher associating the two files, or None."""
    return next(
        (name for name, fn in MATCHERS if fn(json_name, file_name, is_media)),
        None,
    )