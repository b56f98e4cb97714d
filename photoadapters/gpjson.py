"""Google Photos takeout JSON metadata files."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

__all__ = [
    "GoogleEnrichments",
    "GoogleMetaData",
    "TakeoutMetadata",
    "parse_google_metadata",
    "timestamp_to_datetime",
]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_E7_DIVISOR = 10e6

GeoData = tuple[float, float, float]


def timestamp_to_datetime(timestamp: str) -> Optional[datetime]:
    """Convert a takeout epoch timestamp string into a local aware datetime.

    Returns None for an empty, zero or unparseable timestamp.
    """
    if not _INT_RE.fullmatch(timestamp or ""):
        return None
    seconds = int(timestamp)
    if seconds == 0:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone()
    except (OverflowError, OSError, ValueError):
        return None


@dataclass
class GoogleEnrichments:
    """Album enrichments: narrative text and the last location found."""

    text: str = ""
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass
class TakeoutMetadata:
    """Asset metadata extracted from a takeout JSON file."""

    file: str = ""
    file_name: str = ""
    description: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    date_taken: Optional[datetime] = None
    trashed: bool = False
    archived: bool = False
    favorited: bool = False
    from_partner: bool = False
    tags: list[str] = field(default_factory=list)

    def _add_tag(self, tag: str) -> None:
        if tag not in self.tags:
            self.tags.append(tag)


@dataclass
class GoogleMetaData:
    """Content of a Google Photos takeout JSON file, for an asset or an album."""

    title: str = ""
    description: str = ""
    category: str = ""
    date: Optional[str] = None
    photo_taken_time: Optional[str] = None
    geo_data_exif: Optional[GeoData] = None
    geo_data: Optional[GeoData] = None
    trashed: bool = False
    archived: bool = False
    url_present: bool = False
    favorited: bool = False
    enrichments: Optional[GoogleEnrichments] = None
    people: list[str] = field(default_factory=list)
    from_partner_sharing: bool = False

    def is_asset(self) -> bool:
        """True when the file describes a photo or a video."""
        return self.photo_taken_time is not None and self.photo_taken_time != ""

    def is_album(self) -> bool:
        """True when the file describes an album."""
        return not self.is_asset() and self.title != ""

    def is_partner(self) -> bool:
        """True when the asset comes from partner sharing."""
        return self.from_partner_sharing

    def key(self) -> str:
        """A key expected to be unique, made of the title and the taken timestamp."""
        if self.photo_taken_time is None:
            raise ValueError("metadata has no photo taken time")
        return f"{self.title},{self.photo_taken_time}"

    def as_metadata(self, file_name: str, tag_people: bool) -> TakeoutMetadata:
        """Build the asset metadata; ``file_name`` is the JSON file's path."""
        md = TakeoutMetadata(
            file=file_name,
            file_name=self.title,
            description=self.description,
            trashed=self.trashed,
            archived=self.archived,
            favorited=self.favorited,
            from_partner=self.is_partner(),
        )
        if self.geo_data_exif is not None:
            md.latitude, md.longitude = self.geo_data_exif[0], self.geo_data_exif[1]
            if md.latitude == 0 and md.longitude == 0 and self.geo_data is not None:
                md.latitude, md.longitude = self.geo_data[0], self.geo_data[1]
        if self.photo_taken_time not in (None, "", "0"):
            md.date_taken = timestamp_to_datetime(self.photo_taken_time)
        if tag_people:
            for name in self.people:
                md._add_tag("People/" + name)
        return md


def _get(obj: Mapping[str, Any], key: str) -> Any:
    """Case-insensitive key lookup; the last non-null match wins."""
    folded = key.casefold()
    found = None
    for k, v in obj.items():
        if k.casefold() == folded and v is not None:
            found = v
    return found


def _as_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{name}: expected a string")
    return value


def _as_bool(value: Any, name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{name}: expected a boolean")
    return value


def _as_float(value: Any, name: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name}: expected a number")
    return float(value)


def _as_int(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name}: expected an integer")
    return value


def _as_object(value: Any, name: str) -> Optional[Mapping[str, Any]]:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ValueError(f"{name}: expected an object")
    return value


def _as_list(value: Any, name: str) -> Optional[list]:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"{name}: expected an array")
    return value


def _is_present(value: Any) -> bool:
    return value is not None and not isinstance(value, bool)


def _time_object(value: Any, name: str) -> Optional[str]:
    obj = _as_object(value, name)
    if obj is None:
        return None
    return _as_str(_get(obj, "timestamp"), f"{name}.timestamp")


def _geo(value: Any, name: str) -> Optional[GeoData]:
    obj = _as_object(value, name)
    if obj is None:
        return None
    return (
        _as_float(_get(obj, "latitude"), f"{name}.latitude"),
        _as_float(_get(obj, "longitude"), f"{name}.longitude"),
        _as_float(_get(obj, "altitude"), f"{name}.altitude"),
    )


def _add_string(s: str, sep: str, t: str) -> str:
    return s + sep + t if s else t


def _enrichments(value: Any) -> Optional[GoogleEnrichments]:
    items = _as_list(value, "enrichments")
    if items is None:
        return None
    result = GoogleEnrichments()
    for item in items:
        entry = _as_object(item, "enrichments[]")
        if entry is None:
            continue
        narrative = _as_object(_get(entry, "narrativeEnrichment"), "narrativeEnrichment")
        if narrative is not None:
            text = _as_str(_get(narrative, "text"), "narrativeEnrichment.text")
            if text:
                result.text = _add_string(result.text, "\n", text)
        location = _as_object(_get(entry, "locationEnrichment"), "locationEnrichment")
        if location is None:
            continue
        places = _as_list(_get(location, "location"), "locationEnrichment.location")
        for place in places or []:
            loc = _as_object(place, "location[]") or {}
            name = _as_str(_get(loc, "name"), "location.name")
            description = _as_str(_get(loc, "description"), "location.description")
            if name:
                result.text = _add_string(result.text, "\n", name)
            if description:
                result.text = _add_string(result.text, " - ", description)
            result.latitude = _as_int(_get(loc, "latitudeE7"), "latitudeE7") / _E7_DIVISOR
            result.longitude = _as_int(_get(loc, "longitudeE7"), "longitudeE7") / _E7_DIVISOR
    return result


def _people(value: Any) -> list[str]:
    items = _as_list(value, "people") or []
    names = []
    for item in items:
        person = _as_object(item, "people[]") or {}
        names.append(_as_str(_get(person, "name"), "people.name"))
    return names


def _from_object(obj: Mapping[str, Any]) -> GoogleMetaData:
    origin = _as_object(_get(obj, "googlePhotosOrigin"), "googlePhotosOrigin") or {}
    return GoogleMetaData(
        title=_as_str(_get(obj, "title"), "title"),
        description=_as_str(_get(obj, "description"), "description"),
        category=_as_str(_get(obj, "category"), "category"),
        date=_time_object(_get(obj, "date"), "date"),
        photo_taken_time=_time_object(_get(obj, "photoTakenTime"), "photoTakenTime"),
        geo_data_exif=_geo(_get(obj, "geoDataExif"), "geoDataExif"),
        geo_data=_geo(_get(obj, "geoData"), "geoData"),
        trashed=_as_bool(_get(obj, "trashed"), "trashed"),
        archived=_as_bool(_get(obj, "archived"), "archived"),
        url_present=_is_present(_get(obj, "url")),
        favorited=_as_bool(_get(obj, "favorited"), "favorited"),
        enrichments=_enrichments(_get(obj, "enrichments")),
        people=_people(_get(obj, "people")),
        from_partner_sharing=_is_present(_get(origin, "fromPartnerSharing")),
    )


def parse_google_metadata(data: Union[str, bytes, Mapping[str, Any]]) -> GoogleMetaData:
    """Parse a takeout JSON document; old album files nest it under ``albumData``.

    Raises ValueError when the document is not valid JSON or has wrong types.
    """
    obj = json.loads(data) if isinstance(data, (str, bytes, bytearray)) else data
    if obj is None:
        return GoogleMetaData()
    if not isinstance(obj, Mapping):
        raise ValueError("metadata must be a JSON object")
    album_data = _get(obj, "albumData")
    if isinstance(album_data, Mapping):
        try:
            return _from_object(album_data)
        except ValueError:
            pass
    return _from_object(obj)