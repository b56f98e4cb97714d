"""Reading album information from Picasa ``.picasa.ini`` files."""

from __future__ import annotations

import os
from dataclasses import dataclass

__all__ = ["PicasaAlbum", "PicasaIniError", "parse_picasa_ini", "read_picasa_ini"]

_PICASA_SECTION = "Picasa"


@dataclass(frozen=True)
class PicasaAlbum:
    """Album name and description found in a Picasa ini file."""

    name: str = ""
    description: str = ""


class PicasaIniError(ValueError):
    """Raised when a Picasa ini file cannot be parsed."""


def parse_picasa_ini(text: str) -> PicasaAlbum:
    """Parse the content of a Picasa ini file and return its album."""
    section = ""
    name = ""
    description = ""
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith((";", "#")):
            continue
        if line.startswith("[") and line.endswith("]") and len(line) >= 2:
            section = line[1:-1]
            continue
        if section != _PICASA_SECTION:
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise PicasaIniError(f"invalid line: {line}")
        key = key.strip()
        value = value.strip()
        if key == "name":
            name = value
        elif key == "description":
            description = value
    return PicasaAlbum(name=name, description=description)


def read_picasa_ini(path: str | os.PathLike[str]) -> PicasaAlbum:
    """Read and parse the Picasa ini file at ``path``."""
    with open(path, encoding="utf-8", errors="replace") as stream:
        text = stream.read()
    try:
        return parse_picasa_ini(text)
    except PicasaIniError as err:
        raise PicasaIniError(f"error parsing picasa ini file: {err}") from err