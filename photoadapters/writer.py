"""Writing assets into a dated folder tree."""

from __future__ import annotations

import contextlib
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

__all__ = ["LocalAssetWriter", "path_of_asset", "unique_base"]

Source = Union[str, "os.PathLike[str]", BinaryIO]

_NO_DATE = "no-date"
_SIDECAR_SUFFIXES = (".XMP", ".JSON")


def _ext(name: str) -> str:
    dot = name.rfind(".")
    slash = name.rfind("/")
    return name[dot:] if dot > slash else ""


def path_of_asset(capture_date: Optional[datetime]) -> str:
    """Relative folder for an asset: ``YYYY/YYYY-MM`` or ``no-date``."""
    if capture_date is None:
        return _NO_DATE
    year = f"{capture_date.year:04d}"
    return f"{year}/{year}-{capture_date.month:02d}"


def unique_base(directory: Union[str, "os.PathLike[str]"], base: str) -> str:
    """Return a file name in ``directory`` free of clashes with files or sidecars.

    A ``~n`` index is inserted before the extension until neither the
    name nor its ``.XMP`` and ``.JSON`` companions exist.
    """
    folder = Path(directory)
    ext = _ext(base)
    radical = base[: len(base) - len(ext)]
    candidate = base
    index = 0
    while any(
        (folder / name).exists()
        for name in (candidate, *(candidate + s for s in _SIDECAR_SUFFIXES))
    ):
        index += 1
        candidate = f"{radical}~{index}{ext}"
    return candidate


@contextlib.contextmanager
def _open_source(source: Source) -> Iterator[BinaryIO]:
    if hasattr(source, "read"):
        yield source  # type: ignore[misc]
    else:
        with open(source, "rb") as stream:  # type: ignore[arg-type]
            yield stream


class LocalAssetWriter:
    """Copies assets and their sidecars under a root folder, sorted by date."""

    def __init__(self, root: Union[str, "os.PathLike[str]"]) -> None:
        self.root = Path(root)
        if not self.root.is_dir():
            raise NotADirectoryError(f"{self.root} is not a writable directory")
        self._created: set[str] = set()

    def write_asset(
        self,
        source: Source,
        base: str,
        capture_date: Optional[datetime] = None,
        sidecar: Optional[Source] = None,
        metadata_json: Optional[Union[str, bytes]] = None,
    ) -> Path:
        """Write one asset named ``base`` and return the path it was written to.

        ``sidecar`` is an XMP file copied next to the asset, ``metadata_json``
        the serialized application metadata written as a JSON sidecar.
        """
        relative = path_of_asset(capture_date)
        directory = self.root / relative
        if relative not in self._created:
            directory.mkdir(mode=0o755, parents=True, exist_ok=True)
            self._created.add(relative)

        with _open_source(source) as src:
            final_base = unique_base(directory, base)
            target = directory / final_base
            with open(target, "wb") as dst:
                shutil.copyfileobj(src, dst)

        if sidecar is not None:
            with _open_source(sidecar) as src, open(
                directory / (final_base + ".XMP"), "wb"
            ) as dst:
                shutil.copyfileobj(src, dst)

        if metadata_json is not None:
            data = (
                metadata_json.encode("utf-8")
                if isinstance(metadata_json, str)
                else metadata_json
            )
            (directory / (final_base + ".JSON")).write_bytes(data)

        return target