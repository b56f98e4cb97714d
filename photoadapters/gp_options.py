"""Options for importing a Google Photos takeout archive."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Optional

from photoadapters.folder_options import DEFAULT_BANNED_FILES

__all__ = ["ImportFlags", "default_banned_patterns"]

_SESSION_FORMAT = "{immich-go}/%Y-%m-%d %H:%M:%S"


def default_banned_patterns() -> list[str]:
    """File name patterns excluded from an import unless told otherwise."""
    return list(DEFAULT_BANNED_FILES)


@dataclass
class ImportFlags:
    """Settings controlling how a Google Photos takeout is imported."""

    create_albums: bool = True
    import_from_album: str = ""
    import_into_album: str = ""
    partner_shared_album: str = ""
    keep_trashed: bool = False
    keep_partner: bool = True
    keep_untitled: bool = False
    keep_archived: bool = True
    keep_json_less: bool = False
    included_extensions: list[str] = field(default_factory=list)
    excluded_extensions: list[str] = field(default_factory=list)
    banned_files: list[str] = field(default_factory=default_banned_patterns)
    manage_epson_fastfoto: bool = False
    tags: list[str] = field(default_factory=list)
    session_tag: bool = False
    takeout_tag: bool = True
    takeout_name: str = ""
    people_tag: bool = True
    tz: Optional[tzinfo] = None
    session: str = field(default="", init=False)

    def __post_init__(self) -> None:
        if self.session_tag:
            self.session = datetime.now(self.tz).strftime(_SESSION_FORMAT)

    def discard_reason(
        self, archived: bool, from_partner: bool, trashed: bool
    ) -> Optional[str]:
        """Reason for leaving an asset out because of its state, or None to keep it."""
        if not self.keep_archived and archived:
            return "discarding archived file"
        if not self.keep_partner and from_partner:
            return "discarding partner file"
        if not self.keep_trashed and trashed:
            return "discarding trashed file"
        return None