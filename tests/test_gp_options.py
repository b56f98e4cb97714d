import pytest

from photoadapters.folder_options import DEFAULT_BANNED_FILES
from photoadapters.gp_options import ImportFlags, default_banned_patterns


def test_default_banned_patterns():
    patterns = default_banned_patterns()
    assert patterns == list(DEFAULT_BANNED_FILES)
    assert "@eaDir/" in patterns
    patterns.append("extra")
    assert "extra" not in default_banned_patterns()


def test_defaults():
    flags = ImportFlags()
    assert flags.create_albums is True
    assert flags.keep_partner is True
    assert flags.keep_archived is True
    assert flags.keep_trashed is False
    assert flags.keep_json_less is False
    assert flags.takeout_tag is True
    assert flags.people_tag is True
    assert flags.banned_files == list(DEFAULT_BANNED_FILES)
    assert flags.session == ""


def test_session_tag_value():
    flags = ImportFlags(session_tag=True)
    assert flags.session.startswith("{immich-go}/")
    assert len(flags.session) == len("{immich-go}/") + len("2024-01-01 00:00:00")


def test_keep_everything_by_default_except_trashed():
    flags = ImportFlags()
    assert flags.discard_reason(archived=True, from_partner=True, trashed=False) is None
    assert flags.discard_reason(False, False, True) == "discarding trashed file"


@pytest.mark.parametrize(
    "flags, state, reason",
    [
        (ImportFlags(keep_archived=False), (True, False, False), "discarding archived file"),
        (ImportFlags(keep_partner=False), (False, True, False), "discarding partner file"),
        (ImportFlags(keep_archived=False, keep_partner=False), (True, True, True), "discarding archived file"),
        (ImportFlags(keep_partner=False), (False, True, True), "discarding partner file"),
        (ImportFlags(keep_trashed=True), (False, False, True), None),
    ],
)
def test_discard_reason(flags, state, reason):
    assert flags.discard_reason(*state) == reason


def test_lists_are_independent():
    a = ImportFlags()
    b = ImportFlags()
    a.tags.append("t")
    a.banned_files.append("x")
    assert b.tags == []
    assert "x" not in b.banned_files