import pytest

from photoadapters.matchers import (
    find_matcher,
    get_file_index,
    match_edited_name,
    match_fast_track,
    match_forgotten_duplicates,
    match_normal,
)

_MEDIA_EXTENSIONS = {
    ".jpg", ".jpeg", ".png", ".gif", ".heic", ".webp", ".tif", ".tiff",
    ".dng", ".cr2", ".cr3", ".arw", ".raf", ".nef",
    ".mp4", ".mov", ".avi", ".mkv", ".3gp", ".mts",
}


def is_media(ext):
    return ext.lower() in _MEDIA_EXTENSIONS


CASES = [
    ("PXL_20211013_220651983.jpg.json", "PXL_20211013_220651983.jpg", "matchFastTrack"),
    ("PXL_20211013_220651983.jpg.json", "PXL_20211013_220651958.jpg", ""),
    ("PXL_20220405_090123740.PORTRAIT.jpg.json", "PXL_20220405_090123740.PORTRAIT-modifié.jpg", "matchEditedName"),
    ("PXL_20220405_090123740.PORTRAIT.jpg.json", "PXL_20220405_090123741.PORTRAIT-modifié.jpg", ""),
    ("DSC_0100.JPG.json", "DSC_0100.JPG", "matchFastTrack"),
    ("DSC_0101.JPG(1).json", "DSC_0101(1).JPG", "matchNormal"),
    ("DSC_0102.JPG(2).json", "DSC_0102(1).JPG", ""),
    ("DSC_0103.JPG(1).json", "DSC_0103.JPG", ""),
    ("DSC_0104.JPG.json", "DSC_0104(1).JPG", ""),
    ("IMG_2710.HEIC(1).json", "IMG_2710(1).HEIC", "matchNormal"),
    ("PXL_20231118_035751175.MP.jpg.json", "PXL_20231118_035751175.MP.jpg", "matchFastTrack"),
    ("PXL_20230809_203449253.LONG_EXPOSURE-02.ORIGIN.json", "PXL_20230809_203449253.LONG_EXPOSURE-02.ORIGINA.jpg", "matchNormal"),
    ("05yqt21kruxwwlhhgrwrdyb6chhwszi9bqmzu16w0 2.jp.json", "05yqt21kruxwwlhhgrwrdyb6chhwszi9bqmzu16w0 2.jpg", "matchNormal"),
    (
        "😀😃😄😁😆😅😂🤣🥲☺️😊😇🙂🙃😉😌😍🥰😘😗😙😚😋.json",
        "😀😃😄😁😆😅😂🤣🥲☺️😊😇🙂🙃😉😌😍🥰😘😗😙😚😋😛.jpg",
        "matchNormal",
    ),
    ("Backyard_ceremony_wedding_photography_xxxxxxx_(494).json", "Backyard_ceremony_wedding_photography_xxxxxxx_m(494).jpg", "matchNormal"),
    ("Backyard_ceremony_wedding_photography_xxxxxxx_(494).json", "Backyard_ceremony_wedding_photography_xxxxxxx_m(185).jpg", ""),
    ("original_1d4caa6f-16c6-4c3d-901b-9387de10e528_.json", "original_1d4caa6f-16c6-4c3d-901b-9387de10e528_P.jpg", "matchNormal"),
    ("original_1d4caa6f-16c6-4c3d-901b-9387de10e528_.json", "original_1d4caa6f-16c6-4c3d-901b-9387de10e528_P(1).jpg", "matchForgottenDuplicates"),
    ("PXL_20210102_221126856.MP~2.jpg.json", "PXL_20210102_221126856.MP~2.jpg", "matchFastTrack"),
    ("13039_327707840323_537645323_9470255_27214_n.j(1).json", "13039_327707840323_537645323_9470255_27214_n(1).jpg", "matchNormal"),
    ("20161105_170829.jpg.supplemental-metadata.json", "20161105_170829.jpg", "matchNormal"),
    ("Screenshot_20231027_123303_Facebook.jpg.supple.json", "Screenshot_20231027_123303_Facebook.jpg", "matchNormal"),
    ("Screenshot_20231027_123303_Facebook.jpg.supple(1).json", "Screenshot_20231027_123303_Facebook(1).jpg", "matchNormal"),
    ("MVIMG_20191230_232926.jpg.supplemental-metadat.json", "MVIMG_20191230_232926.jpg", "matchNormal"),
    ("Screenshot_20200301-161151.png.supplemental-me.json", "Screenshot_20200301-161151.png", "matchNormal"),
    ("MVIMG_20200207_134534~2.jpg.supplemental-metad.json", "MVIMG_20200207_134534~2.jpg", "matchNormal"),
    ("Scan35.jpg.supplemental-metadata(1).json", "Scan35(1).jpg", "matchNormal"),
    ("CLIP0001.AVI.supplemental-metadata(10).json", "CLIP0001(10).AVI", "matchNormal"),
    ("IMAG0061.JPG.supplemental-metadata.json", "IMAG0061-edited.JPG", "matchEditedName"),
    ("IMG-20230325-WA0122~2.jpg.supplemental-metadat.json", "IMG-20230325-WA0122~2-edited.jpg", "matchEditedName"),
    ("2234089303984509579.supplemental-metadata.json", "2234089303984509579-edited.jpg", "matchEditedName"),
    ("Screenshot_20231027_123303_Facebook.jpg.supple.json", "Screenshot_20231027_123303_Facebook-edited.jpg", "matchEditedName"),
    ("Screenshot_20231027_123303_Facebook.jpg.supple(1).json", "Screenshot_20231027_123303_Facebook(1).jpg", "matchNormal"),
]


@pytest.mark.parametrize("json_name, file_name, want", CASES)
def test_find_matcher(json_name, file_name, want):
    assert find_matcher(json_name, file_name, is_media) == (want or None)


def test_get_file_index_extracts_number():
    assert get_file_index("IMG_3479(1).JPG") == ("IMG_3479.JPG", "1")
    assert get_file_index("CLIP0001.AVI.supplemental-metadata(10).json") == (
        "CLIP0001.AVI.supplemental-metadata.json",
        "10",
    )


def test_get_file_index_ignores_non_numeric():
    assert get_file_index("Untitled(x).jpg") == ("Untitled(x).jpg", "")
    assert get_file_index("plain.jpg") == ("plain.jpg", "")


def test_fast_track_direct():
    assert match_fast_track("DSC_0100.JPG.json", "DSC_0100.JPG", is_media)
    assert not match_fast_track("DSC_0100.JPG.json", "DSC_0101.JPG", is_media)


def test_normal_rejects_different_indexes():
    assert not match_normal("DSC_0102.JPG(2).json", "DSC_0102(1).JPG", is_media)


def test_forgotten_duplicates_limits_extra_length():
    json_name = "original_1d4caa6f-16c6-4c3d-901b-9387de10e528_.json"
    assert match_forgotten_duplicates(
        json_name, "original_1d4caa6f-16c6-4c3d-901b-9387de10e528_P(1).jpg", is_media
    )
    assert not match_forgotten_duplicates(
        json_name, "original_1d4caa6f-16c6-4c3d-901b-9387de10e528_Pxxxxxxxxxxxx.jpg", is_media
    )


def test_edited_name_refuses_indexed_files():
    assert not match_edited_name("DSC_0104.JPG.json", "DSC_0104(1).JPG", is_media)
    assert match_edited_name("IMAG0061.JPG.supplemental-metadata.json", "IMAG0061-edited.JPG", is_media)