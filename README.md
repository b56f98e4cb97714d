# photoadapters

Building blocks for importing photo collections from plain folders, Picasa
albums and Google Photos takeout archives. The package does these jobs:

- It pairs takeout JSON files with the media files they describe.
- It parses takeout metadata.
- It finds XMP and JSON sidecars.
- It works out album names and tags from folders.
- It tracks files that appear in several takeout parts.
- It copies assets into a dated folder layout.

It has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `photoadapters.picasa`

- `parse_picasa_ini(text)` reads the `[Picasa]` section of a `.picasa.ini`
  file and returns a `PicasaAlbum` with `name` and `description`.
- `read_picasa_ini(path)` does the same for a file on disk.
- A line in the `[Picasa]` section without `=` raises `PicasaIniError`.

### `photoadapters.matchers`

This module holds the rules that associate a takeout JSON name with a media
file name:

- `match_fast_track`
- `match_normal`
- `match_forgotten_duplicates`
- `match_edited_name`

`MATCHERS` lists them in the order they are tried. `find_matcher` returns the
name of the first rule that matches, such as `"matchNormal"`, or `None`.

`get_file_index` splits a numeric `(n)` duplicate index out of a name.

Every rule takes an `is_media(ext)` predicate. This predicate tells the rule
whether an extension such as `".jpg"` is a supported media type.

### `photoadapters.folder_options`

- `ImportFolderOptions` holds the folder import settings.
  `validate()` raises `ValueError` when an "into album" name is combined with
  a folder album mode.
- `AlbumFolderMode` has the values `NONE`, `FOLDER` and `PATH`.
- `parse_folder_mode` accepts only `FOLDER` and `PATH`. It ignores case and
  surrounding spaces.
- `album_name_for(mode, fs_name, directory, separator)` builds an album title
  for a slash-separated directory, where `"."` is the root.
- `folder_tag(fs_name, directory)` builds a tag such as `MemFS/photos/summer`.
- `DEFAULT_BANNED_FILES` lists the default excluded name patterns.

### `photoadapters.gpjson`

`parse_google_metadata(data)` parses a takeout JSON document. It accepts a
string, bytes or a mapping. It also reads old album files that nest their
content under `albumData`. It raises `ValueError` on invalid JSON or wrong
value types.

The result is a `GoogleMetaData`, which has these methods:

- `is_asset()`
- `is_album()`
- `is_partner()`
- `key()`
- `as_metadata(file_name, tag_people)`, which returns a `TakeoutMetadata`. With
  `tag_people`, every person becomes a tag `People/<name>`.

Album enrichments are collected in a `GoogleEnrichments`. It holds the
narrative text and the coordinates of the last location.

`timestamp_to_datetime` turns an epoch string into a local aware datetime. It
returns `None` for empty, zero or unparseable input.

### `photoadapters.sidecars`

`find_sidecar(directory, name, ext, is_media)` looks for `name + ext`. When
the media extension is supported, it also looks for the name without its
extension plus `ext`. The extension is compared without regard to case. The
function returns the sidecar's relative path, or `None`.

### `photoadapters.writer`

- `LocalAssetWriter(root)` copies assets under an existing root folder. The
  destination is `YYYY/YYYY-MM`, or `no-date` when there is no capture date.
- `write_asset(source, base, capture_date, sidecar, metadata_json)` accepts a
  path or a binary stream as the source. It can also write an `.XMP` copy of a
  sidecar and a `.JSON` file with the given metadata. It returns the path
  written.
- `unique_base` adds a `~n` index so that no file or sidecar is overwritten.
- `path_of_asset` gives the relative folder for a capture date.

### `photoadapters.tracker`

`FileTracker` is thread-safe. It records every folder where a file, keyed by
base name and size as a `FileKey`, was found. Its methods are:

- `add`
- `get`, which returns a copy as a `TrackingInfo`
- `mark_uploaded`
- `write_csv`, which writes a report sorted by name then size, with the
  columns in `CSV_HEADER`

### `photoadapters.gp_options`

`ImportFlags` holds the takeout import settings. With `session_tag` set, it
computes a session tag string at creation.

`discard_reason(archived, from_partner, trashed)` returns why an asset would be
left out, or `None`.

`default_banned_patterns()` returns the default excluded name patterns.

### `photoadapters.takeout`

A `DirectoryCatalog` holds the JSON metadata and the media files of one
takeout directory.

`solve(is_media, keep_json_less)` applies the matchers in order. It moves
paired files to `matched` as `MatchedFile` entries, and returns the sorted
names of files left without metadata.

`original_title` restores a file's original name from its JSON title.

## Example

```python
from photoadapters.gpjson import parse_google_metadata
from photoadapters.matchers import find_matcher
from photoadapters.takeout import DirectoryCatalog

is_media = lambda ext: ext.lower() in {".jpg", ".heic", ".mp4"}

find_matcher("DSC_0101.JPG(1).json", "DSC_0101(1).JPG", is_media)
# 'matchNormal'

md = parse_google_metadata(
    '{"title": "IMG_1.jpg", "photoTakenTime": {"timestamp": "1695394176"}}'
).as_metadata("Photos from 2023/IMG_1.jpg.json", tag_people=True)

catalog = DirectoryCatalog()
catalog.add_json("IMG_1.jpg.json", md)
catalog.add_file("IMG_1.jpg", 1024)
catalog.solve(is_media)                 # []
catalog.matched["IMG_1.jpg"].matcher    # 'matchFastTrack'
```

## What the package does not do

These are functions, not a finished importer.

- There is no command-line program.
- Nothing uploads to a photo server.
- Nothing walks a folder or an archive on its own. The caller lists files and
  feeds them to `DirectoryCatalog`, `FileTracker` and `find_sidecar`.
- It does not read EXIF data.
- It does not parse the content of XMP files.
- It does not match files against the banned-file patterns. Those are kept
  only as lists of strings.
- It does not stack bursts or RAW/JPEG pairs.
- It has no built-in list of supported media types. Callers pass their own
  `is_media` predicate.