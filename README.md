# mediaclassifier

Organise a directory of photos, videos and audio recordings into folders by
file type and date.

Each media file found under the working directory is moved to

    <directory>/<EXTENSION>/<YYYYMMDD>/<filename>

For example, `holiday/IMG_0042.jpg` taken on 18 November 2025 ends up in
`JPG/20251118/IMG_0042.jpg`. The extension folder is the file's extension in
upper case.

## Installation

    pip install .

## Usage

Run in the directory you want to organise:

    mediaclassifier

or point it at another directory:

    mediaclassifier --dir /path/to/photos

Options:

- `-d`, `--dir DIR`: directory to operate on (default: `.`).
- `-c`, `--clean`: remove empty directories after sorting. This is always on.
- `-V`, `--version`: print the version and exit.

Every file is reported as it is processed, followed by a summary of how many
files were moved, renamed, skipped and failed. A detailed log is written to
`classifier.log` in the current directory, replaced on each run.

## Which files are processed

- Files are looked for at most nine levels below the directory.
- Hidden files and directories (names starting with a dot) are ignored.
- Directories named `target`, and directories named after a known media
  extension (in any case, such as `JPG` or `mp4`), are not entered, so files
  that are already sorted are left alone.
- A file already sitting in a folder of the form `EXT/YYYYMMDD/` is reported
  as skipped.

## How the date is chosen

- For images, the EXIF `DateTimeOriginal` tag is used, falling back to the
  EXIF `DateTime` tag. Both `2025:11:18 14:30:45` and `2025-11-18 14:30:45`
  are accepted and read as local time; a time that is ambiguous or does not
  exist in the local time zone is not used.
- If no EXIF date is available, or the file is a video or audio file, the
  file's creation time is used where the platform provides it, otherwise its
  modification time.

## Conflicts

When a file with the same name already exists at the destination:

- if both files have the same size, the source is left where it is and
  reported as skipped;
- otherwise the file is moved under the first free name with a numeric
  suffix, such as `photo_1.jpg`, `photo_2.jpg` and so on, up to 999.

## Cleaning up

After sorting, empty directories below the working directory are removed.
Hidden directories and directories named `target` or `DCIM` (in any case)
are kept. Each directory is checked before its contents, so a directory that
only becomes empty during the clean-up stays until the next run. No clean-up
happens when no media files were found.

## Supported formats

- Images: JPEG, PNG, GIF, TIFF, BMP, WebP, HEIC/HEIF and camera RAW formats
  (NEF, NRW, CR2, CR3, CRW, ARW, SRF, SR2, DNG, ORF, PEF, RAF, RW2, 3FR, IIQ,
  MEF, MOS, ERF, K25, KDC, DCR, DCS).
- Video: MP4, M4V, MOV, QT, AVI, MKV, WebM, WMV, FLV, F4V, MTS, M2TS, 3GP,
  3G2, MPG, MPEG, MPE, MPV, OGV, VOB.
- Audio: FLAC, WAV, AIFF, ALAC, APE, MP3, AAC, M4A, OGG, OGA, Opus, WMA,
  M4B, AMR.

EXIF dates are read with Pillow, so RAW and other formats Pillow cannot open
fall back to the file system date.

## Library use

    from pathlib import Path
    from mediaclassifier.classifier import Success, classify_file

    result = classify_file(Path("."), Path("holiday/IMG_0042.jpg"))
    if isinstance(result, Success):
        print(result.target)

`classify_file` returns one of `Success`, `Renamed`, `Skipped` or `Failed`
from `mediaclassifier.classifier`. Other building blocks:

- `mediaclassifier.media_types.get_media_info(path)` returns a `MediaInfo`
  (`media_type`, `extension`) or `None`.
- `mediaclassifier.metadata.extract_date(path, is_image)` returns the date
  used for sorting, raising `DateExtractionError` when none can be read.
- `mediaclassifier.conflict.resolve_conflict(source, target)` returns
  `NoConflict`, `Skip` or `Rename`.
- `mediaclassifier.cli.scan_media_files(directory)` and
  `mediaclassifier.cli.clean_empty_dirs(directory)` do the scanning and the
  clean-up of the command.