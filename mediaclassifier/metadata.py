"""Extraction of the date a media file was taken or created."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)

_EXIF_IFD = 0x8769
_TAG_DATETIME = 0x0132
_TAG_DATETIME_ORIGINAL = 0x9003

_DATETIME_FORMATS = ("%Y:%m:%d %H:%M:%S", "%Y-%m-%d %H:%M:%S")


class DateExtractionError(Exception):
    """Raised when no date can be read from a file."""


def extract_date(path: str | os.PathLike[str], is_image: bool) -> datetime:
    """Return the file's date: EXIF first for images, then the file system."""
    if is_image:
        try:
            date = extract_exif_date(path)
        except DateExtractionError as exc:
            logger.warning(
                "Failed to extract EXIF date for %s: %s, falling back to file time",
                path,
                exc,
            )
        else:
            logger.debug("Extracted EXIF date for %s: %s", path, date)
            return date
    return extract_file_date(path)


def _as_text(value: object) -> str | None:
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="replace")
    if isinstance(value, str):
        return value.strip("\x00")
    return None


def extract_exif_date(path: str | os.PathLike[str]) -> datetime:
    """Return DateTimeOriginal, or else DateTime, from the file's EXIF data."""
    try:
        with Image.open(path) as image:
            exif = image.getexif()
            exif_ifd = exif.get_ifd(_EXIF_IFD)
            candidates = [
                exif_ifd.get(_TAG_DATETIME_ORIGINAL, exif.get(_TAG_DATETIME_ORIGINAL)),
                exif.get(_TAG_DATETIME),
            ]
    except OSError as exc:
        raise DateExtractionError(f"Failed to read EXIF data: {exc}") from exc

    for value in candidates:
        text = _as_text(value)
        if text is None:
            continue
        date = parse_exif_datetime(text)
        if date is not None:
            return date

    raise DateExtractionError("No valid date found in EXIF data")


def parse_exif_datetime(text: str) -> datetime | None:
    """Parse an EXIF date such as ``2025:11:18 14:30:45`` as local time.

    Returns None if the text matches no known format or the local time is
    ambiguous or does not exist.
    """
    text = text.strip('"').strip()
    for fmt in _DATETIME_FORMATS:
        try:
            naive = datetime.strptime(text, fmt)
        except ValueError:
            continue
        try:
            first = naive.replace(fold=0).timestamp()
            second = naive.replace(fold=1).timestamp()
        except (OverflowError, OSError, ValueError):
            return None
        if first != second:
            return None
        return naive.astimezone()
    return None


def extract_file_date(path: str | os.PathLike[str]) -> datetime:
    """Return the file's creation time if known, otherwise its modification time."""
    try:
        stat = Path(path).stat()
    except OSError as exc:
        raise DateExtractionError(f"Failed to read file metadata: {exc}") from exc

    created = getattr(stat, "st_birthtime", None)
    if created is None and sys.platform == "win32":
        created = stat.st_ctime

    if created is not None:
        date = datetime.fromtimestamp(created).astimezone()
        logger.debug("Using file creation time for %s: %s", path, date)
        return date

    date = datetime.fromtimestamp(stat.st_mtime).astimezone()
    logger.debug("Using file modified time for %s: %s", path, date)
    return date


def format_date(date: datetime) -> str:
    """Format a date as ``YYYYMMDD``."""
    return date.strftime("%Y%m%d")