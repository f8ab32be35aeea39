"""Moving a media file into an ``EXTENSION/YYYYMMDD/`` folder."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .conflict import NoConflict, Rename, Skip, resolve_conflict
from .media_types import MediaInfo, MediaType, get_media_info
from .metadata import DateExtractionError, extract_date, format_date

logger = logging.getLogger(__name__)

_DATE_DIR_LENGTH = 8
_ASCII_DIGITS = frozenset("0123456789")
_ASCII_UPPER_OR_DIGIT = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


@dataclass(frozen=True)
class Success:
    """The file was moved to its destination."""

    source: Path
    target: Path


@dataclass(frozen=True)
class Skipped:
    """The file was left where it was."""

    path: Path


@dataclass(frozen=True)
class Renamed:
    """The file was moved under a new name because of a clash."""

    source: Path
    target: Path


@dataclass(frozen=True)
class Failed:
    """The file could not be classified."""

    path: Path
    error: str


ClassifyResult = Success | Skipped | Renamed | Failed


def classify_file(
    target_dir: str | os.PathLike[str], source: str | os.PathLike[str]
) -> ClassifyResult:
    """Move one media file into its dated folder below ``target_dir``.

    Files that are not media or whose date cannot be read give ``Failed``;
    errors while resolving a clash or moving the file are raised.
    """
    target_dir = Path(target_dir)
    source = Path(source)

    media_info = get_media_info(source)
    if media_info is None:
        return Failed(source, "Not a media file")

    try:
        date = extract_date(source, media_info.media_type is MediaType.IMAGE)
    except DateExtractionError as exc:
        logger.error("Failed to extract date from %s: %s", source, exc)
        return Failed(source, f"Failed to extract date: {exc}")

    target = build_target_path(target_dir, source, media_info, date)

    if is_classified_file(source):
        return Skipped(source)

    resolution = resolve_conflict(source, target)
    match resolution:
        case NoConflict(target=final_target):
            move_file(source, final_target)
            logger.info("Successfully moved: %s → %s", source, final_target)
            return Success(source, final_target)
        case Skip(reason=reason):
            logger.info("Skipped: %s - %s", source, reason)
            return Skipped(source)
        case Rename(target=new_target):
            move_file(source, new_target)
            logger.warning("File renamed due to conflict: %s → %s", source, new_target)
            return Renamed(source, new_target)
    raise TypeError(f"Unexpected conflict resolution: {resolution!r}")


def build_target_path(
    target_dir: str | os.PathLike[str],
    source: str | os.PathLike[str],
    media_info: MediaInfo,
    date: datetime,
) -> Path:
    """Return ``target_dir/EXTENSION/YYYYMMDD/filename``."""
    filename = Path(source).name
    if not filename:
        raise ValueError("Failed to get filename")
    return Path(target_dir) / media_info.extension / format_date(date) / filename


def is_classified_file(path: str | os.PathLike[str]) -> bool:
    """Return True if the file already sits in an ``EXT/YYYYMMDD/`` folder."""
    parent = Path(path).parent
    date_name = parent.name
    if len(date_name) != _DATE_DIR_LENGTH or not set(date_name) <= _ASCII_DIGITS:
        return False
    ext_name = parent.parent.name
    if not ext_name or ext_name == "..":
        return False
    return set(ext_name) <= _ASCII_UPPER_OR_DIGIT


def move_file(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> None:
    """Move ``source`` to ``target``, creating the target's folders first."""
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    os.rename(source, target)