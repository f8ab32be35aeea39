"""Recognition of media files by their file extension."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_IMAGE_EXTENSIONS = frozenset(
    {
        # Common image formats
        "jpg", "jpeg", "png", "gif", "tiff", "tif", "bmp", "webp", "heic", "heif",
        # Camera RAW formats
        "nef", "nrw",  # Nikon
        "cr2", "cr3", "crw",  # Canon
        "arw", "srf", "sr2",  # Sony
        "dng",  # Adobe
        "orf",  # Olympus
        "pef",  # Pentax
        "raf",  # Fujifilm
        "rw2",  # Panasonic
        "3fr",  # Hasselblad
        "iiq",  # Phase One
        "mef",  # Mamiya
        "mos",  # Leaf
        "erf",  # Epson
        "k25", "kdc", "dcr", "dcs",  # Kodak
    }
)

_VIDEO_EXTENSIONS = frozenset(
    {
        "mp4", "m4v", "mov", "qt", "avi", "mkv", "webm", "wmv", "flv", "f4v",
        "mts", "m2ts", "3gp", "3g2", "mpg", "mpeg", "mpe", "mpv", "ogv", "vob",
    }
)

_AUDIO_EXTENSIONS = frozenset(
    {
        # Lossless
        "flac", "wav", "aiff", "alac", "ape",
        # Lossy
        "mp3", "aac", "m4a", "ogg", "oga", "opus", "wma",
        # Other
        "m4b", "amr",
    }
)


class MediaType(Enum):
    """Broad category of a media file."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"


@dataclass(frozen=True)
class MediaInfo:
    """Category of a media file and its extension in upper case, e.g. ``JPG``."""

    media_type: MediaType
    extension: str


def is_image_extension(ext: str) -> bool:
    """Return True if the lower-case extension names an image format."""
    return ext in _IMAGE_EXTENSIONS


def is_video_extension(ext: str) -> bool:
    """Return True if the lower-case extension names a video format."""
    return ext in _VIDEO_EXTENSIONS


def is_audio_extension(ext: str) -> bool:
    """Return True if the lower-case extension names an audio format."""
    return ext in _AUDIO_EXTENSIONS


def get_media_info(path: str | os.PathLike[str]) -> MediaInfo | None:
    """Return media information for a path, or None if it is not a media file."""
    suffix = Path(path).suffix
    if not suffix:
        return None
    extension = suffix[1:].lower()
    for checker, media_type in (
        (is_image_extension, MediaType.IMAGE),
        (is_video_extension, MediaType.VIDEO),
        (is_audio_extension, MediaType.AUDIO),
    ):
        if checker(extension):
            return MediaInfo(media_type=media_type, extension=extension.upper())
    return None