from pathlib import Path

import pytest

from mediaclassifier.media_types import (
    MediaInfo,
    MediaType,
    get_media_info,
    is_audio_extension,
    is_image_extension,
    is_video_extension,
)


def test_image_extensions():
    assert is_image_extension("jpg")
    assert is_image_extension("nef")
    assert is_image_extension("cr2")
    assert not is_image_extension("mp4")


def test_video_extensions():
    assert is_video_extension("mp4")
    assert is_video_extension("mov")
    assert not is_video_extension("jpg")


def test_audio_extensions():
    assert is_audio_extension("mp3")
    assert is_audio_extension("flac")
    assert not is_audio_extension("jpg")


def test_extension_checks_are_case_sensitive():
    assert not is_image_extension("JPG")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("photo.jpg", MediaInfo(MediaType.IMAGE, "JPG")),
        ("photo.JPG", MediaInfo(MediaType.IMAGE, "JPG")),
        ("DSC_1234.NEF", MediaInfo(MediaType.IMAGE, "NEF")),
        ("clip.Mov", MediaInfo(MediaType.VIDEO, "MOV")),
        ("song.flac", MediaInfo(MediaType.AUDIO, "FLAC")),
        ("archive.tar.mp3", MediaInfo(MediaType.AUDIO, "MP3")),
    ],
)
def test_get_media_info_recognises_media(name, expected):
    assert get_media_info(Path("/some/dir") / name) == expected


@pytest.mark.parametrize("name", ["notes.txt", "README", ".jpg", "file."])
def test_get_media_info_rejects_other_files(name):
    assert get_media_info(name) is None


def test_get_media_info_accepts_strings():
    assert get_media_info("a/b/c.webm") == MediaInfo(MediaType.VIDEO, "WEBM")