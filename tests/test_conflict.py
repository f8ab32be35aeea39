import pytest

from mediaclassifier.conflict import (
    ConflictError,
    NoConflict,
    Rename,
    Skip,
    generate_unique_name,
    resolve_conflict,
)


def test_generate_unique_name(tmp_path):
    base = tmp_path / "test.jpg"
    base.write_bytes(b"test")

    unique = generate_unique_name(base)
    assert unique.name == "test_1.jpg"

    unique.write_bytes(b"test")

    unique2 = generate_unique_name(base)
    assert unique2.name == "test_2.jpg"
    assert unique2.parent == tmp_path


def test_generate_unique_name_without_extension(tmp_path):
    base = tmp_path / "README"
    base.write_bytes(b"x")
    assert generate_unique_name(base).name == "README_1"


def test_generate_unique_name_keeps_last_extension_only(tmp_path):
    base = tmp_path / "clip.backup.mp4"
    assert generate_unique_name(base).name == "clip.backup_1.mp4"


def test_generate_unique_name_gives_up(tmp_path):
    base = tmp_path / "a.jpg"
    base.write_bytes(b"")
    for index in range(1, 1000):
        (tmp_path / f"a_{index}.jpg").write_bytes(b"")
    with pytest.raises(ConflictError):
        generate_unique_name(base)


def test_resolve_conflict_no_conflict(tmp_path):
    source = tmp_path / "src.jpg"
    source.write_bytes(b"data")
    target = tmp_path / "out" / "src.jpg"
    assert resolve_conflict(source, target) == NoConflict(target)


def test_resolve_conflict_same_size_skips(tmp_path):
    source = tmp_path / "src.jpg"
    source.write_bytes(b"abcd")
    target = tmp_path / "dst.jpg"
    target.write_bytes(b"wxyz")

    result = resolve_conflict(source, target)
    assert isinstance(result, Skip)
    assert "4 bytes" in result.reason
    assert str(target) in result.reason


def test_resolve_conflict_different_size_renames(tmp_path):
    source = tmp_path / "src.jpg"
    source.write_bytes(b"abcdef")
    target = tmp_path / "photo.jpg"
    target.write_bytes(b"ab")

    assert resolve_conflict(source, target) == Rename(tmp_path / "photo_1.jpg")


def test_resolve_conflict_missing_source(tmp_path):
    target = tmp_path / "photo.jpg"
    target.write_bytes(b"ab")
    with pytest.raises(ConflictError):
        resolve_conflict(tmp_path / "missing.jpg", target)