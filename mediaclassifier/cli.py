"""Command line entry point: sort the media files of a directory."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from . import __version__
from .classifier import ClassifyResult, Failed, Renamed, Skipped, Success, classify_file
from .conflict import ConflictError
from .media_types import (
    get_media_info,
    is_audio_extension,
    is_image_extension,
    is_video_extension,
)

logger = logging.getLogger(__name__)

LOG_FILE = "classifier.log"
_MAX_DEPTH = 9
_PACKAGE_LOGGER = "mediaclassifier"


@dataclass
class Statistics:
    """Counts of classification outcomes."""

    success: int = 0
    skipped: int = 0
    renamed: int = 0
    failed: int = 0

    def record(self, result: ClassifyResult) -> None:
        """Count one classification result."""
        match result:
            case Success():
                self.success += 1
            case Skipped():
                self.skipped += 1
            case Renamed():
                self.renamed += 1
            case Failed():
                self.failed += 1

    def total(self) -> int:
        """Return the number of files counted."""
        return self.success + self.skipped + self.renamed + self.failed

    def summary(self) -> str:
        """Return the summary shown at the end of a run."""
        return "\n".join(
            [
                "",
                "========== Classification Summary ==========",
                f"✅ Successfully moved:  {self.success}",
                f"🔄 Renamed and moved:   {self.renamed}",
                f"⏭️  Skipped (same file): {self.skipped}",
                f"❌ Failed:              {self.failed}",
                f"📊 Total processed:     {self.total()}",
                "==========================================",
                "",
            ]
        )


def is_hidden(path: str | os.PathLike[str]) -> bool:
    """Return True if the file or directory name starts with a dot."""
    return Path(path).name.startswith(".")


def is_target_dir(path: str | os.PathLike[str]) -> bool:
    """Return True for directories that scanning must not enter."""
    path = Path(path)
    if path.is_symlink() or not path.is_dir():
        return False
    name = path.name
    if name == "target":
        return True
    lowered = name.lower()
    return (
        is_image_extension(lowered)
        or is_video_extension(lowered)
        or is_audio_extension(lowered)
    )


def _sorted_entries(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def _walk_media(directory: Path, depth: int) -> Iterator[Path]:
    for entry in _sorted_entries(directory):
        path = Path(entry.path)
        if is_hidden(path) or is_target_dir(path):
            continue
        if entry.is_dir(follow_symlinks=False):
            if depth < _MAX_DEPTH:
                yield from _walk_media(path, depth + 1)
        elif entry.is_file(follow_symlinks=False) and get_media_info(path) is not None:
            yield path


def scan_media_files(directory: str | os.PathLike[str]) -> list[Path]:
    """Return the media files below ``directory``, at most nine levels deep.

    Hidden entries and directories named like ``target`` or a media
    extension are not entered.
    """
    return list(_walk_media(Path(directory), 1))


def _clean(directory: Path, depth: int, removed: list[Path]) -> None:
    for entry in _sorted_entries(directory):
        path = Path(entry.path)
        if is_hidden(path) or not entry.is_dir(follow_symlinks=False):
            continue
        if path.name != "target" and path.name.lower() != "dcim":
            if not any(path.iterdir()):
                path.rmdir()
                logger.info("Removed empty directory: %s", path)
                removed.append(path)
                continue
        if depth < _MAX_DEPTH:
            _clean(path, depth + 1, removed)


def clean_empty_dirs(directory: str | os.PathLike[str]) -> list[Path]:
    """Remove empty directories below ``directory`` and return them.

    Hidden directories and those named ``target`` or ``dcim`` are kept.
    A directory is examined before its contents, so one emptied by this
    pass stays.
    """
    removed: list[Path] = []
    _clean(Path(directory), 1, removed)
    return removed


def init_logger(path: str | os.PathLike[str] = LOG_FILE) -> logging.Handler:
    """Send the package's log records of level INFO and above to ``path``."""
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S")
    )
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(logging.INFO)
    package_logger.addHandler(handler)
    return handler


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mediaclassifier",
        description="Sort media files into EXTENSION/YYYYMMDD folders.",
    )
    parser.add_argument(
        "-d",
        "--dir",
        default=".",
        help="Directory to operate on (default: current directory)",
    )
    parser.add_argument(
        "-c",
        "--clean",
        action="store_true",
        default=True,
        help="Clean up empty directories (default: true)",
    )
    parser.add_argument("-V", "--version", action="version", version=__version__)
    return parser.parse_args(argv)


def _relative(path: Path, base: Path) -> Path:
    try:
        return path.relative_to(base)
    except ValueError:
        return path


def _describe(result: ClassifyResult, target_dir: Path) -> str:
    match result:
        case Success(source=source, target=target):
            return f"✅ Moved: {source.name} → {_relative(target, target_dir)}"
        case Renamed(source=source, target=target):
            return f"🔄 Renamed: {source.name} → {_relative(target, target_dir)}"
        case Skipped(path=path):
            return f"⏭️  Skipped: {path.name} (already exists)"
        case Failed(path=path, error=error):
            return f"❌ Failed: {path.name} - {error}"
    raise TypeError(f"Unexpected result: {result!r}")


def _run(args: argparse.Namespace) -> int:
    logger.info("MediaClassifier started")
    print("🚀 MediaClassifier - Organizing your media files...\n")

    target_dir = Path(args.dir) if args.dir else Path.cwd()
    logger.info("Working directory: %s", target_dir)
    print(f"📁 Working directory: {target_dir}\n")

    print("🔍 Scanning for media files...")
    media_files = scan_media_files(target_dir)

    if not media_files:
        print("ℹ️  No media files found in the current directory.")
        logger.info("No media files found")
        return 0

    count = len(media_files)
    print(f"📋 Found {count} media files\n")
    logger.info("Found %d media files", count)

    print("⚙️  Processing files...\n")
    stats = Statistics()
    for number, file in enumerate(media_files, start=1):
        progress = f"[{number}/{count}]"
        try:
            result = classify_file(target_dir, file)
        except (OSError, ConflictError, ValueError) as exc:
            logger.error("Error processing %s: %s", file, exc)
            print(f"{progress} ❌ Error: {file.name} - {exc}")
            stats.failed += 1
            continue
        print(f"{progress} {_describe(result, target_dir)}")
        stats.record(result)

    if args.clean:
        print("\n🧹 Cleaning up empty directories...\n")
        for removed in clean_empty_dirs(target_dir):
            print(f"🗑️  Removed empty directory: {removed}")

    print(stats.summary())
    logger.info(
        "Classification completed: %d success, %d renamed, %d skipped, %d failed",
        stats.success,
        stats.renamed,
        stats.skipped,
        stats.failed,
    )

    print(f"📝 Detailed logs saved to: {LOG_FILE}")
    print("✨ Done!\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the classifier; return the process exit status."""
    args = _parse_args(argv)
    try:
        handler = init_logger(LOG_FILE)
    except OSError as exc:
        print(f"Error: Failed to create log file: {exc}", file=sys.stderr)
        return 1
    try:
        return _run(args)
    except OSError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        logging.getLogger(_PACKAGE_LOGGER).removeHandler(handler)
        handler.close()


if __name__ == "__main__":
    sys.exit(main())