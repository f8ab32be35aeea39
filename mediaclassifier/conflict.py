"""Resolution of name clashes at the destination of a move."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_MAX_SUFFIX = 1000


class ConflictError(Exception):
    """Raised when a conflict cannot be examined or resolved."""


@dataclass(frozen=True)
class NoConflict:
    """The target is free and can be used as is."""

    target: Path


@dataclass(frozen=True)
class Skip:
    """An identical-looking file already exists; the source should be left alone."""

    reason: str


@dataclass(frozen=True)
class Rename:
    """A different file already exists; the source should go to ``target`` instead."""

    target: Path


def _size(path: Path, role: str) -> int:
    try:
        return path.stat().st_size
    except OSError as exc:
        raise ConflictError(f"Failed to get {role} file metadata: {exc}") from exc


def resolve_conflict(
    source: str | os.PathLike[str], target: str | os.PathLike[str]
) -> NoConflict | Skip | Rename:
    """Decide how to move ``source`` to ``target`` given what already exists there.

    Files of equal size are taken to be the same file.
    """
    source = Path(source)
    target = Path(target)

    if not target.exists():
        logger.debug("No conflict for %s", target)
        return NoConflict(target)

    source_size = _size(source, "source")
    target_size = _size(target, "target")

    if source_size == target_size:
        reason = f'File already exists with same size ({source_size} bytes): "{target}"'
        logger.debug(reason)
        return Skip(reason)

    new_target = generate_unique_name(target)
    logger.debug(
        "File exists with different size (source: %d bytes, target: %d bytes), "
        "renaming to %s",
        source_size,
        target_size,
        new_target,
    )
    return Rename(new_target)


def generate_unique_name(target: str | os.PathLike[str]) -> Path:
    """Return the first free path of the form ``stem_N.ext`` beside ``target``."""
    target = Path(target)
    stem = target.stem
    if not stem:
        raise ConflictError("Failed to get file stem")
    extension = target.suffix[1:]

    for index in range(1, _MAX_SUFFIX):
        name = f"{stem}_{index}.{extension}" if extension else f"{stem}_{index}"
        candidate = target.parent / name
        if not candidate.exists():
            return candidate

    raise ConflictError(f"Failed to generate unique name after {_MAX_SUFFIX} attempts")