"""
Directory scanner for the Image Ingestion domain.

Walks a folder tree and reports every regular file together with its
path relative to the scan root.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from loguru import logger

from domains.image_ingest.tagging import is_image_file


@dataclass(frozen=True)
class ScannedFile:
    """A regular file found below the scan root."""

    full_path: Path
    relative_path: str

    @property
    def filename(self) -> str:
        return self.full_path.name


@dataclass
class FolderCounts:
    """File totals for a folder tree."""

    total_files: int = 0
    image_files: int = 0
    unreadable_dirs: int = 0


def iter_files(root: Path) -> Iterator[ScannedFile]:
    """
    Yield every regular file below ``root``, at any depth.

    Relative paths use ``/`` separators and include the filename. Symlinked
    directories are followed without cycle detection. Errors listing a
    directory propagate to the caller.
    """

    def _walk(current: Path, prefix: str) -> Iterator[ScannedFile]:
        for item in current.iterdir():
            relative = f"{prefix}/{item.name}" if prefix else item.name
            if item.is_dir():
                yield from _walk(item, relative)
            elif item.is_file():
                yield ScannedFile(full_path=item, relative_path=relative)

    yield from _walk(Path(root), "")


def count_files(root: Path) -> FolderCounts:
    """
    Count all files and image files below ``root``.

    Unlike iter_files, unreadable directories are logged and skipped.
    """
    counts = FolderCounts()

    def _count(current: Path):
        try:
            items = list(current.iterdir())
        except OSError as e:
            logger.warning(f"Cannot read directory {current}: {e}")
            counts.unreadable_dirs += 1
            return

        for item in items:
            if item.is_dir():
                _count(item)
            elif item.is_file():
                counts.total_files += 1
                if is_image_file(item.name):
                    counts.image_files += 1

    _count(Path(root))
    return counts


def sample_entries(root: Path, limit: int = 5) -> List[Path]:
    """First ``limit`` entries directly inside ``root`` in listing order."""
    entries = []
    for item in Path(root).iterdir():
        if len(entries) >= limit:
            break
        entries.append(item)
    return entries
