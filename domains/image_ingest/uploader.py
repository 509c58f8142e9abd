"""
Batched image uploader for the Image Ingestion domain.

Files are processed in fixed-size batches to bound the number of base64
payloads held in memory. Within a batch every file is handled concurrently
and the batch is joined before the next one starts. A file already stored
under the same (filename, relativePath) is skipped, so re-running over an
unchanged folder inserts nothing.

Indexes are created once all batches are done; the unique index on the
dedup key fails if duplicates slipped in, and that failure aborts the run.
"""

import asyncio
import base64
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from app.models.schemas import ImageDocument
from app.utils.helpers import now_utc
from app.utils.stores import ImageStore
from domains.image_ingest.scanner import iter_files
from domains.image_ingest.tagging import generate_tags, get_extension, get_mime_type, is_image_file

DEFAULT_BATCH_SIZE = 50


class ImagesFolderNotFoundError(FileNotFoundError):
    """The configured scan root does not exist."""


class Outcome(str, Enum):
    UPLOADED = "uploaded"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass(frozen=True)
class ImageFile:
    """An image found by the scanner, with its filesystem metadata."""

    full_path: Path
    relative_path: str
    filename: str
    extension: str
    size: int
    last_modified: datetime


@dataclass(frozen=True)
class FileOutcome:
    relative_path: str
    status: Outcome
    error: Optional[str] = None


@dataclass
class BatchReport:
    """Outcomes of one batch."""

    number: int
    outcomes: List[FileOutcome] = field(default_factory=list)

    def _count(self, status: Outcome) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def uploaded(self) -> int:
        return self._count(Outcome.UPLOADED)

    @property
    def skipped(self) -> int:
        return self._count(Outcome.SKIPPED)

    @property
    def errors(self) -> int:
        return self._count(Outcome.ERROR)

    @property
    def failures(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.status == Outcome.ERROR]


@dataclass
class UploadSummary:
    """Totals across all batches of a run."""

    found: int = 0
    batches: List[BatchReport] = field(default_factory=list)

    @property
    def uploaded(self) -> int:
        return sum(b.uploaded for b in self.batches)

    @property
    def skipped(self) -> int:
        return sum(b.skipped for b in self.batches)

    @property
    def errors(self) -> int:
        return sum(b.errors for b in self.batches)


def collect_image_files(root: Path) -> List[ImageFile]:
    """
    Scan ``root`` for images and stat each one.

    Raises:
        ImagesFolderNotFoundError: If ``root`` is not an existing directory
    """
    root = Path(root)
    if not root.is_dir():
        raise ImagesFolderNotFoundError(f"Images folder not found: {root}")

    logger.info(f"Scanning folder: {root}")
    image_files = []
    for scanned in iter_files(root):
        if not is_image_file(scanned.filename):
            continue
        stats = scanned.full_path.stat()
        image_files.append(ImageFile(
            full_path=scanned.full_path,
            relative_path=scanned.relative_path,
            filename=scanned.filename,
            extension=get_extension(scanned.filename),
            size=stats.st_size,
            last_modified=datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc),
        ))

    logger.info(f"Found {len(image_files)} image files")
    return image_files


def build_image_document(image_file: ImageFile, data: bytes) -> ImageDocument:
    """Build the stored document for ``image_file`` from its raw bytes."""
    return ImageDocument(
        filename=image_file.filename,
        relative_path=image_file.relative_path,
        extension=image_file.extension,
        size=image_file.size,
        last_modified=image_file.last_modified,
        base64_data=base64.b64encode(data).decode("ascii"),
        mime_type=get_mime_type(image_file.extension),
        upload_date=now_utc(),
        tags=generate_tags(image_file.filename, image_file.relative_path),
    )


class ImageUploader:
    """Uploads image files into an image store, batch by batch."""

    def __init__(self, store: ImageStore, batch_size: int = DEFAULT_BATCH_SIZE):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.store = store
        self.batch_size = batch_size

    async def process_file(self, image_file: ImageFile) -> FileOutcome:
        """Read, encode and insert one file unless it is already stored."""
        try:
            data = await asyncio.to_thread(image_file.full_path.read_bytes)
            document = build_image_document(image_file, data)

            existing = await self.store.find_by_key(image_file.filename, image_file.relative_path)
            if existing is not None:
                logger.info(f"Skipping existing: {image_file.relative_path}")
                return FileOutcome(image_file.relative_path, Outcome.SKIPPED)

            await self.store.insert(document.to_document())
            logger.info(f"Uploaded: {image_file.relative_path}")
            return FileOutcome(image_file.relative_path, Outcome.UPLOADED)

        except Exception as e:
            logger.error(f"Error processing {image_file.filename}: {e}")
            return FileOutcome(image_file.relative_path, Outcome.ERROR, str(e))

    async def process_batch(self, batch: Sequence[ImageFile], number: int) -> BatchReport:
        """Process every file of ``batch`` concurrently and wait for all of them."""
        outcomes = await asyncio.gather(*(self.process_file(f) for f in batch))
        report = BatchReport(number=number, outcomes=list(outcomes))
        logger.info(
            f"Batch {number}: {report.uploaded} uploaded, "
            f"{report.skipped} skipped, {report.errors} errors"
        )
        return report

    async def run(self, image_files: Sequence[ImageFile]) -> UploadSummary:
        """
        Upload all files, then create the collection indexes.

        Raises:
            IndexCreationError: If the unique dedup index cannot be built
        """
        summary = UploadSummary(found=len(image_files))
        if not image_files:
            logger.warning("No image files found")
            return summary

        for start in range(0, len(image_files), self.batch_size):
            batch = image_files[start:start + self.batch_size]
            number = start // self.batch_size + 1
            summary.batches.append(await self.process_batch(batch, number))

        logger.info("Creating indexes...")
        await self.store.ensure_indexes()

        return summary
