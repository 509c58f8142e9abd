#!/usr/bin/env python3
"""
Check that the image folder is reachable before uploading.

Counts all files and image files below IMAGES_FOLDER and lists a few
entries from its top level.

Usage:
    python scripts/check_images_folder.py
"""

import sys
from pathlib import Path

from loguru import logger

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.utils.config import get_settings
from app.utils.helpers import format_bytes
from domains.image_ingest.scanner import count_files, sample_entries
from domains.image_ingest.tagging import is_image_file


def main():
    """Main check function."""
    logger.remove()
    logger.add(sys.stdout, format="<level>{message}</level>", level="INFO")

    folder = get_settings().get_images_folder()
    logger.info(f"Checking folder: {folder}")

    if not folder.is_dir():
        logger.error("Folder does not exist!")
        logger.info("Set IMAGES_FOLDER to the directory holding your images.")
        return 1

    logger.success("Folder exists!")

    counts = count_files(folder)
    logger.info(f"Total files: {counts.total_files}")
    logger.info(f"Image files: {counts.image_files}")
    if counts.unreadable_dirs:
        logger.warning(f"Unreadable directories: {counts.unreadable_dirs}")

    try:
        entries = sample_entries(folder)
    except OSError as e:
        logger.error(f"Error reading sample files: {e}")
        return 1

    logger.info("Sample files:")
    for entry in entries:
        if entry.is_file():
            kind = "image" if is_image_file(entry.name) else "file"
            logger.info(f"  - {entry.name} [{kind}] ({format_bytes(entry.stat().st_size)})")
        else:
            logger.info(f"  - {entry.name} [dir]")

    logger.info("Ready to run: python scripts/upload_images.py")
    return 0


if __name__ == "__main__":
    sys.exit(main())
