#!/usr/bin/env python3
"""
Upload the local 90s image folder into MongoDB.

Every image below IMAGES_FOLDER is stored base64-encoded in the ``images``
collection. Images already present (same filename and relative path) are
skipped, so the script can be re-run safely.

Usage:
    python scripts/upload_images.py
"""

import asyncio
import sys
from pathlib import Path

from loguru import logger

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.utils.config import get_settings
from app.utils.mongo_client import MongoConnection
from app.utils.stores import Datastore, IndexCreationError
from domains.image_ingest.uploader import (
    ImageUploader,
    ImagesFolderNotFoundError,
    collect_image_files,
)


async def upload_images() -> int:
    """Run one ingestion pass. Returns the process exit code."""
    settings = get_settings()
    logger.info("Starting image upload to MongoDB...")

    connection = MongoConnection(uri=settings.get_ingest_mongodb_uri())

    try:
        await connection.connect()
        store = Datastore.from_database(connection.database).images

        image_files = collect_image_files(settings.get_images_folder())

        uploader = ImageUploader(store, batch_size=settings.upload_batch_size)
        summary = await uploader.run(image_files)
        if not image_files:
            return 0

        logger.success("Image upload completed!")
        logger.info(f"Total uploaded: {summary.uploaded}")
        logger.info(f"Total skipped: {summary.skipped}")
        logger.info(f"Total errors: {summary.errors}")
        logger.info(f"Total in database: {await store.count()}")

        logger.info("Sample images in database:")
        for image in await store.head(3):
            logger.info(f"  - {image['filename']} ({image['relativePath']}) - {', '.join(image.get('tags', []))}")

        return 0

    except ImagesFolderNotFoundError as e:
        logger.error(str(e))
        return 1

    except IndexCreationError as e:
        logger.error(f"Upload finished but indexes could not be created: {e}")
        return 1

    except Exception as e:
        logger.error(f"Error during upload: {e}")
        return 1

    finally:
        connection.close()
        logger.info("Disconnected from MongoDB")


def main():
    """Main entry point."""
    logger.remove()
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=get_settings().log_level
    )
    return asyncio.run(upload_images())


if __name__ == "__main__":
    sys.exit(main())
