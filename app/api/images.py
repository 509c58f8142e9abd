"""
Image gallery endpoints.

Query parameters are translated directly into MongoDB filters:
- tag: exact, case-folded membership in the image's tags
- search: case-insensitive substring of the filename
- page/limit: skip/limit pagination, newest upload first
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from app.api.deps import get_image_store
from app.models.schemas import Pagination
from app.utils.helpers import page_count
from app.utils.stores import ImageStore

router = APIRouter()


@router.get("")
async def list_images(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1),
    tag: Optional[str] = None,
    search: Optional[str] = None,
    store: ImageStore = Depends(get_image_store),
):
    """List images with pagination and optional tag/filename filters."""
    try:
        images, total = await store.list_images(tag=tag, search=search, page=page, limit=limit)
    except Exception as e:
        logger.error(f"Error fetching images: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch images")

    return {
        "images": images,
        "pagination": Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=page_count(total, limit),
        ),
    }


# Registered before /{image_id} so these paths are not taken as ids.
@router.get("/random")
async def random_image(tag: Optional[str] = None, store: ImageStore = Depends(get_image_store)):
    """One random image, optionally restricted to a tag."""
    try:
        image = await store.sample(tag)
    except Exception as e:
        logger.error(f"Error fetching random image: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch random image")

    if image is None:
        raise HTTPException(status_code=404, detail="No images found")
    return image


@router.get("/stats")
async def image_stats(store: ImageStore = Depends(get_image_store)):
    """Count, size totals and the top ten tags."""
    try:
        return await store.stats()
    except Exception as e:
        logger.error(f"Error fetching image stats: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch image stats")


@router.get("/{image_id}")
async def get_image(image_id: str, store: ImageStore = Depends(get_image_store)):
    """A single image including its base64 payload."""
    try:
        image = await store.get(image_id)
    except Exception as e:
        logger.error(f"Error fetching image {image_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch image")

    if image is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return image
