"""
Helper utilities for the 90s America archive.

Common functions used by the API and the ingestion scripts.
"""

import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def now_utc() -> datetime:
    """Get current timestamp as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """Get current timestamp as ISO string."""
    return now_utc().isoformat()


def build_image_filter(tag: Optional[str] = None, search: Optional[str] = None) -> Dict[str, Any]:
    """
    Translate gallery query parameters into a MongoDB filter.

    Args:
        tag: Exact tag to match (case-folded before matching)
        search: Substring to look for in the filename, case-insensitive

    Returns:
        MongoDB filter document
    """
    query: Dict[str, Any] = {}

    if tag:
        query["tags"] = {"$in": [tag.lower()]}

    if search:
        query["filename"] = {"$regex": re.escape(search), "$options": "i"}

    return query


def page_to_skip(page: int, limit: int) -> int:
    """Number of documents to skip for a 1-based page."""
    return (page - 1) * limit


def page_count(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items ``limit`` at a time."""
    return math.ceil(total / limit)


def format_bytes(bytes_count: float) -> str:
    """Format bytes as human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if bytes_count < 1024.0:
            return f"{bytes_count:.1f} {unit}"
        bytes_count /= 1024.0
    return f"{bytes_count:.1f} PB"
