"""Image filtering, MIME types and tag generation for ingested images."""

from pathlib import PurePath, PurePosixPath
from typing import List

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
}

# (substrings searched in the filename, tag added on a match)
KEYWORD_TAGS = (
    (("movie", "film"), "movie"),
    (("music", "song"), "music"),
    (("fashion", "style"), "fashion"),
    (("toy", "game"), "toy"),
    (("car", "vehicle"), "vehicle"),
)


def get_extension(filename: str) -> str:
    """Lowercased, dot-prefixed extension, or an empty string."""
    return PurePath(filename).suffix.lower()


def is_image_file(filename: str) -> bool:
    return get_extension(filename) in IMAGE_EXTENSIONS


def get_mime_type(extension: str) -> str:
    return MIME_TYPES.get(extension.lower(), DEFAULT_MIME_TYPE)


def generate_tags(filename: str, relative_path: str) -> List[str]:
    """
    Derive tags from an image's name and location.

    Tags are the filename without extension, every folder on the relative
    path, and keyword tags for a fixed vocabulary of filename substrings.
    All lowercase and deduplicated; the order carries no meaning.

    Args:
        filename: Base name of the file
        relative_path: Path below the scan root, including the filename

    Returns:
        List of unique tags
    """
    tags = [PurePath(filename).stem.lower()]

    for part in PurePosixPath(relative_path).parts:
        if part and part != filename:
            tags.append(part.lower())

    filename_lower = filename.lower()
    for keywords, tag in KEYWORD_TAGS:
        if any(keyword in filename_lower for keyword in keywords):
            tags.append(tag)

    return list(dict.fromkeys(tags))
