"""
Image Ingestion Domain

Loads a local folder of 90s images into the MongoDB ``images`` collection:
- scanner.py - Recursive directory walk with paths relative to the root
- tagging.py - Extension allow-list, MIME lookup and filename/path tags
- uploader.py - Batched, deduplicating upload of base64 documents
"""

__all__ = ["scanner", "tagging", "uploader"]
