"""
Pydantic models for the 90s America API.

Shared data models across the application and the ingestion scripts.
Stored documents use camelCase field names; the models expose them as
aliases so Python code stays snake_case.
"""

from datetime import datetime
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


# =====================================================
# Static Content Models
# =====================================================

class Movie(BaseModel):
    """90s movie."""
    title: str
    year: int
    genre: str


class Song(BaseModel):
    """90s hit song."""
    artist: str
    song: str
    year: int


class NinetiesData(BaseModel):
    """All static content."""
    movies: List[Movie]
    music: List[Song]
    trends: List[str]


class RandomPick(BaseModel):
    """One random movie, song and trend."""
    movie: Movie
    song: Song
    trend: str


# =====================================================
# Image Models
# =====================================================

class ImageDocument(BaseModel):
    """Image document as stored in the ``images`` collection."""
    model_config = ConfigDict(populate_by_name=True)

    filename: str
    relative_path: str = Field(alias="relativePath")
    extension: str
    size: int
    last_modified: datetime = Field(alias="lastModified")
    base64_data: str = Field(alias="base64Data")
    mime_type: str = Field(alias="mimeType")
    upload_date: datetime = Field(alias="uploadDate")
    tags: List[str] = []

    def to_document(self) -> Dict[str, Any]:
        """Serialize with the stored (camelCase) field names."""
        return self.model_dump(by_alias=True)


class Pagination(BaseModel):
    """Pagination block of the gallery listing."""
    page: int
    limit: int
    total: int
    pages: int


# =====================================================
# Chat Models
# =====================================================

class ChatRequest(BaseModel):
    """Incoming chat message."""
    message: Optional[str] = None


class ChatMessage(BaseModel):
    """Chat message as stored in the ``memory_chat`` collection."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    text: str
    timestamp: datetime
    created_at: datetime = Field(alias="createdAt")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
