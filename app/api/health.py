"""
Health check endpoint.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from datetime import datetime

from app.api.deps import get_datastore
from app.utils.config import get_settings
from app.utils.helpers import now_utc
from app.utils.stores import Datastore

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: datetime
    mongodb: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check(datastore: Optional[Datastore] = Depends(get_datastore)):
    """
    Health check endpoint.

    The service is up whenever it answers; ``mongodb`` tells whether the
    image gallery and chat are available.
    """
    settings = get_settings()

    return HealthResponse(
        status="OK",
        timestamp=now_utc(),
        mongodb="connected" if datastore is not None else "disconnected",
        version=settings.api_version
    )
