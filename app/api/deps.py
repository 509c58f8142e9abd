"""
Request dependencies that hand the stores to route handlers.

The datastore lives on ``app.state`` and is ``None`` when MongoDB is not
configured or unreachable; image and chat handlers then answer 503.
"""

from typing import Optional

from fastapi import HTTPException, Request

from app.utils.stores import ChatStore, Datastore, ImageStore


def get_datastore(request: Request) -> Optional[Datastore]:
    return getattr(request.app.state, "datastore", None)


def get_image_store(request: Request) -> ImageStore:
    datastore = get_datastore(request)
    if datastore is None:
        raise HTTPException(status_code=503, detail="Image features are disabled (database unavailable)")
    return datastore.images


def get_chat_store(request: Request) -> ChatStore:
    datastore = get_datastore(request)
    if datastore is None:
        raise HTTPException(status_code=503, detail="Chat is disabled (database unavailable)")
    return datastore.chat
