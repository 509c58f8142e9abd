"""
Anonymous chat log endpoints.

Messages are append-only. Each poster gets a generated name of the form
``Anonymous<N>`` where N is one more than the number of stored messages;
concurrent posters may end up with the same name.
"""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from app.api.deps import get_chat_store
from app.models.schemas import ChatMessage, ChatRequest
from app.utils.helpers import now_utc
from app.utils.stores import ChatStore

router = APIRouter()


@router.get("")
async def get_messages(store: ChatStore = Depends(get_chat_store)):
    """All chat messages, oldest first."""
    try:
        messages = await store.list_messages()
    except Exception as e:
        logger.error(f"Error fetching chat messages: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch chat messages")

    return {"messages": messages}


@router.post("")
async def send_message(request: ChatRequest, store: ChatStore = Depends(get_chat_store)):
    """
    Append a message to the chat log.

    Returns the stored message together with the full, updated log.
    """
    text = (request.message or "").strip()
    if not text:
        raise HTTPException(status_code=400, detail="Message cannot be empty")

    try:
        total_messages = await store.count()
        timestamp = now_utc()
        new_message = ChatMessage(
            username=f"Anonymous{total_messages + 1}",
            text=text,
            timestamp=timestamp,
            created_at=timestamp,
        ).to_document()

        message_id = await store.insert(new_message)
        all_messages = await store.list_messages()
    except Exception as e:
        logger.error(f"Error sending chat message: {e}")
        raise HTTPException(status_code=500, detail="Failed to send message")

    logger.info(f"Chat message stored from {new_message['username']}")

    return {
        "success": True,
        "message": "Message sent successfully",
        "newMessage": {**new_message, "_id": message_id},
        "allMessages": all_messages,
    }
