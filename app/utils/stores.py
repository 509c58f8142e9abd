"""
Data-access objects for the image gallery and the chat log.

Handlers and the ingestion pipeline receive these objects explicitly
instead of reaching for a module-level database handle, so tests can
substitute in-memory stores with the same methods.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import OperationFailure

from app.utils.helpers import build_image_filter, page_to_skip

IMAGES_COLLECTION = "images"
CHAT_COLLECTION = "memory_chat"
TOP_TAGS_LIMIT = 10


class IndexCreationError(Exception):
    """Raised when the image indexes cannot be built, e.g. duplicate dedup keys."""


def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return ``doc`` with its ObjectId rendered as a string."""
    if doc is None:
        return None
    if isinstance(doc.get("_id"), ObjectId):
        doc = {**doc, "_id": str(doc["_id"])}
    return doc


class ImageStore:
    """Access to the ``images`` collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_by_key(self, filename: str, relative_path: str) -> Optional[Dict[str, Any]]:
        """Find the document for a dedup key, if any."""
        doc = await self.collection.find_one({"filename": filename, "relativePath": relative_path})
        return serialize_document(doc)

    async def insert(self, document: Dict[str, Any]) -> str:
        result = await self.collection.insert_one(dict(document))
        return str(result.inserted_id)

    async def ensure_indexes(self):
        """
        Create the gallery indexes.

        The unique compound index enforces the dedup key at the storage
        layer. Building it fails if duplicates were inserted before it existed.
        """
        try:
            await self.collection.create_index(
                [("filename", ASCENDING), ("relativePath", ASCENDING)], unique=True
            )
        except OperationFailure as e:
            raise IndexCreationError(f"Unique index on (filename, relativePath) failed: {e}") from e

        await self.collection.create_index([("tags", ASCENDING)])
        await self.collection.create_index([("uploadDate", ASCENDING)])

    async def list_images(
        self,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
    ) -> Tuple[List[Dict[str, Any]], int]:
        """Return one page of images, newest upload first, plus the filtered total."""
        query = build_image_filter(tag, search)
        cursor = (
            self.collection.find(query)
            .sort("uploadDate", DESCENDING)
            .skip(page_to_skip(page, limit))
            .limit(limit)
        )
        images = [serialize_document(doc) for doc in await cursor.to_list(length=None)]
        total = await self.collection.count_documents(query)
        return images, total

    async def get(self, image_id: str) -> Optional[Dict[str, Any]]:
        """Find an image by id. Malformed ids simply match nothing."""
        if not ObjectId.is_valid(image_id):
            return None
        doc = await self.collection.find_one({"_id": ObjectId(image_id)})
        return serialize_document(doc)

    async def sample(self, tag: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Pick one random image using the server-side $sample stage."""
        pipeline = [
            {"$match": build_image_filter(tag)},
            {"$sample": {"size": 1}},
        ]
        docs = await self.collection.aggregate(pipeline).to_list(length=None)
        return serialize_document(docs[0]) if docs else None

    async def stats(self) -> Dict[str, Any]:
        """Count, total and average size, and the ten most frequent tags."""
        totals = await self.collection.aggregate([
            {
                "$group": {
                    "_id": None,
                    "totalImages": {"$sum": 1},
                    "totalSize": {"$sum": "$size"},
                    "avgSize": {"$avg": "$size"},
                }
            }
        ]).to_list(length=None)

        top_tags = await self.collection.aggregate([
            {"$unwind": "$tags"},
            {"$group": {"_id": "$tags", "count": {"$sum": 1}}},
            {"$sort": {"count": -1}},
            {"$limit": TOP_TAGS_LIMIT},
        ]).to_list(length=None)

        summary = totals[0] if totals else {"_id": None, "totalImages": 0, "totalSize": 0, "avgSize": 0}
        return {**summary, "topTags": top_tags}

    async def count(self) -> int:
        return await self.collection.count_documents({})

    async def head(self, n: int = 3) -> List[Dict[str, Any]]:
        docs = await self.collection.find({}).limit(n).to_list(length=None)
        return [serialize_document(doc) for doc in docs]


class ChatStore:
    """Access to the ``memory_chat`` collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def list_messages(self) -> List[Dict[str, Any]]:
        docs = await self.collection.find({}).sort("timestamp", ASCENDING).to_list(length=None)
        return [serialize_document(doc) for doc in docs]

    async def count(self) -> int:
        return await self.collection.count_documents({})

    async def insert(self, message: Dict[str, Any]) -> str:
        result = await self.collection.insert_one(dict(message))
        return str(result.inserted_id)


@dataclass
class Datastore:
    """The stores the API depends on."""

    images: ImageStore
    chat: ChatStore

    @classmethod
    def from_database(cls, database: AsyncIOMotorDatabase) -> "Datastore":
        return cls(
            images=ImageStore(database[IMAGES_COLLECTION]),
            chat=ChatStore(database[CHAT_COLLECTION]),
        )
