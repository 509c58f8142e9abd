"""Shared fixtures: in-memory stand-ins for the MongoDB-backed stores."""

import random
import re
import sys
from pathlib import Path
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

# Add project root to path to allow absolute imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.main import create_app
from app.utils.helpers import page_to_skip
from app.utils.stores import IndexCreationError


def _new_id() -> str:
    return uuid4().hex[:24]


class FakeImageStore:
    """ImageStore with the same methods, backed by a list."""

    def __init__(self):
        self.docs = []
        self.indexes_created = False

    @staticmethod
    def _matches(doc, tag=None, search=None):
        if tag and tag.lower() not in doc.get("tags", []):
            return False
        if search and not re.search(re.escape(search), doc["filename"], re.IGNORECASE):
            return False
        return True

    async def find_by_key(self, filename, relative_path):
        for doc in self.docs:
            if doc["filename"] == filename and doc["relativePath"] == relative_path:
                return doc
        return None

    async def insert(self, document):
        doc = {**document, "_id": _new_id()}
        self.docs.append(doc)
        return doc["_id"]

    async def ensure_indexes(self):
        keys = [(d["filename"], d["relativePath"]) for d in self.docs]
        if len(keys) != len(set(keys)):
            raise IndexCreationError("duplicate key error")
        self.indexes_created = True

    async def list_images(self, tag=None, search=None, page=1, limit=20):
        matching = [d for d in self.docs if self._matches(d, tag, search)]
        matching.sort(key=lambda d: d["uploadDate"], reverse=True)
        skip = page_to_skip(page, limit)
        return matching[skip:skip + limit], len(matching)

    async def get(self, image_id):
        return next((d for d in self.docs if d["_id"] == image_id), None)

    async def sample(self, tag=None):
        matching = [d for d in self.docs if self._matches(d, tag)]
        return random.choice(matching) if matching else None

    async def stats(self):
        if not self.docs:
            return {"_id": None, "totalImages": 0, "totalSize": 0, "avgSize": 0, "topTags": []}
        counts = {}
        for doc in self.docs:
            for tag in doc.get("tags", []):
                counts[tag] = counts.get(tag, 0) + 1
        top = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:10]
        total_size = sum(d["size"] for d in self.docs)
        return {
            "_id": None,
            "totalImages": len(self.docs),
            "totalSize": total_size,
            "avgSize": total_size / len(self.docs),
            "topTags": [{"_id": tag, "count": count} for tag, count in top],
        }

    async def count(self):
        return len(self.docs)

    async def head(self, n=3):
        return self.docs[:n]


class FakeChatStore:
    """ChatStore with the same methods, backed by a list."""

    def __init__(self):
        self.messages = []

    async def list_messages(self):
        return sorted(self.messages, key=lambda m: m["timestamp"])

    async def count(self):
        return len(self.messages)

    async def insert(self, message):
        doc = {**message, "_id": _new_id()}
        self.messages.append(doc)
        return doc["_id"]


class BrokenStore:
    """Every call fails, as if the database went away mid-request."""

    def __getattr__(self, name):
        async def fail(*args, **kwargs):
            raise RuntimeError("connection reset")
        return fail


class FakeDatastore:
    def __init__(self, images=None, chat=None):
        self.images = images or FakeImageStore()
        self.chat = chat or FakeChatStore()


@pytest.fixture
def image_store():
    return FakeImageStore()


@pytest.fixture
def chat_store():
    return FakeChatStore()


@pytest.fixture
def datastore(image_store, chat_store):
    return FakeDatastore(images=image_store, chat=chat_store)


@pytest.fixture
def api_app(datastore):
    application = create_app()
    application.state.datastore = datastore
    return application


@pytest.fixture
def client(api_app):
    return TestClient(api_app)


@pytest.fixture
def offline_client():
    """Client for an app whose database never connected."""
    return TestClient(create_app())


@pytest.fixture
def broken_store():
    return BrokenStore()
