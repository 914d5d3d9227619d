"""
Shared fixtures: an in-memory stand-in for the Motor movie collection
"""
import os
import re

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/catalog_test")

from api.main import app, get_catalog_service  # noqa: E402
from api.services import CatalogService  # noqa: E402
from shared.repositories import MovieRepository  # noqa: E402


def _matches(document, query):
    for key, condition in query.items():
        value = document.get(key)
        if isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            if not isinstance(value, str) or not re.search(condition["$regex"], value, flags):
                return False
        elif isinstance(value, list):
            if condition not in value:
                return False
        elif value != condition:
            return False
    return True


class FakeCursor:
    def __init__(self, documents):
        self._documents = list(documents)
        self._skip = 0
        self._limit = 0

    def sort(self, key, direction):
        self._documents.sort(key=lambda doc: doc[key], reverse=direction < 0)
        return self

    def skip(self, count):
        self._skip = count
        return self

    def limit(self, count):
        self._limit = count
        return self

    async def to_list(self, length=None):
        documents = self._documents[self._skip:]
        if self._limit:
            documents = documents[:self._limit]
        return [dict(doc) for doc in documents]


class FakeCollection:
    def __init__(self, documents=None):
        self.documents = list(documents or [])
        self.fail = False
        self.queries = []

    def _check(self):
        if self.fail:
            raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    def find(self, query):
        self._check()
        self.queries.append(query)
        return FakeCursor(doc for doc in self.documents if _matches(doc, query))

    async def count_documents(self, query):
        self._check()
        return sum(1 for doc in self.documents if _matches(doc, query))

    async def find_one(self, query):
        self._check()
        for doc in self.documents:
            if _matches(doc, query):
                return dict(doc)
        return None


class FakeDatabase:
    def __init__(self, collection):
        self.collection = collection

    def get_collection(self):
        return self.collection


def make_movie(uid, title=None, categories=None, slug=None, **extra):
    movie = {
        "uid": uid,
        "title": title or f"Movie {uid}",
        "slug": slug or f"movie-{uid}",
        "categories": categories if categories is not None else ["bollywood-movies"],
    }
    movie.update(extra)
    return movie


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def repository(collection):
    return MovieRepository(FakeDatabase(collection))


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_catalog_service] = lambda: CatalogService(repository)
    yield TestClient(app)
    app.dependency_overrides.clear()
