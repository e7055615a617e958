# tests/conftest.py
import copy

import pytest

from phraipets.services import pet_service

# 2024-05-01 12:00:00 UTC, far enough from midnight for any local timezone offset
# below 12 hours to keep the same date key.
NOW = 1714564800000
HOUR_MS = 60 * 60 * 1000


class FakeCollection:
    """The slice of a motor collection the service uses, kept in memory."""

    def __init__(self):
        self.documents = {}
        self.writes = 0

    async def find_one(self, filter):
        document = self.documents.get(filter["id"])
        return copy.deepcopy(document) if document is not None else None

    async def update_one(self, filter, update, upsert=False):
        self.writes += 1
        document = self.documents.get(filter["id"])
        if document is None:
            if not upsert:
                return
            document = {"_id": f"oid-{filter['id']}", "id": filter["id"]}
            self.documents[filter["id"]] = document
        document.update(copy.deepcopy(update["$set"]))


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def fake_db(monkeypatch):
    db = FakeDatabase()
    monkeypatch.setattr(pet_service, "get_database", lambda: db)
    return db


@pytest.fixture
def pets(fake_db):
    return fake_db["pets"]


@pytest.fixture
def frozen_now(monkeypatch):
    monkeypatch.setattr(pet_service, "current_time_ms", lambda: NOW)
    return NOW
