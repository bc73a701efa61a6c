from datetime import datetime, timezone
from typing import List

import pytest
from fastapi.testclient import TestClient

from formhole import create_app
from formhole.infra.factory import Factory
from formhole.interfaces.store import ISubmissionStore
from formhole.repositories.submission_repository import SubmissionRepository
from formhole.schemas.submission import SubmissionCreate, SubmissionRecord

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


class CountingStore(ISubmissionStore):
    """In-memory store that records every call made to it."""

    def __init__(self):
        self.added: List[SubmissionCreate] = []
        self.calls = 0

    def init_db(self) -> None:
        pass

    def add(self, submission: SubmissionCreate) -> str:
        self.calls += 1
        self.added.append(submission)
        return str(len(self.added))

    def list_recent(self, limit: int) -> List[SubmissionRecord]:
        self.calls += 1
        records = [
            SubmissionRecord(id=str(i + 1), name=s.name, message=s.message, timestamp=s.timestamp)
            for i, s in enumerate(self.added)
        ]
        records.sort(key=lambda r: r.timestamp, reverse=True)
        return records[:limit]


class BrokenStore(ISubmissionStore):
    """Store whose backend is unreachable."""

    def init_db(self) -> None:
        pass

    def add(self, submission: SubmissionCreate) -> str:
        raise ConnectionError("database at 10.0.0.5 refused connection")

    def list_recent(self, limit: int) -> List[SubmissionRecord]:
        raise ConnectionError("database at 10.0.0.5 refused connection")


def make_client(store: ISubmissionStore) -> TestClient:
    Factory._store = store
    return TestClient(create_app())


@pytest.fixture
def repository():
    repo = SubmissionRepository("sqlite://")
    repo.init_db()
    yield repo
    repo.dispose()


@pytest.fixture
def client(repository):
    yield make_client(repository)
    Factory._store = None


@pytest.fixture
def counting_store():
    return CountingStore()


@pytest.fixture
def counting_client(counting_store):
    yield make_client(counting_store)
    Factory._store = None


@pytest.fixture
def broken_client():
    yield make_client(BrokenStore())
    Factory._store = None


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 10, 18, hour, minute, tzinfo=timezone.utc)
