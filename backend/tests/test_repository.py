from datetime import timezone

import pytest

from formhole import config
from formhole.infra.factory import Factory, get_store
from formhole.repositories.submission_repository import SubmissionRepository
from formhole.schemas.submission import SubmissionCreate

from tests.conftest import at


def test_add_returns_unique_ids(repository):
    first = repository.add(SubmissionCreate(name="a", message="m", timestamp=at(1)))
    second = repository.add(SubmissionCreate(name="a", message="m", timestamp=at(1)))

    assert first and second
    assert first != second


def test_list_recent_orders_and_limits(repository):
    for hour in (3, 1, 4, 2):
        repository.add(SubmissionCreate(name=f"h{hour}", message="m", timestamp=at(hour)))

    recent = repository.list_recent(3)

    assert [s.name for s in recent] == ["h4", "h3", "h2"]


def test_timestamps_round_trip_as_utc(repository):
    repository.add(SubmissionCreate(name="a", message="m", timestamp=at(7, 30)))

    (stored,) = repository.list_recent(1)
    ts = stored.timestamp
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)

    assert ts == at(7, 30)


def test_list_recent_on_empty_store(repository):
    assert repository.list_recent(50) == []


def test_requires_url_or_engine():
    with pytest.raises(ValueError):
        SubmissionRepository()


def test_file_database(tmp_path):
    repo = SubmissionRepository(f"sqlite:///{tmp_path / 'submissions.db'}")
    repo.init_db()
    try:
        repo.add(SubmissionCreate(name="a", message="m", timestamp=at(1)))
        assert len(repo.list_recent(10)) == 1
    finally:
        repo.dispose()


def test_factory_reuses_one_store(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "DATABASE_URL", f"sqlite:///{tmp_path / 'factory.db'}")
    Factory.reset()
    try:
        store = get_store()

        assert isinstance(store, SubmissionRepository)
        assert get_store() is store
        assert Factory.get_store() is store
    finally:
        Factory.reset()
