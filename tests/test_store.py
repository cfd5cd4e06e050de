"""
tests.test_store

In-memory store and record repository behavior.
"""

from __future__ import annotations

import pytest

from userflow.db.repositories.records import RecordRepo
from userflow.db.store import InMemoryStore
from userflow.domain.errors import NotFoundError
from userflow.domain.models import Record
from userflow.ports import StorageGateway


def test_get_returns_first_match_in_insertion_order() -> None:
    store: InMemoryStore[Record] = InMemoryStore()
    store.create(Record("1", "first", "a"))
    store.create(Record("2", "other", "b"))
    store.create(Record("1", "second", "c"))

    assert store.get("1").display_name == "first"
    assert [r.display_name for r in store] == ["first", "other", "second"]


def test_get_missing_raises_not_found() -> None:
    store: InMemoryStore[Record] = InMemoryStore()

    with pytest.raises(NotFoundError):
        store.get("nope")


def test_custom_key_extractor() -> None:
    store: InMemoryStore[dict] = InMemoryStore(key=lambda item: item["id"])
    store.create({"id": "x", "value": 1})

    assert store.get("x") == {"id": "x", "value": 1}


def test_repo_is_a_storage_gateway_and_is_deterministic() -> None:
    repo = RecordRepo(InMemoryStore())
    assert isinstance(repo, StorageGateway)

    repo.insert(Record("1", "alice", "s3cr3t"))

    assert repo.fetch_by_identifier("1") == repo.fetch_by_identifier("1")
    with pytest.raises(NotFoundError):
        repo.fetch_by_identifier("2")


def test_record_repr_hides_secret() -> None:
    assert "s3cr3t" not in repr(Record("1", "alice", "s3cr3t"))
