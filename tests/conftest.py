"""
tests.conftest

Shared fixtures: spy collaborators that record every port call.
"""

from __future__ import annotations

from typing import Any

import pytest

from userflow.db.repositories.records import RecordRepo
from userflow.db.store import InMemoryStore
from userflow.domain.errors import ConflictError
from userflow.domain.models import Record, Result
from userflow.services.orchestrator import Orchestrator


class SpyGateway:
    """
    Wraps a real repository and records calls so tests can assert on call counts.
    """

    def __init__(self) -> None:
        self.store: InMemoryStore[Record] = InMemoryStore()
        self._repo = RecordRepo(self.store)
        self.calls: list[tuple[str, Any]] = []

    def fetch_by_identifier(self, identifier: str) -> Record:
        self.calls.append(("fetch", identifier))
        return self._repo.fetch_by_identifier(identifier)

    def insert(self, record: Record) -> None:
        self.calls.append(("insert", record))
        self._repo.insert(record)


class StrictGateway(SpyGateway):
    """
    Gateway that enforces unique identifiers the way a production store would.
    """

    def insert(self, record: Record) -> None:
        self.calls.append(("insert", record))
        if any(r.identifier == record.identifier for r in self.store):
            raise ConflictError(record.identifier)
        self.store.create(record)


class SpyFormatter:
    def __init__(self) -> None:
        self.presented: list[Result] = []

    def present(self, result: Result) -> None:
        self.presented.append(result)


@pytest.fixture
def gateway() -> SpyGateway:
    return SpyGateway()


@pytest.fixture
def formatter() -> SpyFormatter:
    return SpyFormatter()


@pytest.fixture
def orchestrator(gateway: SpyGateway, formatter: SpyFormatter) -> Orchestrator:
    return Orchestrator(storage=gateway, output=formatter)


@pytest.fixture
def strict_gateway() -> StrictGateway:
    return StrictGateway()
