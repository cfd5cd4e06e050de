"""
userflow.db.repositories.records

Repository for `Record` entities.

Responsibilities:
- Implement the `StorageGateway` port over any `KeyedStore[Record]`.
"""

from __future__ import annotations

from userflow.domain.models import Record
from userflow.observability.logging import get_logger
from userflow.ports import KeyedStore

log = get_logger(__name__)


class RecordRepo:
    def __init__(self, store: KeyedStore[Record]) -> None:
        self._store = store

    def fetch_by_identifier(self, identifier: str) -> Record:
        # NotFoundError from the store propagates unchanged.
        record = self._store.get(identifier)
        log.debug("record.fetched", identifier=identifier)
        return record

    def insert(self, record: Record) -> None:
        self._store.create(record)
        log.debug("record.inserted", identifier=record.identifier)


# --- Module Notes -----------------------------------------------------------
# Swapping storage technology means providing another KeyedStore (or another gateway);
# the orchestrator never sees the change.
