"""
userflow.ports

The abstractions each layer depends on instead of concrete types.

Responsibilities:
- Declare the storage gateway the orchestrator reads from and writes to.
- Declare the output formatter the orchestrator hands results to.
- Declare the dispatch contract the entry point calls the orchestrator through.
- Declare the generic keyed store a repository adapts into a gateway.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from userflow.domain.models import ReadRequest, Record, Result, WriteRequest

T = TypeVar("T")


@runtime_checkable
class StorageGateway(Protocol):
    def fetch_by_identifier(self, identifier: str) -> Record:
        """
        Return the record for `identifier` or raise `NotFoundError`.
        Repeated calls without an intervening insert return equivalent data.
        """
        ...

    def insert(self, record: Record) -> None:
        ...


@runtime_checkable
class OutputFormatter(Protocol):
    def present(self, result: Result) -> None:
        ...


@runtime_checkable
class RequestDispatch(Protocol):
    def handle_read(self, request: ReadRequest) -> None:
        ...

    def handle_write(self, request: WriteRequest) -> None:
        ...


class KeyedStore(Protocol[T]):
    def get(self, key: str) -> T:
        ...

    def create(self, item: T) -> None:
        ...


# --- Module Notes -----------------------------------------------------------
# One definition per abstraction: implementations and consumers both import from here,
# so the two sides of a boundary cannot drift apart.
