"""
userflow.services.orchestrator

Request orchestrator (validation + coordination owner).

Responsibilities:
- Enforce presence checks on read and write requests.
- Coordinate the storage gateway lookup or insert.
- Shape the outbound `Result` and hand it to the output formatter.
"""

from __future__ import annotations

from userflow.domain.errors import ValidationError
from userflow.domain.models import ReadRequest, Record, Result, WriteRequest
from userflow.observability.logging import get_logger
from userflow.ports import OutputFormatter, StorageGateway

log = get_logger(__name__)


class Orchestrator:
    """
    Implements `RequestDispatch`.

    Stateless across calls: each handle_* call validates, touches storage once and
    presents once. On any failure nothing is presented and, for validation failures,
    storage is never reached.
    """

    def __init__(self, *, storage: StorageGateway, output: OutputFormatter) -> None:
        self._storage = storage
        self._output = output

    @property
    def storage(self) -> StorageGateway:
        return self._storage

    @property
    def output(self) -> OutputFormatter:
        return self._output

    def handle_read(self, request: ReadRequest) -> None:
        if not request.identifier:
            raise ValidationError("identifier")

        record = self._storage.fetch_by_identifier(request.identifier)

        self._output.present(Result.from_record(record))
        log.debug("read.presented", identifier=record.identifier)

    def handle_write(self, request: WriteRequest) -> None:
        # Check order is fixed so the reported field is deterministic.
        for name in ("identifier", "secret", "display_name"):
            if not getattr(request, name):
                raise ValidationError(name)

        record = Record(
            identifier=request.identifier,
            display_name=request.display_name,
            secret=request.secret,
        )
        # No existence check: duplicate identifiers are left to the gateway.
        self._storage.insert(record)

        self._output.present(Result.from_record(record))
        log.debug("write.presented", identifier=record.identifier)


# --- Module Notes -----------------------------------------------------------
# Errors from storage or the output formatter propagate untouched; reporting them is the
# entry point's job (see `userflow.__main__`).
