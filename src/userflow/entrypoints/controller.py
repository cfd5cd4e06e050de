"""
userflow.entrypoints.controller

Entry point that packs raw arguments into request payloads.

Responsibilities:
- Expose `read` / `write` triggers taking plain arguments.
- Forward payloads unchanged through the `RequestDispatch` port.
- Scope structured-log context to each request.
"""

from __future__ import annotations

from userflow.domain.models import ReadRequest, WriteRequest
from userflow.observability.context import request_scope
from userflow.ports import RequestDispatch


class Controller:
    """
    No validation happens here; business rules live only in the orchestrator.
    """

    def __init__(self, dispatch: RequestDispatch) -> None:
        self._dispatch = dispatch

    def read(self, identifier: str) -> None:
        with request_scope("read"):
            self._dispatch.handle_read(ReadRequest(identifier=identifier))

    def write(self, identifier: str, display_name: str, secret: str) -> None:
        with request_scope("write"):
            self._dispatch.handle_write(
                WriteRequest(identifier=identifier, display_name=display_name, secret=secret)
            )


# --- Module Notes -----------------------------------------------------------
# Transports (HTTP, CLI) would sit in front of this class and map UserflowError
# subclasses to their own status codes.
