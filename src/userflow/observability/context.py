"""
userflow.observability.context

Request-scoped logging context.

Responsibilities:
- Reuse the request id an outer caller already bound, or generate one.
- Bind request metadata into structlog contextvars for the duration of the call.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager

import structlog


@contextmanager
def request_scope(operation: str, *, request_id: str | None = None) -> Iterator[str]:
    """
    Nestable: on exit the previous values of `request_id` / `operation` are restored and
    any other keys bound by outer callers are left alone.
    """

    request_id = (
        request_id
        or structlog.contextvars.get_contextvars().get("request_id")
        or str(uuid.uuid4())
    )
    with structlog.contextvars.bound_contextvars(request_id=request_id, operation=operation):
        yield request_id


# --- Module Notes -----------------------------------------------------------
# Clearing all contextvars belongs only at the outermost boundary (a transport middleware);
# the controller and the demo runner sit inside that boundary.
