"""
userflow.__main__

Entrypoint for running the demo scenario via `python -m userflow`.

Responsibilities:
- Load settings and build the container.
- Drive a write and two reads through the controller.
- Report rejected requests; the inner layers never log errors themselves.
"""

from __future__ import annotations

import sys
from collections.abc import Callable

from userflow.bootstrap import Container, build_container
from userflow.domain.errors import UserflowError
from userflow.observability.context import request_scope
from userflow.observability.logging import get_logger
from userflow.settings import get_settings

log = get_logger(__name__)


def run_scenario(container: Container) -> int:
    steps: list[tuple[str, Callable[[], None]]] = [
        ("write", lambda: container.controller.write("1", "alice", "s3cr3t")),
        ("read", lambda: container.controller.read("1")),
        ("read", lambda: container.controller.read("2")),
    ]

    rejected = 0
    for operation, step in steps:
        # The controller reuses this request id, so outcome lines correlate with inner ones.
        with request_scope(operation):
            try:
                step()
            except UserflowError as e:
                rejected += 1
                log.warning(
                    "request.rejected",
                    error_type=type(e).__name__,
                    error=str(e),
                )
                continue
            log.info("request.completed", view=container.view_model.as_dict())

    return 1 if rejected else 0


def main() -> None:
    container = build_container(settings=get_settings())
    sys.exit(run_scenario(container))


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# The final read targets an identifier that was never written, so the scenario ends with
# one rejected request and exit code 1.
