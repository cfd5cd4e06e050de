"""
userflow.bootstrap

Composition root.

Responsibilities:
- Configure logging once at process startup.
- Build concrete collaborators and inject them by constructor, inner layers first.
- Return the assembled graph so callers hold every piece explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass

from userflow.db.repositories.records import RecordRepo
from userflow.db.store import InMemoryStore
from userflow.domain.models import Record
from userflow.entrypoints.controller import Controller
from userflow.observability.logging import configure_logging, get_logger
from userflow.presentation.presenter import Presenter
from userflow.presentation.view_model import ViewModel
from userflow.services.orchestrator import Orchestrator
from userflow.settings import Settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Container:
    store: InMemoryStore[Record]
    repo: RecordRepo
    view_model: ViewModel
    presenter: Presenter
    orchestrator: Orchestrator
    controller: Controller


def build_container(*, settings: Settings) -> Container:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    store: InMemoryStore[Record] = InMemoryStore()
    repo = RecordRepo(store)
    view_model = ViewModel()
    presenter = Presenter(view_model)
    orchestrator = Orchestrator(storage=repo, output=presenter)
    controller = Controller(orchestrator)

    log.info("container.built", env=settings.env)
    return Container(
        store=store,
        repo=repo,
        view_model=view_model,
        presenter=presenter,
        orchestrator=orchestrator,
        controller=controller,
    )


# --- Module Notes -----------------------------------------------------------
# This is the only module that imports concrete classes from every layer; everything
# else depends on `userflow.ports`.
