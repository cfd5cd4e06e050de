"""
userflow.presentation.view_model

Display model populated by the presenter.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True)
class ViewModel:
    identifier: str | None = None
    display_name: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)
