"""
userflow.presentation.presenter

Output formatter that writes results into a `ViewModel`.

Responsibilities:
- Implement the `OutputFormatter` port.
- Copy result fields one by one into the caller-owned view model.
"""

from __future__ import annotations

from userflow.domain.models import Result
from userflow.presentation.view_model import ViewModel


class Presenter:
    def __init__(self, view_model: ViewModel) -> None:
        self._view_model = view_model

    @property
    def view_model(self) -> ViewModel:
        return self._view_model

    def present(self, result: Result) -> None:
        self._view_model.identifier = result.identifier
        self._view_model.display_name = result.display_name


# --- Module Notes -----------------------------------------------------------
# The view model's lifetime belongs to whoever built the presenter (the composition root).
