"""
userflow.domain.models

Value types that flow through the pipeline.

Responsibilities:
- Define the stored entity (`Record`).
- Define the request payloads accepted by the orchestrator and the result it hands outward.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Record:
    """
    Stored user entity. The identifier is assigned by the caller, never generated.
    """

    identifier: str
    display_name: str
    secret: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class ReadRequest:
    identifier: str


@dataclass(frozen=True, slots=True)
class WriteRequest:
    identifier: str
    display_name: str
    secret: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class Result:
    """
    Outbound payload. Carries only public fields; the secret stops at the orchestrator.
    """

    identifier: str
    display_name: str

    @classmethod
    def from_record(cls, record: Record) -> Result:
        return cls(identifier=record.identifier, display_name=record.display_name)


# --- Module Notes -----------------------------------------------------------
# All payloads are frozen, so handing one to a collaborator never exposes mutable
# orchestrator state.
