"""Core data models for simulation error triage."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class EventType(str, Enum):
    """Event categories printed by the Soroban host in the event log."""

    DIAGNOSTIC_EVENT = "Diagnostic Event"
    FAILED_DIAGNOSTIC_EVENT = "Failed Diagnostic Event (not emitted)"
    FAILED_CONTRACT_EVENT = "Failed Contract Event (not emitted)"
    CONTRACT_EVENT = "Contract Event"

    @property
    def is_failed(self) -> bool:
        """True for events that were rolled back and never emitted."""
        return self in (EventType.FAILED_DIAGNOSTIC_EVENT, EventType.FAILED_CONTRACT_EVENT)

    @property
    def is_contract_event(self) -> bool:
        return self in (EventType.CONTRACT_EVENT, EventType.FAILED_CONTRACT_EVENT)


@dataclass(frozen=True, slots=True)
class EventLogEntry:
    """One line of the event log."""

    index: int
    type: EventType
    contract: str | None  # None when the line has no contract: field
    topics: tuple[str, ...]
    data: str  # opaque, never decoded


@dataclass(frozen=True, slots=True)
class ParsedError:
    """Headline plus the event log entries in input order."""

    main_error: str
    event_log: tuple[EventLogEntry, ...] = ()


@dataclass(frozen=True, slots=True)
class HostError:
    """The Error(<type>, <code>) pair found in a headline."""

    type: str
    code: str
    contract_code: int | None = None  # set for Error(Contract, #<n>)


@dataclass(frozen=True, slots=True)
class ErrorSummary:
    """Aggregate view over a parsed error."""

    main_error: str
    entry_count: int
    failed_count: int
    type_counts: Mapping[EventType, int]  # read-only view
    contract_event_count: int
    contracts: tuple[str, ...]  # first-seen order
    host_error: HostError | None = None
