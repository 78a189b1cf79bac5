"""JSON output models and converters."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .models import ErrorSummary, EventLogEntry, EventType, HostError, ParsedError


class EventLogEntryModel(BaseModel):
    index: int = Field(ge=0, description="Sequence number declared by the event log line.")
    type: EventType = Field(description="Event category label.")
    contract: str | None = Field(default=None, description="Contract id, null when absent.")
    topics: list[str] = Field(default_factory=list, description="Topics split on top-level commas.")
    data: str = Field(description="Raw event payload text.")


class HostErrorModel(BaseModel):
    type: str = Field(description="Host error type, e.g. WasmVm or Contract.")
    code: str = Field(description="Raw error code text.")
    contract_code: int | None = Field(default=None, description="Numeric code for Error(Contract, #n).")


class ParsedErrorModel(BaseModel):
    main_error: str = Field(description="First line of the message, verbatim.")
    host_error: HostErrorModel | None = Field(default=None, description="Error(<type>, <code>) from the headline.")
    total: int | None = Field(default=None, ge=0, description="Entries in the event log before filtering.")
    count: int | None = Field(default=None, ge=0, description="Entries returned after filtering.")
    event_log: list[EventLogEntryModel] = Field(default_factory=list)


class ErrorSummaryModel(BaseModel):
    main_error: str
    entry_count: int = Field(ge=0)
    failed_count: int = Field(ge=0)
    contract_event_count: int = Field(ge=0)
    type_counts: dict[str, int] = Field(default_factory=dict)
    contracts: list[str] = Field(default_factory=list)
    host_error: HostErrorModel | None = None


def entry_to_dict(entry: EventLogEntry) -> dict[str, Any]:
    """Convert an EventLogEntry into a JSON-serializable dict."""
    return {
        "index": entry.index,
        "type": entry.type.value,
        "contract": entry.contract,
        "topics": list(entry.topics),
        "data": entry.data,
    }


def parsed_error_to_dict(parsed: ParsedError) -> dict[str, Any]:
    """Convert a ParsedError into a JSON-serializable dict."""
    return {
        "main_error": parsed.main_error,
        "event_log": [entry_to_dict(e) for e in parsed.event_log],
    }


def host_error_to_dict(host_error: HostError | None) -> dict[str, Any] | None:
    if host_error is None:
        return None
    return {
        "type": host_error.type,
        "code": host_error.code,
        "contract_code": host_error.contract_code,
    }


def summary_to_dict(summary: ErrorSummary) -> dict[str, Any]:
    """Convert an ErrorSummary into a JSON-serializable dict."""
    return {
        "main_error": summary.main_error,
        "entry_count": summary.entry_count,
        "failed_count": summary.failed_count,
        "contract_event_count": summary.contract_event_count,
        "type_counts": {t.value: n for t, n in summary.type_counts.items()},
        "contracts": list(summary.contracts),
        "host_error": host_error_to_dict(summary.host_error),
    }
