"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from soroban_error_triage.core.error_parsing import parse_error_message
from soroban_error_triage.core.error_service import (
    filter_entries,
    parse_error_file,
    parse_event_types,
    summarize,
)
from soroban_error_triage.core.host_error import parse_host_error
from soroban_error_triage.core.models import ParsedError
from soroban_error_triage.core.schemas import (
    ErrorSummaryModel,
    ParsedErrorModel,
    entry_to_dict,
    host_error_to_dict,
    summary_to_dict,
)

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    return min(limit, HARD_LIMIT)


def _render(
    parsed: ParsedError,
    *,
    types: Sequence[str] | None,
    contract: str | None,
    contains: str | None,
    failed_only: bool,
    limit: int | None,
) -> dict[str, Any]:
    """Apply filters and build the tool response."""
    entries = filter_entries(
        parsed.event_log,
        types=parse_event_types(types),
        contract=contract,
        contains=contains,
        failed_only=failed_only,
        limit=_resolve_limit(limit),
    )
    out: dict[str, Any] = {
        "main_error": parsed.main_error,
        "host_error": host_error_to_dict(parse_host_error(parsed.main_error)),
        "total": len(parsed.event_log),
        "count": len(entries),
        "event_log": [entry_to_dict(e) for e in entries],
    }
    # Validate against the published schema before handing it to the client.
    ParsedErrorModel.model_validate(out)
    return out


def parse_simulation_error_impl(
    *,
    message: str,
    types: Sequence[str] | None = None,
    contract: str | None = None,
    contains: str | None = None,
    failed_only: bool = False,
    limit: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `parse_simulation_error` MCP tool."""
    return _render(
        parse_error_message(message),
        types=types,
        contract=contract,
        contains=contains,
        failed_only=failed_only,
        limit=limit,
    )


async def parse_simulation_error_file_impl(
    *,
    path: str,
    types: Sequence[str] | None = None,
    contract: str | None = None,
    contains: str | None = None,
    failed_only: bool = False,
    limit: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `parse_simulation_error_file` MCP tool."""
    parsed = await parse_error_file(path)
    return _render(
        parsed,
        types=types,
        contract=contract,
        contains=contains,
        failed_only=failed_only,
        limit=limit,
    )


def summarize_simulation_error_impl(*, message: str) -> dict[str, Any]:
    """Implementation for the `summarize_simulation_error` MCP tool."""
    out = summary_to_dict(summarize(parse_error_message(message)))
    ErrorSummaryModel.model_validate(out)
    return out
