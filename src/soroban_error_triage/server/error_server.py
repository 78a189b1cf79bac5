"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (e.g., parse a simulation error message)
- Resources: addressable data blobs (e.g., a sample message, JSON schemas)
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m soroban_error_triage.server.error_server
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from soroban_error_triage.prompts.registry import register_prompts
from soroban_error_triage.resources.registry import register_resources, resolve_resource_path
from soroban_error_triage.tools.parse import (
    parse_simulation_error_file_impl,
    parse_simulation_error_impl,
    summarize_simulation_error_impl,
)

LOGGER = logging.getLogger(__name__)
LOG_LEVEL_ENV = "SOROBAN_TRIAGE_LOG_LEVEL"


def configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("soroban-error-triage", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
def parse_simulation_error(
    message: str,
    types: Sequence[str] | None = None,
    contract: str | None = None,
    contains: str | None = None,
    failed_only: bool = False,
    limit: int | None = None,
) -> dict[str, Any]:
    """Parse a failed transaction simulation message into structured events.

    Parameters
    ----------
    message:
        The full error text, headline first, event log after.
    types:
        Keep only these event types (e.g., ["contract_event", "Diagnostic Event"]).
    contract:
        Keep only events emitted by this contract id.
    contains:
        Substring filter applied to topics and data.
    failed_only:
        Keep only events that were not emitted because the call failed.
    limit:
        Maximum number of entries returned (hard-capped in the implementation).

    Returns
    -------
    dict:
        {"main_error": str, "host_error": dict | None, "total": int,
         "count": int, "event_log": list[dict]}
    """
    return parse_simulation_error_impl(
        message=message,
        types=types,
        contract=contract,
        contains=contains,
        failed_only=failed_only,
        limit=limit,
    )


@mcp.tool()
async def parse_simulation_error_file(
    path: str,
    types: Sequence[str] | None = None,
    contract: str | None = None,
    contains: str | None = None,
    failed_only: bool = False,
    limit: int | None = None,
) -> dict[str, Any]:
    """Parse a simulation error message saved to a file (.log/.txt, optionally .gz).

    The path is resolved under SOROBAN_TRIAGE_BASE_DIR. Filters behave as in
    parse_simulation_error.
    """
    resolved = resolve_resource_path(path)
    LOGGER.info("Parsing simulation error file %s", resolved)
    return await parse_simulation_error_file_impl(
        path=str(resolved),
        types=types,
        contract=contract,
        contains=contains,
        failed_only=failed_only,
        limit=limit,
    )


@mcp.tool()
def summarize_simulation_error(message: str) -> dict[str, Any]:
    """Summarize a simulation error: host error, per-type counts and contracts involved."""
    return summarize_simulation_error_impl(message=message)


def main() -> None:
    """Start the MCP server over stdio."""
    configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
