"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from soroban_error_triage.core.error_service import read_message
from soroban_error_triage.core.schemas import ErrorSummaryModel, ParsedErrorModel

ALLOWED_FILE_SUFFIXES = {".log", ".txt"}
BASE_DIR_ENV = "SOROBAN_TRIAGE_BASE_DIR"

SAMPLE_SIMULATION_ERROR = (
    'Transaction simulation failed: "HostError: Error(WasmVm, InvalidAction)"\n'
    "\n"
    "Event log (newest first):\n"
    "   0: [Diagnostic Event] contract:CONTRACT_A, topics:[error, Error(WasmVm, InvalidAction)], "
    'data:"escalating error to VM trap from failed host function call: call"\n'
    "   1: [Failed Diagnostic Event (not emitted)] contract:CONTRACT_B, "
    'topics:[error, Error(WasmVm, InvalidAction)], data:["VM call trapped: UnreachableCodeReached", repay]\n'
    '   2: [Failed Contract Event (not emitted)] contract:CONTRACT_B, topics:[[Accrual], "updated"], data:10000260\n'
    "   3: [Contract Event] contract:CONTRACT_A, topics:[Loan, updated], "
    "data:[Loan, {borrower_address: ADDRESS, nonce: 3}]\n"
    "   4: [Diagnostic Event] topics:[fn_call, CONTRACT_A, repay], data:[{borrower_address: ADDRESS, nonce: 3}, 2368612289]\n"
)


def _base_dir() -> Path:
    """Return the resolved base directory for file resources."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def _safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = _base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _allowed_suffix(path: Path) -> str:
    """Return the effective suffix for allowlist checks."""
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = _safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    if _allowed_suffix(resolved) not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://soroban-error-triage/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        base = _base_dir()
        return (
            "Resources:\n"
            "- app://soroban-error-triage/help\n"
            "- app://soroban-error-triage/examples/simulation-error\n"
            "- app://soroban-error-triage/schemas/parsed-error\n"
            "- app://soroban-error-triage/schemas/error-summary\n"
            f"- file://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
            f"\nBase directory: {base}\n"
        )

    @mcp.resource("app://soroban-error-triage/examples/simulation-error")
    def sample_simulation_error() -> str:
        """Return a small simulation failure message for demos and tests."""
        return SAMPLE_SIMULATION_ERROR

    @mcp.resource("app://soroban-error-triage/schemas/parsed-error")
    def parsed_error_schema() -> dict[str, Any]:
        """Return the JSON schema for parsed errors."""
        return ParsedErrorModel.model_json_schema()

    @mcp.resource("app://soroban-error-triage/schemas/error-summary")
    def error_summary_schema() -> dict[str, Any]:
        """Return the JSON schema for error summaries."""
        return ErrorSummaryModel.model_json_schema()

    @mcp.resource("file://{path}")
    async def read_file(path: str) -> str:
        """Read a message file from within SOROBAN_TRIAGE_BASE_DIR."""
        return await read_message(resolve_resource_path(path))
