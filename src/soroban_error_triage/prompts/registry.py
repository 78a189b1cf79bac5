"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def explain_simulation_failure(message: str) -> list[dict[str, Any]]:
        """Build a prompt that explains a failed transaction simulation."""
        return [
            {
                "role": "system",
                "content": (
                    "You are a Soroban smart-contract debugging assistant. "
                    "Explain simulation failures from the event log only. "
                    "Do not invent details; if the evidence is insufficient, say so."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Explain why this transaction simulation failed. Follow this workflow:\n"
                    "- Call summarize_simulation_error first with the message below.\n"
                    "- Then call parse_simulation_error with failed_only=true to list "
                    "the events that were rolled back.\n"
                    "- The event log is printed newest first: the lowest index is the "
                    "last thing that happened.\n"
                    "- Quote entries by index, e.g. [#2] Failed Diagnostic Event ...\n\n"
                    "Return this structure:\n"
                    "1) What failed (1-2 sentences, name the host error)\n"
                    "2) Call chain (fn_call/fn_return entries, oldest first)\n"
                    "3) Evidence (2-5 quoted entries)\n"
                    "4) Next actions (2-4 bullets)\n\n"
                    f"Message:\n{message}\n"
                ),
            },
        ]

    @mcp.prompt()
    def triage_simulation_error_file(path: str) -> list[dict[str, Any]]:
        """Build a prompt that triages a saved simulation error file."""
        return [
            {
                "role": "system",
                "content": (
                    "You are a Soroban smart-contract debugging assistant. "
                    "Provide concise, evidence-based summaries from event logs."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Call parse_simulation_error_file with:\n"
                    f"- path: {path}\n\n"
                    "Report the host error, the contracts involved and the failed "
                    "events. If the event log is empty, say so and show the headline.\n"
                ),
            },
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "Optional: the raw message is available via:"},
                    {"type": "resource", "uri": f"file://{path}"},
                ],
            },
        ]
