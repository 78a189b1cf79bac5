"""Parser interfaces."""

from __future__ import annotations

from typing import Protocol

from ..models import EventLogEntry

EVENT_LOG_HEADER = "Event log (newest first):"


class EntryParser(Protocol):
    """Parser interface: return EventLogEntry if line matches, else None."""

    def parse(self, line: str) -> EventLogEntry | None:
        """Parse a stripped event log line into an entry if recognized."""
        ...
