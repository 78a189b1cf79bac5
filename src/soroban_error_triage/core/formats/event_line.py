"""Soroban event log line parser."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import EventLogEntry, EventType
from .topics import split_topics


@dataclass(frozen=True, slots=True)
class EventLineParser:
    """Parse '<n>: [<label>] contract:<id>, topics:[...], data:<rest>' lines."""

    _re = re.compile(
        r"^\s*(?P<index>[0-9]+)\s*:\s*\[(?P<label>[^\]]+)\]\s*"
        r"(?:contract:(?P<contract>[^\s,]+),\s*)?"
        r"topics:\[(?P<topics>.+?)\],\s*data:(?P<data>.+)$"
    )

    def parse(self, line: str) -> EventLogEntry | None:
        """Parse an event log line into an EventLogEntry."""
        m = self._re.match(line)
        if not m:
            return None

        try:
            event_type = EventType(m.group("label"))
        except ValueError:
            return None

        return EventLogEntry(
            index=int(m.group("index")),
            type=event_type,
            contract=m.group("contract"),
            topics=split_topics(m.group("topics")),
            data=m.group("data").strip(),
        )
