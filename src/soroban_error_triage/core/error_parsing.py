"""Simulation error message parsing.

Turns the text attached to a failed transaction simulation into a headline and
the structured event log that follows it.
"""

from __future__ import annotations

from .formats import EVENT_LOG_HEADER, EntryParser, EventLineParser
from .models import EventLogEntry, ParsedError


def default_parser() -> EntryParser:
    """Default event log line parser."""
    return EventLineParser()


def parse_error_message(message: str, *, parser: EntryParser | None = None) -> ParsedError:
    """Parse a simulation error message.

    The first line is the headline, kept verbatim. Remaining lines that match
    the event log grammar become entries in input order; anything else is
    skipped. Never raises for string input.
    """
    parser = parser or default_parser()
    lines = message.split("\n")
    main_error = lines[0]

    event_log: list[EventLogEntry] = []
    pending: EventLogEntry | None = None

    for raw in lines[1:]:
        line = raw.strip()
        if not line or line == EVENT_LOG_HEADER:
            continue

        entry = parser.parse(line)
        if entry is None:
            continue

        # A new match commits the previous one.
        if pending is not None:
            event_log.append(pending)
        pending = entry

    if pending is not None:
        event_log.append(pending)

    return ParsedError(main_error=main_error, event_log=tuple(event_log))
