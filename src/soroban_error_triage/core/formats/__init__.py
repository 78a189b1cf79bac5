"""Event log line formats.

Contains the parser for Soroban event log lines and the topic splitter it uses.
"""

from __future__ import annotations

from .base import EVENT_LOG_HEADER, EntryParser
from .event_line import EventLineParser
from .topics import split_topics

__all__ = [
    "EVENT_LOG_HEADER",
    "EntryParser",
    "EventLineParser",
    "split_topics",
]
