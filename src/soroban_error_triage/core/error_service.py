"""Loading, filtering and summarizing simulation errors.

This module is the main integration point that reads error messages from files
and returns parsed, filtered views of their event logs.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import Iterable, Sequence
from contextlib import asynccontextmanager
from pathlib import Path
from types import MappingProxyType

import aiofiles
from aiofiles.threadpool import wrap

from .error_parsing import parse_error_message
from .host_error import parse_host_error
from .models import ErrorSummary, EventLogEntry, EventType, ParsedError

logger = logging.getLogger(__name__)

_LABELS = {t.value.casefold(): t for t in EventType}


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a message file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
            yield f


async def read_message(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> str:
    """Read a whole error message from disk."""
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Message file not found: {p}")
    async with _open_text(p, encoding=encoding, decode_errors=decode_errors) as f:
        return await f.read()


async def parse_error_file(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> ParsedError:
    """Read and parse a simulation error message file."""
    message = await read_message(path, encoding=encoding, decode_errors=decode_errors)
    parsed = parse_error_message(message)
    logger.debug("Parsed %d event log entries from %s", len(parsed.event_log), path)
    return parsed


def parse_event_types(names: Sequence[str] | None) -> list[EventType] | None:
    """Parse user-supplied event type names into EventType enums.

    Accepts the printed label or the enum name, both in any case
    ("failed contract event (not emitted)", "contract_event", "CONTRACT-EVENT").
    """
    if not names:
        return None
    out: list[EventType] = []
    for s in names:
        name = s.strip()
        if not name:
            continue
        by_label = _LABELS.get(name.casefold())
        if by_label is not None:
            out.append(by_label)
            continue
        key = name.upper().replace("-", "_").replace(" ", "_")
        try:
            out.append(EventType[key])
        except KeyError as e:
            valid = ", ".join(t.name.lower() for t in EventType)
            raise ValueError(f"Unknown event type '{s}'. Valid values: {valid}.") from e
    return out or None


def filter_entries(
    entries: Iterable[EventLogEntry],
    *,
    types: Iterable[EventType] | None = None,
    contract: str | None = None,
    contains: str | None = None,
    failed_only: bool = False,
    limit: int | None = None,
) -> list[EventLogEntry]:
    """Return entries matching all given filters, in input order."""
    if limit is not None and limit <= 0:
        raise ValueError("limit must be > 0")

    allowed: set[EventType] | None = None
    if types is not None:
        allowed = set(types)
        if not allowed:
            return []

    out: list[EventLogEntry] = []
    for e in entries:
        if allowed is not None and e.type not in allowed:
            continue
        if failed_only and not e.type.is_failed:
            continue
        if contract is not None and e.contract != contract:
            continue
        if contains is not None and contains not in e.data and not any(contains in t for t in e.topics):
            continue
        out.append(e)
        if limit is not None and len(out) >= limit:
            break
    return out


def summarize(parsed: ParsedError) -> ErrorSummary:
    """Count entries per type and collect the contracts involved."""
    type_counts = {t: 0 for t in EventType}
    contracts: dict[str, None] = {}
    failed = 0
    contract_events = 0
    for e in parsed.event_log:
        type_counts[e.type] += 1
        if e.type.is_failed:
            failed += 1
        if e.type.is_contract_event:
            contract_events += 1
        if e.contract is not None:
            contracts.setdefault(e.contract, None)

    return ErrorSummary(
        main_error=parsed.main_error,
        entry_count=len(parsed.event_log),
        failed_count=failed,
        type_counts=MappingProxyType(type_counts),
        contract_event_count=contract_events,
        contracts=tuple(contracts),
        host_error=parse_host_error(parsed.main_error),
    )
