from __future__ import annotations

from pathlib import Path

import pytest

from soroban_error_triage.core.error_parsing import parse_error_message
from soroban_error_triage.core.error_service import (
    filter_entries,
    parse_error_file,
    parse_event_types,
    read_message,
    summarize,
)
from soroban_error_triage.core.models import EventType


@pytest.mark.asyncio
async def test_parse_error_file_plain(tmp_path: Path, simulation_error: str, write_message) -> None:
    path = tmp_path / "failure.log"
    write_message(path, simulation_error)

    parsed = await parse_error_file(path)

    assert parsed == parse_error_message(simulation_error)


@pytest.mark.asyncio
async def test_parse_error_file_gzip(tmp_path: Path, simulation_error: str, write_message) -> None:
    path = tmp_path / "failure.log.gz"
    write_message(path, simulation_error)

    parsed = await parse_error_file(path)

    assert len(parsed.event_log) == 13
    assert parsed.main_error.startswith("Transaction simulation failed")


@pytest.mark.asyncio
async def test_read_message_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await read_message(tmp_path / "missing.log")


@pytest.mark.asyncio
async def test_read_message_replaces_invalid_bytes(tmp_path: Path) -> None:
    path = tmp_path / "failure.log"
    path.write_bytes(b"bad \xff headline\n0: [Contract Event] topics:[a], data:1\n")

    text = await read_message(path)

    assert "�" in text
    assert len(parse_error_message(text).event_log) == 1


def test_filter_by_type(simulation_error: str) -> None:
    parsed = parse_error_message(simulation_error)
    out = filter_entries(parsed.event_log, types=[EventType.CONTRACT_EVENT])
    assert [e.index for e in out] == [7, 10]


def test_filter_empty_types_returns_nothing(simulation_error: str) -> None:
    parsed = parse_error_message(simulation_error)
    assert filter_entries(parsed.event_log, types=[]) == []


def test_filter_failed_only_and_contract(simulation_error: str) -> None:
    parsed = parse_error_message(simulation_error)
    out = filter_entries(parsed.event_log, failed_only=True, contract="TOKEN_XLM")
    assert [e.index for e in out] == [3, 4]


def test_filter_contains_topics_or_data(simulation_error: str) -> None:
    parsed = parse_error_message(simulation_error)
    assert [e.index for e in filter_entries(parsed.event_log, contains="twap")] == [8, 9]
    assert [e.index for e in filter_entries(parsed.event_log, contains="nonce: 3")] == [7, 12]


def test_filter_limit(simulation_error: str) -> None:
    parsed = parse_error_message(simulation_error)
    assert [e.index for e in filter_entries(parsed.event_log, limit=2)] == [0, 1]
    with pytest.raises(ValueError):
        filter_entries(parsed.event_log, limit=0)


def test_parse_event_types() -> None:
    assert parse_event_types(None) is None
    assert parse_event_types(["", "  "]) is None
    assert parse_event_types(["Contract Event", "failed_diagnostic_event", "DIAGNOSTIC-EVENT"]) == [
        EventType.CONTRACT_EVENT,
        EventType.FAILED_DIAGNOSTIC_EVENT,
        EventType.DIAGNOSTIC_EVENT,
    ]
    with pytest.raises(ValueError, match="Valid values"):
        parse_event_types(["nope"])


@pytest.mark.parametrize(
    "name, expected",
    [
        ("contract event", EventType.CONTRACT_EVENT),
        ("DIAGNOSTIC EVENT", EventType.DIAGNOSTIC_EVENT),
        ("failed contract event (not emitted)", EventType.FAILED_CONTRACT_EVENT),
        ("Failed Diagnostic Event (NOT EMITTED)", EventType.FAILED_DIAGNOSTIC_EVENT),
        ("  Failed Contract Event (not emitted)  ", EventType.FAILED_CONTRACT_EVENT),
    ],
)
def test_parse_event_types_label_any_case(name: str, expected: EventType) -> None:
    assert parse_event_types([name]) == [expected]


def test_summarize(simulation_error: str) -> None:
    summary = summarize(parse_error_message(simulation_error))

    assert summary.entry_count == 13
    assert summary.failed_count == 4
    assert summary.contract_event_count == 4
    assert summary.type_counts[EventType.DIAGNOSTIC_EVENT] == 7
    assert summary.type_counts[EventType.CONTRACT_EVENT] == 2
    assert summary.contracts == ("POOL_MANAGER", "POOL_XLM", "TOKEN_XLM", "ORACLE")
    assert summary.host_error is not None
    assert summary.host_error.type == "WasmVm"


def test_summarize_empty() -> None:
    summary = summarize(parse_error_message(""))
    assert summary.entry_count == 0
    assert summary.contracts == ()
    assert summary.host_error is None
    assert summary.contract_event_count == 0
    assert all(n == 0 for n in summary.type_counts.values())


def test_summary_type_counts_are_read_only(simulation_error: str) -> None:
    summary = summarize(parse_error_message(simulation_error))
    with pytest.raises(TypeError):
        summary.type_counts[EventType.CONTRACT_EVENT] = 99  # type: ignore[index]
    assert summary.type_counts[EventType.CONTRACT_EVENT] == 2
