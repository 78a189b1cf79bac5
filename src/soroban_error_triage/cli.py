from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence

from soroban_error_triage.core.error_parsing import parse_error_message
from soroban_error_triage.core.error_service import (
    filter_entries,
    parse_error_file,
    parse_event_types,
    summarize,
)
from soroban_error_triage.core.models import EventType, ParsedError
from soroban_error_triage.core.schemas import parsed_error_to_dict, summary_to_dict


def _parse_types(s: str) -> list[EventType]:
    try:
        out = parse_event_types(s.split(","))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    if not out:
        raise argparse.ArgumentTypeError("At least one event type must be provided")
    return out


def _positive_int(s: str) -> int:
    value = int(s)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="soroban-error-triage",
        description="Parse failed Soroban transaction simulation messages.",
    )
    p.add_argument("message_path", nargs="?", default="-", help="Message file (.gz ok) or '-' for stdin")
    p.add_argument(
        "--types",
        type=_parse_types,
        default=None,
        help="Comma-separated event types (e.g., contract_event,failed_diagnostic_event)",
    )
    p.add_argument("--contract", default=None, help="Only events from this contract id")
    p.add_argument("--contains", default=None, help="Substring filter on topics and data")
    p.add_argument("--failed-only", action="store_true", help="Only events that were not emitted")
    p.add_argument("--limit", type=_positive_int, default=None, help="Max entries to print (default: no cap)")
    p.add_argument("--json", dest="as_json", action="store_true", help="Print JSON instead of text")
    p.add_argument("--summary", action="store_true", help="Print a summary instead of entries")
    p.add_argument("--serve", action="store_true", help="Run the MCP server over stdio")
    return p


def _load(path: str) -> ParsedError:
    if path == "-":
        return parse_error_message(sys.stdin.read())
    return asyncio.run(parse_error_file(path))


def _print_summary(parsed: ParsedError, *, as_json: bool) -> None:
    summary = summarize(parsed)
    if as_json:
        print(json.dumps(summary_to_dict(summary), indent=2))
        return

    print(summary.main_error)
    if summary.host_error is not None:
        print(f"host error: {summary.host_error.type} {summary.host_error.code}")
    print(
        f"entries: {summary.entry_count} "
        f"(failed: {summary.failed_count}, contract events: {summary.contract_event_count})"
    )
    for t, n in summary.type_counts.items():
        if n:
            print(f"  {t.value}: {n}")
    if summary.contracts:
        print("contracts: " + ", ".join(summary.contracts))


def main(argv: Sequence[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    if args.serve:
        from soroban_error_triage.server.error_server import main as serve

        serve()
        return

    try:
        parsed = _load(args.message_path)
        if args.summary:
            _print_summary(parsed, as_json=args.as_json)
            return
        entries = filter_entries(
            parsed.event_log,
            types=args.types,
            contract=args.contract,
            contains=args.contains,
            failed_only=args.failed_only,
            limit=args.limit,
        )
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except (OSError, EOFError) as e:
        print(f"Error: cannot read {args.message_path}: {e}", file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    if args.as_json:
        out = parsed_error_to_dict(ParsedError(main_error=parsed.main_error, event_log=tuple(entries)))
        print(json.dumps(out, indent=2))
        return

    print(parsed.main_error)
    for e in entries:
        contract = e.contract or "-"
        print(f"{e.index}: [{e.type.value}] {contract} topics=[{', '.join(e.topics)}] data={e.data}")

    print(f"\nFound {len(entries)} matching entries.")


if __name__ == "__main__":
    main()
