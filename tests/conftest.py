from __future__ import annotations

import gzip
from collections.abc import Callable
from pathlib import Path

import pytest

SIMULATION_ERROR = "\n".join(
    [
        'Transaction simulation failed: "HostError: Error(WasmVm, InvalidAction)"',
        "",
        "Event log (newest first):",
        "   0: [Diagnostic Event] contract:POOL_MANAGER, topics:[error, Error(WasmVm, InvalidAction)], "
        'data:"escalating error to VM trap from failed host function call: call"',
        "   1: [Diagnostic Event] contract:POOL_MANAGER, topics:[error, Error(WasmVm, InvalidAction)], "
        'data:["contract call failed", repay, [BORROWER, 2368612289, 137939]]',
        "   2: [Failed Diagnostic Event (not emitted)] contract:POOL_XLM, topics:[error, Error(WasmVm, InvalidAction)], "
        'data:["VM call trapped: UnreachableCodeReached", repay]',
        "   3: [Failed Diagnostic Event (not emitted)] contract:TOKEN_XLM, topics:[fn_return, transfer], data:Void",
        "   4: [Failed Contract Event (not emitted)] contract:TOKEN_XLM, "
        'topics:[transfer, BORROWER, POOL_MANAGER, "native"], data:13793',
        '   5: [Failed Contract Event (not emitted)] contract:POOL_XLM, topics:[[Accrual], "updated"], data:10000260',
        "   6: [Diagnostic Event] contract:POOL_MANAGER, topics:[fn_call, POOL_XLM, repay], "
        "data:[BORROWER, 2368612289, 137939]",
        "   7: [Contract Event] contract:POOL_MANAGER, topics:[Loan, updated], "
        "data:[Loan, {borrower_address: BORROWER, nonce: 3}]",
        "   8: [Diagnostic Event] contract:ORACLE, topics:[fn_return, twap], data:40872325555966",
        "   9: [Diagnostic Event] contract:POOL_MANAGER, topics:[fn_call, ORACLE, twap], data:[[Other, XLM], 12]",
        '   10: [Contract Event] contract:POOL_XLM, topics:[[AccrualLastUpdate], "updated"], data:1755604270',
        "   11: [Diagnostic Event] contract:POOL_XLM, topics:[fn_return, get_currency], "
        "data:{ticker: XLM, token_address: TOKEN_XLM}",
        "   12: [Diagnostic Event] topics:[fn_call, POOL_MANAGER, repay], "
        "data:[{borrower_address: BORROWER, nonce: 3}, 2368612289]",
    ]
)


@pytest.fixture
def simulation_error() -> str:
    return SIMULATION_ERROR


@pytest.fixture
def write_message() -> Callable[[Path, str], None]:
    def _write(path: Path, text: str) -> None:
        if path.suffix == ".gz":
            with gzip.open(path, mode="wt", encoding="utf-8") as f:
                f.write(text)
            return
        path.write_text(text, encoding="utf-8")

    return _write
