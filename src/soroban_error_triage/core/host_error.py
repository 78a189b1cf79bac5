"""Host error extraction from simulation headlines."""

from __future__ import annotations

import re

from .models import HostError

_HOST_ERROR_RE = re.compile(r"Error\((?P<type>[A-Za-z_][A-Za-z0-9_]*),\s*(?P<code>#?[A-Za-z0-9_]+)\)")


def parse_host_error(main_error: str) -> HostError | None:
    """Return the first Error(<type>, <code>) pair in the headline, if any."""
    m = _HOST_ERROR_RE.search(main_error)
    if not m:
        return None

    code = m.group("code")
    contract_code: int | None = None
    if code.startswith("#") and code[1:].isdigit():
        contract_code = int(code[1:])
    return HostError(type=m.group("type"), code=code, contract_code=contract_code)
