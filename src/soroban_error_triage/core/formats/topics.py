"""Bracket-aware topic splitting."""

from __future__ import annotations


def split_topics(body: str) -> tuple[str, ...]:
    """Split a topics body on top-level commas.

    Only square brackets are tracked, so ``[Accrual], "updated"`` yields two
    topics while ``Error(WasmVm, InvalidAction)`` is split on its inner comma.
    """
    topics: list[str] = []
    current: list[str] = []
    depth = 0

    for ch in body:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1

        if ch == "," and depth == 0:
            topics.append("".join(current).strip())
            current = []
        else:
            current.append(ch)

    if current:
        topics.append("".join(current).strip())
    return tuple(topics)
