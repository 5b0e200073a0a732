from __future__ import annotations

from typing import Iterable

from sesdiff.lines import split_lines
from sesdiff.myers import Delete, Equal, Insert, Myers, Operation

INSERT_PREFIX = "+ "
DELETE_PREFIX = "- "


def format_compact(edits: Iterable[Operation]) -> str:
    out: list[str] = []

    for edit in edits:
        match edit:
            case Insert(text):
                out.append(INSERT_PREFIX + text + "\n")
            case Delete(text):
                out.append(DELETE_PREFIX + text + "\n")
            case Equal():
                pass

    return "".join(out)


def format_insertions(lines: Iterable[str]) -> str:
    return "".join(INSERT_PREFIX + line + "\n" for line in lines)


def compact_diff(
    before: str | None,
    after: str | None,
    strip_cr: bool = False,
    max_edits: int | None = None,
) -> str:
    a = split_lines(before, strip_cr)
    b = split_lines(after, strip_cr)
    return format_compact(Myers.diff(a, b, max_edits))
