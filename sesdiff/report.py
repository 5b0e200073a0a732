from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from sesdiff.compact import compact_diff, format_insertions
from sesdiff.lines import split_lines
from sesdiff.myers import DiffTooLarge
from sesdiff.options import DiffOptions

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangedFile:
    path: str
    before: str | None
    after: str | None


@dataclass(frozen=True)
class NewFile:
    path: str
    text: str | None


@dataclass
class Report:
    text: str = ""
    skipped: list[str] = field(default_factory=list)


def header(path: str) -> str:
    return f"=== {path} ===\n"


class DiffReport:
    """
    Concatenates compact diffs of many files into one report.

    Every file that changed contributes a block made of a header line, its
    compact diff and a blank line. Blocks follow input order whether or not
    the diffs run in parallel.
    """

    def __init__(self, options: DiffOptions | None = None) -> None:
        self.options: DiffOptions = options or DiffOptions()

    def build(
        self,
        changes: Sequence[ChangedFile],
        new_files: Iterable[NewFile] = (),
    ) -> Report:
        report = Report()
        blocks: list[str] = []

        for change, body in zip(changes, self._diff_all(changes)):
            if body is None:
                log.warning("diff too large, skipped: %s", change.path)
                report.skipped.append(change.path)
            elif body:
                blocks.append(header(change.path) + body + "\n")

        for new_file in new_files:
            lines = split_lines(new_file.text, self.options.strip_cr)
            if lines:
                blocks.append(header(new_file.path) + format_insertions(lines) + "\n")

        report.text = "".join(blocks)
        log.debug(
            "report: %d changed, %d blocks, %d skipped",
            len(changes),
            len(blocks),
            len(report.skipped),
        )
        return report

    def _diff_all(self, changes: Sequence[ChangedFile]) -> list[str | None]:
        if self.options.jobs > 1 and len(changes) > 1:
            with ThreadPoolExecutor(max_workers=self.options.jobs) as pool:
                return list(pool.map(self._diff_one, changes))
        return [self._diff_one(change) for change in changes]

    def _diff_one(self, change: ChangedFile) -> str | None:
        try:
            return compact_diff(
                change.before,
                change.after,
                self.options.strip_cr,
                self.options.max_edits,
            )
        except DiffTooLarge:
            return None
