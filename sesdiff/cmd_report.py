from __future__ import annotations

from sesdiff.cmd_base import Base
from sesdiff.report import DiffReport
from sesdiff.workspace import Workspace, collect_changes


class ReportCmd(Base):
    def run(self) -> None:
        options = self.load_options(jobs=True)

        if len(self.args) != 2:
            self.eprintln(
                "usage: sesdiff report [--strip-cr] [--max-edits <n>] [-j <n>] "
                "<before-dir> <after-dir>"
            )
            self.exit(129)

        try:
            changes, new_files = collect_changes(
                self.expanded_path(self.args[0]), self.expanded_path(self.args[1])
            )
        except Workspace.MissingDirectory as e:
            self.eprintln(f"error: {e}")
            self.exit(2)

        report = DiffReport(options).build(changes, new_files)
        self.write(report.text)

        for path in report.skipped:
            self.eprintln(f"warning: diff too large, skipped: {path}")

        self.exit(0)
