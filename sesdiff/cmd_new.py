from __future__ import annotations

from pathlib import Path

from sesdiff.cmd_base import Base
from sesdiff.report import DiffReport, NewFile
from sesdiff.workspace import Workspace


class New(Base):
    def run(self) -> None:
        options = self.load_options()

        if not self.args:
            self.eprintln("usage: sesdiff new [--strip-cr] <file>...")
            self.exit(129)

        workspace = Workspace(self.dir)
        new_files: list[NewFile] = []

        for name in self.args:
            text = workspace.read_file(Path(name))
            if text is None:
                self.eprintln(f"warning: {name}: cannot read file, skipped")
            new_files.append(NewFile(name, text))

        self.write(DiffReport(options).build([], new_files).text)
        self.exit(0)
