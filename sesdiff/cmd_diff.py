from __future__ import annotations

import logging
from pathlib import Path

from sesdiff.cmd_base import Base
from sesdiff.compact import compact_diff
from sesdiff.myers import DiffTooLarge

log = logging.getLogger(__name__)


class Diff(Base):
    def run(self) -> None:
        options = self.load_options()

        if len(self.args) != 2:
            self.eprintln("usage: sesdiff diff [--strip-cr] [--max-edits <n>] <old> <new>")
            self.exit(129)

        before = self.read_target(self.args[0])
        after = self.read_target(self.args[1])

        try:
            output = compact_diff(before, after, options.strip_cr, options.max_edits)
        except DiffTooLarge as e:
            self.eprintln(f"warning: {e}")
            self.exit(2)

        self.write(output)
        self.exit(1 if output else 0)

    def read_target(self, name: str) -> str | None:
        path: Path = self.expanded_path(name)

        if path.is_dir():
            self.eprintln(f"error: {name}: is a directory")
            self.exit(2)

        try:
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            log.debug("%s does not exist, diffing against nothing", path)
            return None
        except (PermissionError, UnicodeDecodeError) as e:
            self.eprintln(f"error: {name}: cannot read file: {e}")
            self.exit(2)
