from __future__ import annotations

from pathlib import Path
from typing import (
    MutableMapping,
    TextIO,
    Type,
)

from sesdiff.cmd_base import Base
from sesdiff.cmd_diff import Diff
from sesdiff.cmd_new import New
from sesdiff.cmd_report import ReportCmd
from sesdiff.setup_logging import setup_logging


class Command:
    class Unknown(Exception):
        pass

    COMMANDS: dict[str, Type[Base]] = {
        "diff": Diff,
        "report": ReportCmd,
        "new": New,
    }

    @staticmethod
    def execute(
        _dir: Path,
        env: MutableMapping[str, str],
        argv: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ) -> Base:
        name = argv[1]
        args = argv[2:]

        if name not in Command.COMMANDS:
            raise Command.Unknown(f"{name} is not a sesdiff command")

        cmd_class = Command.COMMANDS[name]
        cmd: Base = cmd_class(_dir, env, args, stdin, stdout, stderr)

        try:
            setup_logging(
                level=env.get("SESDIFF_LOG_LEVEL", "WARNING"),
                log_file=env.get("SESDIFF_LOG"),
            )
        except ValueError as e:
            cmd.eprintln(f"error: {e}")
            cmd.status = 128
            return cmd

        cmd.execute()

        return cmd
