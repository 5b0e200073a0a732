from __future__ import annotations

import io
from functools import cached_property
from pathlib import Path
from typing import MutableMapping, NoReturn, TextIO

from sesdiff.config import ParseError
from sesdiff.config_stack import ConfigStack
from sesdiff.options import ConfigError, DiffOptions


class Base:
    def __init__(
        self,
        _dir: Path,
        env: MutableMapping[str, str],
        args: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ):
        self.dir: Path = _dir
        self.env: MutableMapping[str, str] = env
        self.args: list[str] = args
        self.stdin: TextIO = stdin
        self.stdout: TextIO = stdout
        self.stderr: TextIO = stderr
        self.status: int | None = None

    @cached_property
    def config(self) -> ConfigStack:
        return ConfigStack(self.dir, self.env)

    def load_options(self, jobs: bool = False) -> DiffOptions:
        try:
            return DiffOptions.load(self.config).override(
                strip_cr=True if self.flag("--strip-cr") else None,
                max_edits=self.int_option("--max-edits"),
                jobs=self.int_option("-j", "--jobs") if jobs else None,
            )
        except (ConfigError, ParseError) as e:
            self.eprintln(f"error: {e}")
            self.exit(128)

    def flag(self, *names: str) -> bool:
        found = any(name in self.args for name in names)
        self.args = [arg for arg in self.args if arg not in names]
        return found

    def int_option(self, *names: str) -> int | None:
        value: int | None = None
        rest: list[str] = []
        args = iter(self.args)

        for arg in args:
            if arg not in names:
                rest.append(arg)
                continue

            raw = next(args, None)
            try:
                value = int(raw) if raw is not None else None
            except ValueError:
                value = None
            if value is None:
                self.eprintln(f"error: option '{arg}' expects a number")
                self.exit(129)

        self.args = rest
        return value

    def exit(self, status: int = 0) -> NoReturn:
        self.status = status
        raise ExitSignal(self.status)

    def execute(self) -> int:
        try:
            self.run()
            self.status = 0
        except ExitSignal as e:
            self.status = e.status

        self.stdout.flush()
        self.stderr.flush()

        assert self.status is not None
        return self.status

    def expanded_path(self, path: str) -> Path:
        return (self.dir / path).absolute()

    def run(self) -> None:
        raise NotImplementedError(f"{self.__class__.__name__}.run() not implemented")

    def write(self, text: str) -> None:
        if isinstance(self.stdout, io.BufferedIOBase):
            self.stdout.write(text.encode("utf-8"))
        else:
            self.stdout.write(text)

    def eprintln(self, string: str) -> None:
        if isinstance(self.stderr, io.BufferedIOBase):
            self.stderr.write((string + "\n").encode("utf-8"))
        else:
            self.stderr.write(string + "\n")


class ExitSignal(Exception):
    def __init__(self, status: int = 0) -> None:
        super().__init__(f"Exit with status {status}")
        self.status: int | None = status
