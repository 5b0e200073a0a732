from __future__ import annotations

import tempfile
from io import TextIOBase
from typing import TextIO

from sesdiff.cmd_base import Base


class CapturedStderr(TextIOBase):
    def __init__(self) -> None:
        self._file: TextIO = tempfile.TemporaryFile(mode="w+")

    def fileno(self) -> int:
        return self._file.fileno()

    def write(self, s: str) -> int:
        n = self._file.write(s)
        self._file.flush()
        return n

    def flush(self) -> None:
        return self._file.flush()

    def read(self, n: int | None = -1) -> str:
        self._file.flush()
        self._file.seek(0)
        if n is not None:
            return self._file.read(n)
        return self._file.read()

    def close(self) -> None:
        return self._file.close()

    def seek(self, offset: int, whence: int = 0) -> int:
        return self._file.seek(offset, whence)


def assert_status(cmd: Base, expected: int) -> None:
    assert cmd.status == expected, f"Expected status {expected}, got {cmd.status}"


def assert_stdout(stdout: TextIO, expected: str) -> None:
    stdout.seek(0)
    data = stdout.read()
    assert data == expected, f"Expected stdout {expected!r}, got {data!r}"


def assert_stderr(stderr: CapturedStderr | TextIO, expected: str) -> None:
    stderr.seek(0)
    data = stderr.read()
    assert data == expected, f"Expected stderr {expected!r}, got {data!r}"
