from __future__ import annotations

import shutil
from io import StringIO
from pathlib import Path
from typing import (
    Callable,
    Generator,
    Mapping,
    Protocol,
    TextIO,
    TypeAlias,
    cast,
)

import pytest

from sesdiff.cmd_base import Base
from sesdiff.command import Command
from tests.cmd_helpers import CapturedStderr

SesdiffCmdResult: TypeAlias = tuple[Base, StringIO, StringIO, CapturedStderr]

WriteFile: TypeAlias = Callable[[str, str], None]
Mkdir: TypeAlias = Callable[[str], None]


class SesdiffCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> "SesdiffCmdResult": ...


@pytest.fixture
def repo_path(tmp_path: Path) -> Generator[Path]:
    path = tmp_path / "work"
    path.mkdir()
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def global_config(tmp_path: Path) -> Path:
    return tmp_path / "sesdiffconfig"


@pytest.fixture
def write_file(repo_path: Path) -> WriteFile:
    def _write_file(name: str, contents: str) -> None:
        path = repo_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="") as f:
            f.write(contents)

    return _write_file


@pytest.fixture
def mkdir(repo_path: Path) -> Mkdir:
    def _mkdir(name: str) -> None:
        path = repo_path / name
        path.mkdir(parents=True, exist_ok=True)

    return _mkdir


@pytest.fixture
def sesdiff_cmd(repo_path: Path, global_config: Path) -> Generator[SesdiffCmd]:
    to_close = []

    def _sesdiff_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> SesdiffCmdResult:
        full_env = {"SESDIFF_CONFIG_GLOBAL": str(global_config), **(env or {})}
        stdin = StringIO(stdin_data)
        stdout = StringIO()
        stderr = CapturedStderr()
        to_close.append(stderr)
        cmd = Command.execute(
            repo_path,
            full_env,
            ["sesdiff"] + list(argv),
            stdin,
            stdout,
            cast(TextIO, stderr),
        )
        return cmd, stdin, stdout, stderr

    yield _sesdiff_cmd

    for s in to_close:
        s.close()
