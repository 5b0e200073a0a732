from pathlib import Path

import pytest
from click.testing import CliRunner

from sesdiff.cli import cli


@pytest.fixture
def runner(tmp_path: Path) -> CliRunner:
    return CliRunner(env={"SESDIFF_CONFIG_GLOBAL": str(tmp_path / "sesdiffconfig")})


def test_it_shows_help_without_a_command(runner: CliRunner) -> None:
    result = runner.invoke(cli, [])

    assert result.exit_code == 0
    assert "diff" in result.output
    assert "report" in result.output


def test_it_diffs_two_files(runner: CliRunner, tmp_path: Path) -> None:
    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path("old.txt").write_text("a\nb\n")
        Path("new.txt").write_text("a\nc\n")

        result = runner.invoke(cli, ["diff", "old.txt", "new.txt"])

    assert result.exit_code == 1
    assert result.stdout == "- b\n+ c\n"


def test_it_reports_two_trees(runner: CliRunner, tmp_path: Path) -> None:
    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path("before").mkdir()
        Path("after").mkdir()
        Path("before/x.txt").write_text("1\n2\n")
        Path("after/x.txt").write_text("1\n2\n3\n")

        result = runner.invoke(cli, ["report", "-j", "2", "--strip-cr", "before", "after"])

    assert result.exit_code == 0
    assert result.stdout == "=== x.txt ===\n+ 3\n\n"


def test_it_validates_the_edit_budget(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["diff", "--max-edits", "0", "a", "b"])

    assert result.exit_code == 2


def test_new_requires_a_path(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["new"])

    assert result.exit_code == 2
