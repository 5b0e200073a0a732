from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from sesdiff.cmd_base import Base
from sesdiff.command import Command

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def run_cmd(cmd_name: str, *args: str) -> None:
    argv: list[str] = ["sesdiff", cmd_name, *args]

    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ.copy(),
        argv,
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )

    sys.exit(cmd.status)


def common_args(strip_cr: bool, max_edits: Optional[int]) -> list[str]:
    args: list[str] = []
    if strip_cr:
        args.append("--strip-cr")
    if max_edits is not None:
        args += ["--max-edits", str(max_edits)]
    return args


strip_cr_option = click.option(
    "--strip-cr",
    is_flag=True,
    help="Drop a trailing carriage return from every line before comparing.",
)
max_edits_option = click.option(
    "--max-edits",
    type=click.IntRange(min=1),
    default=None,
    help="Give up on a file once its shortest edit script exceeds N edits.",
)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="diff")
@strip_cr_option
@max_edits_option
@click.argument("old", type=click.Path(path_type=Path))
@click.argument("new", type=click.Path(path_type=Path))
def diff_cmd(strip_cr: bool, max_edits: Optional[int], old: Path, new: Path) -> None:
    """Print the compact diff between two files."""
    run_cmd("diff", *common_args(strip_cr, max_edits), str(old), str(new))


@cli.command()
@strip_cr_option
@max_edits_option
@click.option(
    "-j",
    "--jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Diff up to N files in parallel.",
)
@click.argument("before", type=click.Path(file_okay=False, path_type=Path))
@click.argument("after", type=click.Path(file_okay=False, path_type=Path))
def report(
    strip_cr: bool,
    max_edits: Optional[int],
    jobs: Optional[int],
    before: Path,
    after: Path,
) -> None:
    """Report every change between two directory trees."""
    args = common_args(strip_cr, max_edits)
    if jobs is not None:
        args += ["--jobs", str(jobs)]

    run_cmd("report", *args, str(before), str(after))


@cli.command()
@strip_cr_option
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
def new(strip_cr: bool, paths: tuple[Path, ...]) -> None:
    """Show files as wholly added."""
    run_cmd("new", *common_args(strip_cr, None), *(str(p) for p in paths))


if __name__ == "__main__":
    cli()
