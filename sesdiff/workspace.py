import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from sesdiff.report import ChangedFile, NewFile

log = logging.getLogger(__name__)


class Workspace:
    class MissingDirectory(Exception):
        pass

    IGNORE: list[str] = [".", "..", ".git", "__pycache__", ".pytest_cache", ".mypy_cache"]

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    def list_files(self, path: Optional[Path] = None) -> Iterator[Path]:
        if path is None:
            if not self.path.is_dir():
                raise Workspace.MissingDirectory(f"not a directory: {self.path}")
            path = self.path

        if path.is_dir():
            for f in sorted(path.iterdir()):
                if f.name in Workspace.IGNORE:
                    continue
                # Symlinked directories are not followed; a link back up the
                # tree would otherwise repeat every file below it.
                if f.is_symlink() and f.is_dir():
                    log.debug("not following symlinked directory %s", f)
                    continue
                yield from self.list_files(f)
        elif path.exists():
            yield path.relative_to(self.path)

    def read_file(self, path: Path) -> Optional[str]:
        try:
            with open(self.path / path, encoding="utf-8", newline="") as f:
                return f.read()
        except (FileNotFoundError, IsADirectoryError, PermissionError, UnicodeDecodeError) as e:
            log.debug("treating %s as empty: %s", self.path / path, e)
            return None


def collect_changes(
    before_root: Path, after_root: Path
) -> tuple[list[ChangedFile], list[NewFile]]:
    before = Workspace(before_root)
    after = Workspace(after_root)

    before_paths = set(before.list_files())
    after_paths = set(after.list_files())

    changes = [
        ChangedFile(p.as_posix(), before.read_file(p), after.read_file(p))
        for p in sorted(before_paths)
    ]
    new_files = [
        NewFile(p.as_posix(), after.read_file(p))
        for p in sorted(after_paths - before_paths)
    ]
    return changes, new_files
