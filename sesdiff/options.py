from __future__ import annotations

from dataclasses import dataclass, replace

from sesdiff.config import ConfigValue
from sesdiff.config_stack import ConfigStack


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class DiffOptions:
    strip_cr: bool = False
    max_edits: int | None = None
    jobs: int = 1

    @classmethod
    def load(cls, config: ConfigStack) -> DiffOptions:
        strip_cr = config.get(["diff", "stripCr"])
        if strip_cr in (0, 1):
            strip_cr = bool(strip_cr)
        elif strip_cr is not None and not isinstance(strip_cr, bool):
            raise ConfigError(f"bad boolean config value '{strip_cr}' for 'diff.stripcr'")

        return cls(
            strip_cr=bool(strip_cr),
            max_edits=_positive(config.get(["diff", "maxEdits"]), "diff.maxedits"),
            jobs=_positive(config.get(["diff", "jobs"]), "diff.jobs") or 1,
        )

    def override(
        self,
        strip_cr: bool | None = None,
        max_edits: int | None = None,
        jobs: int | None = None,
    ) -> DiffOptions:
        changes: dict[str, bool | int] = {}
        if strip_cr is not None:
            changes["strip_cr"] = strip_cr
        if max_edits is not None:
            changes["max_edits"] = _positive(max_edits, "--max-edits")
        if jobs is not None:
            changes["jobs"] = _positive(jobs, "--jobs")
        return replace(self, **changes)


def _positive(value: ConfigValue | None, name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"bad numeric value '{value}' for '{name}'")
    return value
