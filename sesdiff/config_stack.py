from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Sequence

from sesdiff.config import ConfigFile, ConfigValue

GLOBAL_CONFIG = Path("~/.sesdiffconfig")
LOCAL_CONFIG = ".sesdiff"


class ConfigStack:
    def __init__(self, _dir: Path, env: Mapping[str, str] | None = None) -> None:
        env = os.environ if env is None else env
        global_path = env.get("SESDIFF_CONFIG_GLOBAL") or GLOBAL_CONFIG

        self.configs = {
            "global": ConfigFile(Path(global_path).expanduser()),
            "local": ConfigFile(_dir / LOCAL_CONFIG),
        }

    def get(self, key: Sequence[str]) -> ConfigValue | None:
        try:
            return self.get_all(key)[-1]
        except IndexError:
            return None

    def get_all(self, key: Sequence[str]) -> list[ConfigValue]:
        values: list[ConfigValue] = []
        for name in ("global", "local"):
            values.extend(self.configs[name].get_all(key))
        return values
