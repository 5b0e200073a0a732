from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Pattern, Sequence, Tuple, TypeAlias, cast

ConfigValue: TypeAlias = bool | int | str

SECTION_LINE: Pattern[str] = re.compile(
    r'^\s*\[([a-z0-9-]+)( "(.+)")?\]\s*(?:$|#|;)', re.I
)
VARIABLE_LINE: Pattern[str] = re.compile(
    r"^\s*([a-z][a-z0-9-]*)\s*=\s*(.*?)\s*(?:$|#|;)", re.I | re.M
)
BLANK_LINE: Pattern[str] = re.compile(r"^\s*(?:$|#|;)")
INTEGER: Pattern[str] = re.compile(r"^-?(?:0|[1-9][0-9]*)$")


class ParseError(Exception):
    pass


@dataclass
class Section:
    name: Sequence[str]

    @staticmethod
    def normalize(name: Sequence[str]) -> tuple[str, str] | None:
        if not name:
            return None
        head = name[0].lower()
        tail = ".".join(name[1:])
        return (head, tail)


@dataclass
class Variable:
    name: str
    value: ConfigValue

    @staticmethod
    def normalize(name: Optional[str]) -> Optional[str]:
        return name.lower() if name else None


@dataclass
class Line:
    text: str
    section: Section
    variable: Optional[Variable] = None

    @property
    def normal_variable(self) -> Optional[str]:
        return Variable.normalize(self.variable.name) if self.variable else None


class ConfigFile:
    def __init__(self, path: Path) -> None:
        self.path: Path = path
        self.lines: dict[tuple[str, str] | None, List[Line]] = defaultdict(list)
        self.loaded: bool = False

    def open(self) -> None:
        if not self.loaded:
            self.read_config_file()

    def get(self, key: Sequence[str]) -> ConfigValue | None:
        try:
            retval = self.get_all(key)[-1]
        except IndexError:
            retval = None
        return retval

    def get_all(self, key: Sequence[str]) -> List[ConfigValue]:
        self.open()
        section, var = self.split_key(key)
        return [cast(Variable, ln.variable).value for ln in self.find_lines(section, var)]

    def line_count(self) -> int:
        return sum(len(ls) for ls in self.lines.values())

    @staticmethod
    def split_key(key: Sequence[str]) -> Tuple[List[str], str]:
        key = list(map(str, key))
        var = key.pop()
        return (key, var)

    def find_lines(self, key: Sequence[str], var: str) -> List[Line]:
        name = Section.normalize(key)
        if name not in self.lines:
            return []

        normal = Variable.normalize(var)
        return [ln for ln in self.lines[name] if ln.normal_variable == normal]

    def read_config_file(self) -> None:
        self.lines = defaultdict(list)
        section = Section([])

        try:
            with self.path.open("r", encoding="utf-8") as fh:
                for raw in fh:
                    line = self.parse_line(section, raw)
                    section = line.section
                    self.lines[Section.normalize(section.name)].append(line)
        except FileNotFoundError:
            pass

        self.loaded = True

    def parse_line(self, section: Section, line: str) -> Line:
        if m := SECTION_LINE.match(line):
            section = Section([m.group(1)] + ([m.group(3)] if m.group(3) else []))
            return Line(line, section)
        if m := VARIABLE_LINE.match(line):
            variable = Variable(m.group(1), self.parse_value(m.group(2)))
            return Line(line, section, variable)
        if BLANK_LINE.match(line):
            return Line(line, section)
        raise ParseError(f"bad config line {self.line_count() + 1} in file {self.path}")

    @staticmethod
    def parse_value(value: str) -> ConfigValue:
        lower = value.lower()
        if lower in {"yes", "on", "true"}:
            return True
        if lower in {"no", "off", "false"}:
            return False
        if INTEGER.match(value):
            return int(value)
        return value
