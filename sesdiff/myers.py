from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, TypeAlias

log = logging.getLogger(__name__)

UNREACHED = -1


class InvariantViolation(AssertionError):
    pass


class DiffTooLarge(Exception):
    def __init__(self, n: int, m: int, limit: int) -> None:
        super().__init__(
            f"diff of {n} and {m} lines needs more than {limit} edits"
        )
        self.n: int = n
        self.m: int = m
        self.limit: int = limit


@dataclass(frozen=True)
class Equal:
    text: str

    def __str__(self) -> str:
        return "  " + self.text


@dataclass(frozen=True)
class Insert:
    text: str

    def __str__(self) -> str:
        return "+ " + self.text


@dataclass(frozen=True)
class Delete:
    text: str

    def __str__(self) -> str:
        return "- " + self.text


Operation: TypeAlias = Equal | Insert | Delete
Trace: TypeAlias = list[list[int]]


class Myers:
    def __init__(
        self, a: Sequence[str], b: Sequence[str], max_edits: int | None = None
    ) -> None:
        self.a = a
        self.b = b
        self.max_edits = max_edits
        self.max_d: int = len(a) + len(b)
        # k ranges over [-max_d, max_d]; one extra slot on each side keeps
        # the d=0 seed at k=1 addressable when both inputs are empty.
        self.offset: int = self.max_d + 1

    @classmethod
    def diff(
        cls, a: Sequence[str], b: Sequence[str], max_edits: int | None = None
    ) -> list[Operation]:
        myers = cls(a, b, max_edits)
        trace, d = myers.shortest_edit()
        return myers.backtrack(trace, d)

    def _goes_down(self, v: list[int], k: int, d: int) -> bool:
        if k == -d:
            return True
        if k == d:
            return False
        return v[self.offset + k - 1] < v[self.offset + k + 1]

    def shortest_edit(self) -> tuple[Trace, int]:
        """
        Greedy forward search over the edit graph.

        Returns the frontier snapshot for every depth 0..d together with d,
        the length of the shortest edit script.
        """
        n, m = len(self.a), len(self.b)
        offset = self.offset
        v = [UNREACHED] * (2 * offset + 1)
        v[offset + 1] = 0
        trace: Trace = []

        for d in range(self.max_d + 1):
            if self.max_edits is not None and d > self.max_edits:
                raise DiffTooLarge(n, m, self.max_edits)

            prev = v
            v = prev[:]

            for k in range(-d, d + 1, 2):
                if self._goes_down(prev, k, d):
                    x = prev[offset + k + 1]
                else:
                    x = prev[offset + k - 1] + 1

                y = x - k

                while x < n and y < m and self.a[x] == self.b[y]:
                    x += 1
                    y += 1

                v[offset + k] = x

                if x >= n and y >= m:
                    trace.append(v)
                    log.debug("shortest edit for %d/%d lines: d=%d", n, m, d)
                    return trace, d

            trace.append(v)

        raise InvariantViolation(
            f"no edit path found within {self.max_d} edits for {n}/{m} lines"
        )

    def backtrack(self, trace: Trace, d: int) -> list[Operation]:
        edits: list[Operation] = []
        x, y = len(self.a), len(self.b)

        for depth in range(d, 0, -1):
            v = trace[depth - 1]
            k = x - y

            if self._goes_down(v, k, depth):
                prev_k = k + 1
            else:
                prev_k = k - 1

            if abs(prev_k) > depth - 1 or v[self.offset + prev_k] == UNREACHED:
                raise InvariantViolation(
                    f"invalid backtrack: k={prev_k} not reached at d={depth - 1}"
                )

            prev_x = v[self.offset + prev_k]
            prev_y = prev_x - prev_k

            while x > prev_x and y > prev_y:
                edits.append(Equal(self.a[x - 1]))
                x -= 1
                y -= 1

            if x == prev_x:
                edits.append(Insert(self.b[y - 1]))
                y -= 1
            else:
                edits.append(Delete(self.a[x - 1]))
                x -= 1

        while x > 0 or y > 0:
            if x > 0 and y > 0 and self.a[x - 1] == self.b[y - 1]:
                edits.append(Equal(self.a[x - 1]))
                x -= 1
                y -= 1
            elif x > 0:
                edits.append(Delete(self.a[x - 1]))
                x -= 1
            else:
                edits.append(Insert(self.b[y - 1]))
                y -= 1

        edits.reverse()
        return edits
