"""Counting arrangements of damaged springs that match group records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence


class Spring(Enum):
    OPERATIONAL = "."
    DAMAGED = "#"
    UNKNOWN = "?"

    @classmethod
    def from_char(cls, ch: str) -> Spring:
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"invalid spring state {ch!r}") from None

    def __str__(self) -> str:
        return self.value


def arrangements_count(springs: Sequence[Spring], groups: Sequence[int]) -> int:
    """Number of ways the unknown springs can be filled to match ``groups``."""
    springs = tuple(springs)
    groups = tuple(groups)
    n = len(springs)
    memo: dict[tuple[int, int], int] = {}

    def count(si: int, gi: int) -> int:
        if gi >= len(groups):
            return 1
        key = (si, gi)
        if key in memo:
            return memo[key]
        group = groups[gi]
        remaining = n - si
        if remaining < group:
            return 0
        last = gi == len(groups) - 1
        total = 0
        for i in range(si, si + remaining - group + 1):
            # A damaged spring skipped over ends every later placement too.
            if i > si and springs[i - 1] is Spring.DAMAGED:
                break
            end = i + group
            if Spring.OPERATIONAL in springs[i:end]:
                continue
            if end < n and springs[end] is Spring.DAMAGED:
                continue
            if last and Spring.DAMAGED in springs[end:]:
                continue
            if end == n:
                total += 1 if last else 0
            else:
                total += count(end + 1, gi + 1)
        memo[key] = total
        return total

    return count(0, 0)


@dataclass(frozen=True)
class Row:
    springs: tuple[Spring, ...]
    damaged_groups: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> Row:
        springs_str, sep, groups_str = line.partition(" ")
        if not sep:
            raise ValueError(f"invalid row: {line!r}")
        springs = tuple(Spring.from_char(ch) for ch in springs_str)
        groups = tuple(int(g) for g in groups_str.split(","))
        return cls(springs, groups)

    def arrangements_count(self) -> int:
        return arrangements_count(self.springs, self.damaged_groups)

    def unfold(self) -> Row:
        """Five copies of the springs joined by unknowns, and five of the groups."""
        springs: list[Spring] = []
        for copy in range(5):
            if copy:
                springs.append(Spring.UNKNOWN)
            springs.extend(self.springs)
        return Row(tuple(springs), self.damaged_groups * 5)

    def unfolded_arrangement_count(self) -> int:
        return self.unfold().arrangements_count()

    def __str__(self) -> str:
        springs = "".join(str(spring) for spring in self.springs)
        groups = ",".join(str(group) for group in self.damaged_groups)
        return f"{springs} {groups}"


def parse_rows(text: str) -> list[Row]:
    return [Row.parse(line) for line in text.splitlines()]


def part1(path: str | Path = "inputs/input12") -> str:
    rows = parse_rows(Path(path).read_text(encoding="utf-8"))
    return str(sum(row.arrangements_count() for row in rows))


def part2(path: str | Path = "inputs/input12") -> str:
    rows = parse_rows(Path(path).read_text(encoding="utf-8"))
    return str(sum(row.unfolded_arrangement_count() for row in rows))