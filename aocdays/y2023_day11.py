"""Distances between galaxies in an expanding universe."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate, combinations
from pathlib import Path


@dataclass
class Space:
    galaxies: list[tuple[int, int]]
    empty_rows: list[int]
    empty_cols: list[int]

    @classmethod
    def parse(cls, text: str) -> Space:
        """Read galaxies (``#``) and note rows and columns that hold none."""
        galaxies = []
        empty_rows = []
        width = 0
        occupied_cols: set[int] = set()
        for row, line in enumerate(text.splitlines()):
            width = max(width, len(line))
            cols = [col for col, ch in enumerate(line) if ch == "#"]
            if not cols:
                empty_rows.append(row)
            galaxies.extend((row, col) for col in cols)
            occupied_cols.update(cols)
        empty_cols = [col for col in range(width) if col not in occupied_cols]
        return cls(galaxies, empty_rows, empty_cols)

    def pairwise_distance_sum(self, expansion: int) -> int:
        """Sum of distances over all pairs, empty lines counting ``expansion`` each."""
        if not self.galaxies:
            return 0
        row_prefix = _prefix_costs(
            max(row for row, _ in self.galaxies), set(self.empty_rows), expansion
        )
        col_prefix = _prefix_costs(
            max(col for _, col in self.galaxies), set(self.empty_cols), expansion
        )
        total = 0
        for (row1, col1), (row2, col2) in combinations(self.galaxies, 2):
            r_lo, r_hi = sorted((row1, row2))
            c_lo, c_hi = sorted((col1, col2))
            total += row_prefix[r_hi] - row_prefix[r_lo]
            total += col_prefix[c_hi] - col_prefix[c_lo]
        return total


def _prefix_costs(limit: int, empty: set[int], expansion: int) -> list[int]:
    """``result[i]`` is the cost of crossing lines ``0 .. i - 1``."""
    costs = (expansion if line in empty else 1 for line in range(limit))
    return list(accumulate(costs, initial=0))


def part1(path: str | Path = "inputs/input11") -> str:
    space = Space.parse(Path(path).read_text(encoding="utf-8"))
    return str(space.pairwise_distance_sum(2))


def part2(path: str | Path = "inputs/input11") -> str:
    space = Space.parse(Path(path).read_text(encoding="utf-8"))
    return str(space.pairwise_distance_sum(1000000))