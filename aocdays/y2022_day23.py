"""Elves spreading out over a grid, proposing moves in rotating order."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

Position = tuple[int, int]


class Direction(Enum):
    NORTH = "N"
    SOUTH = "S"
    WEST = "W"
    EAST = "E"


# Neighbour offsets in the order NW, N, NE, E, SE, S, SW, W.
_NEIGHBOR_OFFSETS = ((-1, -1), (-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1))

# For each direction: the neighbour slots that must be free, and the step taken.
_RULES: dict[Direction, tuple[tuple[int, int, int], Position]] = {
    Direction.NORTH: ((0, 1, 2), (-1, 0)),
    Direction.SOUTH: ((4, 5, 6), (1, 0)),
    Direction.WEST: ((0, 6, 7), (0, -1)),
    Direction.EAST: ((2, 3, 4), (0, 1)),
}


def _initial_directions() -> list[Direction]:
    return [Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST]


@dataclass
class ElfMap:
    elves: list[Position]
    directions: list[Direction] = field(default_factory=_initial_directions)

    @classmethod
    def parse(cls, contents: str) -> ElfMap:
        """Read elf positions (``#``) from a text grid."""
        elves = [
            (row, col)
            for row, line in enumerate(contents.splitlines())
            for col, ch in enumerate(line)
            if ch == "#"
        ]
        return cls(elves)

    def _propose(self, elf: Position, occupied: set[Position]) -> Position:
        row, col = elf
        neighbors = [(row + dr, col + dc) in occupied for dr, dc in _NEIGHBOR_OFFSETS]
        if not any(neighbors):
            return elf
        for direction in self.directions:
            checked, (dr, dc) = _RULES[direction]
            if not any(neighbors[slot] for slot in checked):
                return (row + dr, col + dc)
        return elf

    def move_elves(self) -> int:
        """Run one round; return how many elves moved."""
        occupied = set(self.elves)
        proposals = [self._propose(elf, occupied) for elf in self.elves]
        counts = Counter(proposals)
        new_elves = [
            target if counts[target] == 1 else elf
            for elf, target in zip(self.elves, proposals)
        ]
        moved = sum(old != new for old, new in zip(self.elves, new_elves))
        self.elves = new_elves
        self.directions.append(self.directions.pop(0))
        return moved

    def smallest_rectangle(self) -> tuple[int, int, int, int]:
        """Return ``(min_row, max_row, min_col, max_col)`` bounding all elves."""
        rows = [row for row, _ in self.elves]
        cols = [col for _, col in self.elves]
        return min(rows), max(rows), min(cols), max(cols)

    def ground_tiles_count(self) -> int:
        """Count empty tiles inside the bounding rectangle."""
        min_row, max_row, min_col, max_col = self.smallest_rectangle()
        area = (max_row - min_row + 1) * (max_col - min_col + 1)
        return area - len(set(self.elves))

    def num_rounds_to_finalise(self) -> int:
        """Run rounds until none moves; return the number of the first still round."""
        rounds = 1
        while self.move_elves():
            rounds += 1
        return rounds

    def __str__(self) -> str:
        min_row, max_row, min_col, max_col = self.smallest_rectangle()
        index_of: dict[Position, int] = {}
        for index, elf in enumerate(self.elves):
            index_of.setdefault(elf, index)
        lines = ["   " + "".join(f"{col:02} " for col in range(min_col, max_col + 1))]
        for row in range(min_row, max_row + 1):
            cells = "".join(
                f"{index_of[(row, col)]:02} " if (row, col) in index_of else ".. "
                for col in range(min_col, max_col + 1)
            )
            lines.append(f"{row:02} " + cells)
        return "\n".join(lines) + "\n"


def part1(path: str | Path = "inputs/input23") -> str:
    elf_map = ElfMap.parse(Path(path).read_text(encoding="utf-8"))
    for _ in range(10):
        elf_map.move_elves()
    return str(elf_map.ground_tiles_count())


def part2(path: str | Path = "inputs/input23") -> str:
    elf_map = ElfMap.parse(Path(path).read_text(encoding="utf-8"))
    return str(elf_map.num_rounds_to_finalise())