"""Crossing a valley full of wrapping blizzards."""

from __future__ import annotations

import copy
import heapq
import itertools
import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class Point:
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


class Direction(Enum):
    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"


@dataclass(frozen=True)
class Blizzard:
    position: Point
    direction: Direction

    def moved(self, rows: int, cols: int) -> Blizzard:
        """Return this blizzard one step later, wrapping inside the walls."""
        row, col = self.position.row, self.position.col
        if self.direction is Direction.UP:
            row = rows - 2 if row == 1 else row - 1
        elif self.direction is Direction.DOWN:
            row = 1 if row == rows - 2 else row + 1
        elif self.direction is Direction.LEFT:
            col = cols - 2 if col == 1 else col - 1
        else:
            col = 1 if col == cols - 2 else col + 1
        return Blizzard(Point(row, col), self.direction)


@dataclass(frozen=True)
class Node:
    state_index: int
    row: int
    col: int


@dataclass
class Valley:
    blizzards: list[Blizzard]
    rows: int
    cols: int
    start: Point
    goal: Point
    _occupied: frozenset[tuple[int, int]] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def parse(cls, contents: str) -> Valley:
        """Read the valley map; the entrance is top-left, the exit bottom-right."""
        lines = contents.splitlines()
        if not lines:
            raise ValueError("empty valley map")
        rows = len(lines)
        cols = len(lines[0])
        blizzards = []
        for row, line in enumerate(lines):
            for col, ch in enumerate(line):
                if ch in "#.":
                    continue
                try:
                    direction = Direction(ch)
                except ValueError:
                    raise ValueError(f"invalid map character: {ch}") from None
                blizzards.append(Blizzard(Point(row, col), direction))
        return cls(blizzards, rows, cols, Point(0, 1), Point(rows - 1, cols - 2))

    def update(self) -> None:
        """Advance every blizzard by one minute."""
        self.blizzards = [b.moved(self.rows, self.cols) for b in self.blizzards]
        self._occupied = None

    def occupied(self) -> frozenset[tuple[int, int]]:
        """Cells currently holding at least one blizzard."""
        if self._occupied is None:
            self._occupied = frozenset(
                (b.position.row, b.position.col) for b in self.blizzards
            )
        return self._occupied

    def heuristic(self, node: Node) -> int:
        """Manhattan distance from ``node`` to the goal."""
        return abs(node.row - self.goal.row) + abs(node.col - self.goal.col)

    def render(self, position: Point | None = None) -> str:
        """Draw the valley, marking ``position`` with ``E`` if given."""
        lines = ["#." + "#" * (self.cols - 2)]
        for row in range(1, self.rows - 1):
            cells = []
            for col in range(1, self.cols - 1):
                here = [b for b in self.blizzards if b.position == Point(row, col)]
                if position is not None and position.row == row and position.col == col:
                    cells.append("E")
                elif not here:
                    cells.append(".")
                elif len(here) == 1:
                    cells.append(here[0].direction.value)
                else:
                    cells.append(str(len(here)))
            lines.append("#" + "".join(cells) + "#")
        lines.append("#" * (self.cols - 2) + ".#")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


def get_neighbors(node: Node, all_states: list[Valley]) -> list[Node]:
    """Nodes reachable from ``node`` in one minute without meeting a blizzard."""
    next_index = 0 if node.state_index == len(all_states) - 1 else node.state_index + 1
    state = all_states[next_index]
    blocked = state.occupied()
    row, col = node.row, node.col
    candidates = [(row, col)]
    if row > 1 or (row == 1 and col == 1):
        candidates.append((row - 1, col))
    if row < state.rows - 2 or (row == state.rows - 2 and col == state.cols - 2):
        candidates.append((row + 1, col))
    inside = 0 < row < state.rows - 1
    if col > 1 and inside:
        candidates.append((row, col - 1))
    if col < state.cols - 2 and inside:
        candidates.append((row, col + 1))
    return [Node(next_index, r, c) for r, c in candidates if (r, c) not in blocked]


def get_all_states(state: Valley) -> list[Valley]:
    """All distinct blizzard configurations over one full cycle."""
    cycle_length = math.lcm(state.cols - 2, state.rows - 2)
    current = copy.copy(state)
    states = []
    for _ in range(cycle_length):
        states.append(copy.copy(current))
        current.update()
    return states


def find_shortest_path(state: Valley) -> int:
    """Minutes needed to walk from ``state.start`` to ``state.goal``."""
    all_states = get_all_states(state)
    start = Node(0, state.start.row, state.start.col)
    g_score = {start: 0}
    tie = itertools.count()
    open_heap = [(state.heuristic(start), 0, next(tie), start)]
    while open_heap:
        _, g, _, current = heapq.heappop(open_heap)
        if g != g_score.get(current):
            continue
        if current.row == state.goal.row and current.col == state.goal.col:
            return g
        tentative = g + 1
        for neighbor in get_neighbors(current, all_states):
            if tentative < g_score.get(neighbor, math.inf):
                g_score[neighbor] = tentative
                heapq.heappush(
                    open_heap,
                    (tentative + state.heuristic(neighbor), tentative, next(tie), neighbor),
                )
    raise RuntimeError("failed to find path")


def find_shortest_back_and_forth_path(state: Valley) -> tuple[int, int, int]:
    """Lengths of the trips there, back for the snacks, and there again."""
    first = find_shortest_path(copy.copy(state))

    second_state = copy.copy(state)
    for _ in range(first):
        second_state.update()
    second_state.start = state.goal
    second_state.goal = state.start
    second = find_shortest_path(second_state)

    third_state = copy.copy(state)
    for _ in range(first + second):
        third_state.update()
    third = find_shortest_path(third_state)

    return first, second, third


def part1(path: str | Path = "inputs/input24") -> str:
    state = Valley.parse(Path(path).read_text(encoding="utf-8"))
    return str(find_shortest_path(state))


def part2(path: str | Path = "inputs/input24") -> str:
    state = Valley.parse(Path(path).read_text(encoding="utf-8"))
    return str(sum(find_shortest_back_and_forth_path(state)))