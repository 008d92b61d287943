"""Following left/right instructions through a network of nodes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Dir(Enum):
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def from_char(cls, ch: str) -> Dir:
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"invalid direction {ch}") from None


@dataclass
class Network:
    directions: list[Dir]
    nodes: list[str]
    mapping: dict[int, tuple[int, int]]

    @classmethod
    def parse(cls, text: str) -> Network:
        """Parse the instruction line, a blank line and ``AAA = (BBB, CCC)`` lines."""
        lines = text.splitlines()
        if not lines:
            raise ValueError("empty network description")
        directions = [Dir.from_char(ch) for ch in lines[0]]

        ids: dict[str, int] = {}

        def node_id(name: str) -> int:
            return ids.setdefault(name, len(ids))

        mapping: dict[int, tuple[int, int]] = {}
        for line in lines[2:]:
            start, sep, ends = line.partition(" = ")
            left, comma, right = ends.strip("()").partition(", ")
            if not sep or not comma:
                raise ValueError(f"invalid node line: {line!r}")
            start_id = node_id(start)
            left_id = node_id(left)
            right_id = node_id(right)
            mapping[start_id] = (left_id, right_id)
        return cls(directions, list(ids), mapping)

    def _node_id(self, name: str) -> int:
        try:
            return self.nodes.index(name)
        except ValueError:
            raise KeyError(name) from None

    def path_length(self, start: str, end: str) -> int | None:
        """Steps from ``start`` to ``end``, or None if the walk loops first."""
        end_id = self._node_id(end)
        current = self._node_id(start)
        position = 0
        steps = 0
        visited = {(current, position)}
        while current != end_id:
            try:
                left, right = self.mapping[current]
            except KeyError:
                raise KeyError(self.nodes[current]) from None
            current = left if self.directions[position] is Dir.LEFT else right
            steps += 1
            position = (position + 1) % len(self.directions)
            state = (current, position)
            if state in visited:
                return None
            visited.add(state)
        return steps

    def ghost_path_length(self) -> int:
        """Least common multiple of every reachable ``..A`` to ``..Z`` path length."""
        starts = [node for node in self.nodes if node.endswith("A")]
        ends = [node for node in self.nodes if node.endswith("Z")]
        loops = [
            steps
            for start in starts
            for end in ends
            if (steps := self.path_length(start, end)) is not None
        ]
        if not loops:
            raise ValueError("no ghost path reaches an end node")
        return math.lcm(*loops)


def part1(path: str | Path = "inputs/input08") -> str:
    network = Network.parse(Path(path).read_text(encoding="utf-8"))
    steps = network.path_length("AAA", "ZZZ")
    if steps is None:
        raise ValueError("ZZZ cannot be reached from AAA")
    return str(steps)


def part2(path: str | Path = "inputs/input08") -> str:
    network = Network.parse(Path(path).read_text(encoding="utf-8"))
    return str(network.ghost_path_length())