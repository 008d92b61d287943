"""A loop of pipes: its farthest point and the tiles it encloses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Direction(Enum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    def opposite(self) -> Direction:
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class Tile(Enum):
    NORTH_SOUTH = "|"
    EAST_WEST = "-"
    NORTH_EAST = "L"
    NORTH_WEST = "J"
    SOUTH_WEST = "7"
    SOUTH_EAST = "F"
    GROUND = "."
    START = "S"

    @classmethod
    def from_char(cls, ch: str) -> Tile:
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"invalid tile {ch!r}") from None

    def has_direction(self, direction: Direction) -> bool:
        """Whether this pipe opens towards ``direction``."""
        return direction in _CONNECTIONS.get(self, frozenset())

    def exit_direction(self, src: Direction) -> Direction:
        """Direction leaving this pipe when entered from its ``src`` side."""
        connections = _CONNECTIONS.get(self, frozenset())
        if src not in connections:
            raise ValueError(f"tile {self.value!r} has no opening towards {src.name}")
        (other,) = connections - {src}
        return other

    def __str__(self) -> str:
        return self.value


_CONNECTIONS: dict[Tile, frozenset[Direction]] = {
    Tile.NORTH_SOUTH: frozenset({Direction.NORTH, Direction.SOUTH}),
    Tile.EAST_WEST: frozenset({Direction.EAST, Direction.WEST}),
    Tile.NORTH_EAST: frozenset({Direction.NORTH, Direction.EAST}),
    Tile.NORTH_WEST: frozenset({Direction.NORTH, Direction.WEST}),
    Tile.SOUTH_WEST: frozenset({Direction.SOUTH, Direction.WEST}),
    Tile.SOUTH_EAST: frozenset({Direction.SOUTH, Direction.EAST}),
}
_TILE_BY_CONNECTIONS = {connections: tile for tile, connections in _CONNECTIONS.items()}


@dataclass
class PipeMap:
    tiles: list[Tile]
    width: int

    @classmethod
    def parse(cls, text: str) -> PipeMap:
        lines = text.splitlines()
        if not lines:
            raise ValueError("empty pipe map")
        tiles = [Tile.from_char(ch) for line in lines for ch in line]
        return cls(tiles, len(lines[0]))

    @property
    def height(self) -> int:
        return len(self.tiles) // self.width

    def start_index(self) -> int:
        try:
            return self.tiles.index(Tile.START)
        except ValueError:
            raise ValueError("no start tile in map") from None

    def _step(self, index: int, direction: Direction) -> int:
        return index + {
            Direction.NORTH: -self.width,
            Direction.SOUTH: self.width,
            Direction.EAST: 1,
            Direction.WEST: -1,
        }[direction]

    def start_tile_type(self) -> Tile:
        """The pipe hidden under the start tile, judged from its neighbours."""
        index = self.start_index()
        row, col = divmod(index, self.width)
        directions = []
        if row > 0 and self.tiles[index - self.width].has_direction(Direction.SOUTH):
            directions.append(Direction.NORTH)
        if row < self.height - 1 and self.tiles[index + self.width].has_direction(
            Direction.NORTH
        ):
            directions.append(Direction.SOUTH)
        if col > 0 and self.tiles[index - 1].has_direction(Direction.EAST):
            directions.append(Direction.WEST)
        if col < self.width - 1 and self.tiles[index + 1].has_direction(Direction.WEST):
            directions.append(Direction.EAST)
        if len(directions) < 2:
            raise ValueError("start tile is not connected to two pipes")
        return _TILE_BY_CONNECTIONS[frozenset(directions[:2])]

    def find_loop(self) -> list[int]:
        """Tile indices along the loop, starting and ending at the start tile."""
        start = self.start_index()
        start_tile = self.start_tile_type()
        first = next(
            direction
            for direction in (Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST)
            if start_tile.has_direction(direction)
        )
        current = self._step(start, first)
        src = first.opposite()
        loop = [start, current]
        while current != start:
            direction = self.tiles[current].exit_direction(src)
            current = self._step(current, direction)
            loop.append(current)
            src = direction.opposite()
        return loop

    def furthest_point_in_loop(self) -> int:
        return len(self.find_loop()) // 2

    def expanded_tiles(self) -> list[Tile]:
        """The map at double resolution, with gaps between pipes made visible.

        Only loop pipes are kept; everything else becomes ground. The result is
        ``2 * height - 1`` rows of ``2 * width - 1`` tiles.
        """
        loop = set(self.find_loop())
        start = self.start_index()
        start_type = self.start_tile_type()

        def connects(index: int, direction: Direction) -> bool:
            tile = start_type if index == start else self.tiles[index]
            return tile.has_direction(direction)

        width, height = self.width, self.height
        expanded: list[Tile] = []
        for row in range(height):
            for col in range(width):
                i = row * width + col
                expanded.append(self.tiles[i] if i in loop else Tile.GROUND)
                if col != width - 1:
                    joined = (
                        connects(i, Direction.EAST)
                        and connects(i + 1, Direction.WEST)
                        and i in loop
                        and i + 1 in loop
                    )
                    expanded.append(Tile.EAST_WEST if joined else Tile.GROUND)
            if row != height - 1:
                for col in range(width):
                    i = row * width + col
                    joined = (
                        connects(i, Direction.SOUTH)
                        and connects(i + width, Direction.NORTH)
                        and i in loop
                        and i + width in loop
                    )
                    expanded.append(Tile.NORTH_SOUTH if joined else Tile.GROUND)
                    if col != width - 1:
                        expanded.append(Tile.GROUND)
        return expanded

    def tiles_enclosed_by_loop(self) -> int:
        """Number of tiles not on the loop that cannot reach the map's edge."""
        expanded = self.expanded_tiles()
        loop = set(self.find_loop())
        ex_width = 2 * self.width - 1
        ex_height = 2 * self.height - 1
        outside = _ground_reaching_edge(expanded, ex_width, ex_height)
        return sum(
            1
            for row in range(self.height)
            for col in range(self.width)
            if row * self.width + col not in loop
            and (row * 2) * ex_width + col * 2 not in outside
        )


def _neighbors(index: int, width: int, height: int):
    row, col = divmod(index, width)
    if row > 0:
        yield index - width
    if row < height - 1:
        yield index + width
    if col > 0:
        yield index - 1
    if col < width - 1:
        yield index + 1


def _ground_reaching_edge(tiles: list[Tile], width: int, height: int) -> set[int]:
    stack = [
        index
        for index in range(width * height)
        if tiles[index] is Tile.GROUND
        and (
            index < width
            or index >= (height - 1) * width
            or index % width in (0, width - 1)
        )
    ]
    reached = set(stack)
    while stack:
        index = stack.pop()
        for neighbor in _neighbors(index, width, height):
            if neighbor not in reached and tiles[neighbor] is Tile.GROUND:
                reached.add(neighbor)
                stack.append(neighbor)
    return reached


def path_to_edge(start: int, tiles: list[Tile], width: int, height: int) -> bool:
    """Whether ground tiles lead from ``start`` to the border of the grid."""
    visited: set[int] = set()
    stack = [start]
    while stack:
        index = stack.pop()
        row, col = divmod(index, width)
        if row == 0 or row == height - 1 or col == 0 or col == width - 1:
            return True
        if index in visited:
            continue
        visited.add(index)
        stack.extend(
            neighbor
            for neighbor in _neighbors(index, width, height)
            if tiles[neighbor] is Tile.GROUND
        )
    return False


def part1(path: str | Path = "inputs/input10") -> str:
    pipe_map = PipeMap.parse(Path(path).read_text(encoding="utf-8"))
    return str(pipe_map.furthest_point_in_loop())


def part2(path: str | Path = "inputs/input10") -> str:
    pipe_map = PipeMap.parse(Path(path).read_text(encoding="utf-8"))
    return str(pipe_map.tiles_enclosed_by_loop())