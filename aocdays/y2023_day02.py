"""Games of drawing coloured cubes from a bag."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CubeSet = tuple[int, int, int]

_COLOR_INDEX = {"red": 0, "green": 1, "blue": 2}


@dataclass(frozen=True)
class Game:
    sets: tuple[CubeSet, ...]

    @classmethod
    def parse(cls, line: str) -> Game:
        """Parse ``Game N: 3 blue, 4 red; ...`` into (red, green, blue) sets."""
        _, sep, set_strs = line.partition(":")
        if not sep:
            raise ValueError(f"no colon in line: {line!r}")
        sets = []
        for set_str in set_strs.split(";"):
            counts = [0, 0, 0]
            for cubes_str in set_str.split(","):
                count_str, space, color = cubes_str.strip().partition(" ")
                if not space:
                    raise ValueError(f"invalid cubes: {cubes_str!r}")
                if color not in _COLOR_INDEX:
                    raise ValueError(f"invalid color {color}")
                counts[_COLOR_INDEX[color]] = int(count_str)
            sets.append((counts[0], counts[1], counts[2]))
        return cls(tuple(sets))

    def is_possible(self, counts: CubeSet) -> bool:
        """Whether every drawn set fits within ``counts``."""
        return all(
            all(drawn <= limit for drawn, limit in zip(cube_set, counts))
            for cube_set in self.sets
        )

    def minimal_set(self) -> CubeSet:
        """Fewest cubes of each colour that make the game possible."""
        red, green, blue = (max((s[i] for s in self.sets), default=0) for i in range(3))
        return red, green, blue

    def minimal_set_power(self) -> int:
        red, green, blue = self.minimal_set()
        return red * green * blue


def parse_games(text: str) -> list[Game]:
    return [Game.parse(line) for line in text.splitlines()]


def possible_games_id_sum(games: list[Game], counts: CubeSet) -> int:
    """Sum of the 1-based ids of games possible with ``counts``."""
    return sum(index for index, game in enumerate(games, start=1) if game.is_possible(counts))


def powers_sum(games: list[Game]) -> int:
    return sum(game.minimal_set_power() for game in games)


def part1(path: str | Path = "inputs/input02") -> str:
    games = parse_games(Path(path).read_text(encoding="utf-8"))
    return str(possible_games_id_sum(games, (12, 13, 14)))


def part2(path: str | Path = "inputs/input02") -> str:
    games = parse_games(Path(path).read_text(encoding="utf-8"))
    return str(powers_sum(games))