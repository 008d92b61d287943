"""Toy boat races: how long to hold the button to beat the record."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Race:
    time_allowed: int
    """Time allowed in milliseconds."""
    record_distance: int
    """Record distance in millimetres."""

    def simulate(self, button_hold_time: int) -> int:
        """Distance travelled when the button is held for ``button_hold_time``."""
        if button_hold_time > self.time_allowed:
            raise ValueError(
                f"button hold time {button_hold_time} exceeds time allowed {self.time_allowed}"
            )
        return (self.time_allowed - button_hold_time) * button_hold_time

    def ways_to_win(self) -> int:
        """Number of whole hold times that beat the record distance."""
        a = -1.0
        b = float(self.time_allowed)
        c = -(float(self.record_distance) + 0.0001)
        root = math.sqrt(b * b - 4.0 * a * c)
        limit = float(self.time_allowed)
        low = min(max((-b + root) / (2.0 * a), 0.0), limit)
        high = min(max((-b - root) / (2.0 * a), 0.0), limit)
        if low > high:
            low, high = high, low
        return max(0, int(math.floor(high) - math.ceil(low) + 1.0))


def _first_two_lines(text: str) -> tuple[str, str]:
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    return lines[0], lines[1]


def parse_races(text: str) -> list[Race]:
    """Parse the ``Time:`` and ``Distance:`` columns into separate races."""
    time_line, distance_line = _first_two_lines(text)
    return [
        Race(int(time_str), int(dist_str))
        for time_str, dist_str in zip(time_line.split()[1:], distance_line.split()[1:])
    ]


def _joined_number(line: str) -> int:
    _, sep, value = line.partition(":")
    if not sep:
        raise ValueError(f"no colon in line: {line!r}")
    return int(value.replace(" ", ""))


def parse_race_ignore_whitespace(text: str) -> Race:
    """Read each line's numbers as one number with the spaces removed."""
    time_line, distance_line = _first_two_lines(text)
    return Race(_joined_number(time_line), _joined_number(distance_line))


def product_of_ways_to_win(races: list[Race]) -> int:
    return math.prod(race.ways_to_win() for race in races)


def part1(path: str | Path = "inputs/input06") -> str:
    races = parse_races(Path(path).read_text(encoding="utf-8"))
    return str(product_of_ways_to_win(races))


def part2(path: str | Path = "inputs/input06") -> str:
    race = parse_race_ignore_whitespace(Path(path).read_text(encoding="utf-8"))
    return str(race.ways_to_win())