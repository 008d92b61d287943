"""Seed almanac mapping seeds through categories to locations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

_NO_LOCATION = 2**64 - 1

Interval = tuple[int, int]


class Category(Enum):
    SEED = "seed"
    SOIL = "soil"
    FERTILIZER = "fertilizer"
    WATER = "water"
    LIGHT = "light"
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    LOCATION = "location"

    @classmethod
    def from_name(cls, name: str) -> Category:
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"invalid category {name!r}") from None


@dataclass(frozen=True)
class MapRange:
    dst_start: int
    src_start: int
    length: int

    def src_range(self) -> range:
        """Source values covered by this range."""
        return range(self.src_start, self.src_start + self.length)


@dataclass
class Almanac:
    seeds: list[int]
    maps: dict[tuple[Category, Category], list[MapRange]] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> Almanac:
        """Parse the seeds line followed by blank-separated ``x-to-y map:`` blocks."""
        lines = text.splitlines()
        if not lines:
            raise ValueError("empty almanac")
        seeds = [int(n) for n in lines[0].split()[1:]]

        maps: dict[tuple[Category, Category], list[MapRange]] = {}
        current: list[MapRange] | None = None
        for line in lines[2:]:
            if not line:
                current = None
            elif current is not None:
                parts = line.split()
                if len(parts) < 3:
                    raise ValueError(f"invalid map range: {line!r}")
                dst, src, length = (int(p) for p in parts[:3])
                current.append(MapRange(dst, src, length))
            else:
                names = line.split()[0].split("-")
                if len(names) < 3:
                    raise ValueError(f"invalid map header: {line!r}")
                key = (Category.from_name(names[0]), Category.from_name(names[2]))
                current = maps[key] = []
        return cls(seeds, maps)

    def _next_map(self, category: Category) -> tuple[Category, list[MapRange]]:
        for (src, dst), ranges in self.maps.items():
            if src is category:
                return dst, ranges
        raise KeyError(f"no map from category {category.value!r}")

    def seed_location(self, seed: int) -> int:
        """Follow ``seed`` through every map until it becomes a location."""
        category = Category.SEED
        value = seed
        while category is not Category.LOCATION:
            category, ranges = self._next_map(category)
            for map_range in ranges:
                if value in map_range.src_range():
                    value = map_range.dst_start + (value - map_range.src_start)
                    break
        return value

    def min_initial_seed_location(self) -> int:
        return min(self.seed_location(seed) for seed in self.seeds)

    def min_initial_seed_location_ranges(self) -> int:
        """Lowest location when the seeds line lists ``(start, length)`` pairs."""
        locations = []
        for start, length in zip(self.seeds[::2], self.seeds[1::2]):
            current: list[Interval] = [(start, start + length - 1)]
            category = Category.SEED
            while category is not Category.LOCATION:
                category, ranges = self._next_map(category)
                current = _map_intervals(current, ranges)
            locations.append(min((lo for lo, _ in current), default=_NO_LOCATION))
        if not locations:
            raise ValueError("no seed ranges")
        return min(locations)


def _map_intervals(intervals: list[Interval], ranges: list[MapRange]) -> list[Interval]:
    pending = list(intervals)
    mapped: list[Interval] = []
    while pending:
        lo, hi = pending.pop()
        for map_range in ranges:
            src = map_range.src_range()
            if not src:
                continue
            src_lo, src_hi = src.start, src.stop - 1
            if src_lo <= hi and src_hi >= lo:
                overlap_lo = max(src_lo, lo)
                overlap_hi = min(src_hi, hi)
                mapped.append(
                    (
                        map_range.dst_start + overlap_lo - src_lo,
                        map_range.dst_start + overlap_hi - src_lo,
                    )
                )
                if overlap_lo > lo:
                    pending.append((lo, overlap_lo - 1))
                if hi > overlap_hi:
                    pending.append((overlap_hi + 1, hi))
                break
        else:
            mapped.append((lo, hi))
    return mapped


def part1(path: str | Path = "inputs/input05") -> str:
    almanac = Almanac.parse(Path(path).read_text(encoding="utf-8"))
    return str(almanac.min_initial_seed_location())


def part2(path: str | Path = "inputs/input05") -> str:
    almanac = Almanac.parse(Path(path).read_text(encoding="utf-8"))
    return str(almanac.min_initial_seed_location_ranges())