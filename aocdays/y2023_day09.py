"""Extrapolating value histories by repeated differences."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class History:
    values: tuple[int, ...]

    def _difference_sequences(self) -> list[list[int]]:
        if not self.values:
            raise ValueError("empty history")
        sequences = [list(self.values)]
        while True:
            seq = sequences[-1]
            diffs = [b - a for a, b in zip(seq, seq[1:])]
            if all(d == 0 for d in diffs):
                return sequences
            sequences.append(diffs)

    def extrapolate(self) -> int:
        """The next value of the history."""
        value = 0
        for seq in reversed(self._difference_sequences()):
            value = seq[-1] + value
        return value

    def extrapolate_backwards(self) -> int:
        """The value that would precede the history."""
        value = 0
        for seq in reversed(self._difference_sequences()):
            value = seq[0] - value
        return value


def parse_histories(text: str) -> list[History]:
    return [History(tuple(int(n) for n in line.split())) for line in text.splitlines()]


def part1(path: str | Path = "inputs/input09") -> str:
    histories = parse_histories(Path(path).read_text(encoding="utf-8"))
    return str(sum(history.extrapolate() for history in histories))


def part2(path: str | Path = "inputs/input09") -> str:
    histories = parse_histories(Path(path).read_text(encoding="utf-8"))
    return str(sum(history.extrapolate_backwards() for history in histories))