"""Scratchcards with winning numbers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Card:
    matching_numbers: int

    @classmethod
    def parse(cls, line: str) -> Card:
        """Parse ``Card N: winning | yours`` and count the matches."""
        _, sep, numbers = line.partition(": ")
        winning_str, bar, your_str = numbers.partition(" | ")
        if not sep or not bar:
            raise ValueError(f"invalid card: {line!r}")
        winning = {int(n) for n in winning_str.split()}
        yours = {int(n) for n in your_str.split()}
        return cls(len(winning & yours))

    def points(self) -> int:
        if self.matching_numbers == 0:
            return 0
        return 2 ** (self.matching_numbers - 1)


def parse_cards(text: str) -> list[Card]:
    return [Card.parse(line) for line in text.splitlines()]


def total_cards(cards: list[Card]) -> int:
    """Total scratchcards held once every won copy has been counted."""
    counts = [1] * len(cards)
    for index, card in enumerate(cards):
        end = index + 1 + card.matching_numbers
        if end > len(cards):
            raise ValueError(f"card {index + 1} wins copies past the end of the table")
        for won in range(index + 1, end):
            counts[won] += counts[index]
    return sum(counts)


def part1(path: str | Path = "inputs/input04") -> str:
    cards = parse_cards(Path(path).read_text(encoding="utf-8"))
    return str(sum(card.points() for card in cards))


def part2(path: str | Path = "inputs/input04") -> str:
    cards = parse_cards(Path(path).read_text(encoding="utf-8"))
    return str(total_cards(cards))