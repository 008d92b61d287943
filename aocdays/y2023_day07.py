"""Camel Cards: ranking poker-like hands, with and without jokers."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path


class Card(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def from_char(cls, ch: str) -> Card:
        try:
            return _CARD_CHARS[ch]
        except KeyError:
            raise ValueError(f"invalid card {ch!r}") from None


class JokerCard(IntEnum):
    JOKER = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def from_char(cls, ch: str) -> JokerCard:
        try:
            return _JOKER_CHARS[ch]
        except KeyError:
            raise ValueError(f"invalid card {ch!r}") from None


_CARD_CHARS = dict(zip("23456789TJQKA", Card))
_JOKER_CHARS = dict(zip("J23456789TQKA", JokerCard))


class HandType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


def _split_line(line: str) -> tuple[str, int]:
    cards_str, sep, bid_str = line.partition(" ")
    if not sep:
        raise ValueError(f"invalid hand: {line!r}")
    if len(cards_str) != 5:
        raise ValueError(f"a hand holds five cards: {cards_str!r}")
    return cards_str, int(bid_str)


def _base_type(counts: Counter) -> HandType:
    distinct = len(counts)
    if distinct == 1:
        return HandType.FIVE_OF_A_KIND
    if distinct == 2:
        return HandType.FOUR_OF_A_KIND if 4 in counts.values() else HandType.FULL_HOUSE
    if distinct == 3:
        return HandType.THREE_OF_A_KIND if 3 in counts.values() else HandType.TWO_PAIR
    if distinct == 4:
        return HandType.ONE_PAIR
    return HandType.HIGH_CARD


@dataclass(frozen=True)
class Hand:
    cards: tuple[Card, ...]
    bid: int

    @classmethod
    def parse(cls, line: str) -> Hand:
        cards_str, bid = _split_line(line)
        return cls(tuple(Card.from_char(ch) for ch in cards_str), bid)

    def hand_type(self) -> HandType:
        return _base_type(Counter(self.cards))

    def _rank_key(self) -> tuple[HandType, tuple[int, ...]]:
        return self.hand_type(), tuple(self.cards)

    def __lt__(self, other: Hand) -> bool:
        return self._rank_key() < other._rank_key()

    def __gt__(self, other: Hand) -> bool:
        return self._rank_key() > other._rank_key()


@dataclass(frozen=True)
class JokerHand:
    cards: tuple[JokerCard, ...]
    bid: int

    @classmethod
    def parse(cls, line: str) -> JokerHand:
        cards_str, bid = _split_line(line)
        return cls(tuple(JokerCard.from_char(ch) for ch in cards_str), bid)

    def hand_type(self) -> HandType:
        counts = Counter(self.cards)
        jokers = counts[JokerCard.JOKER]
        base = _base_type(counts)
        if not jokers:
            return base
        if base in (HandType.FIVE_OF_A_KIND, HandType.FOUR_OF_A_KIND, HandType.FULL_HOUSE):
            return HandType.FIVE_OF_A_KIND
        if base is HandType.THREE_OF_A_KIND:
            return HandType.FOUR_OF_A_KIND
        if base is HandType.TWO_PAIR:
            return HandType.FULL_HOUSE if jokers == 1 else HandType.FOUR_OF_A_KIND
        if base is HandType.ONE_PAIR:
            return HandType.THREE_OF_A_KIND
        return HandType.ONE_PAIR

    def _rank_key(self) -> tuple[HandType, tuple[int, ...]]:
        return self.hand_type(), tuple(self.cards)

    def __lt__(self, other: JokerHand) -> bool:
        return self._rank_key() < other._rank_key()

    def __gt__(self, other: JokerHand) -> bool:
        return self._rank_key() > other._rank_key()


def parse_hands(text: str) -> list[Hand]:
    return [Hand.parse(line) for line in text.splitlines()]


def joker_parse_hands(text: str) -> list[JokerHand]:
    return [JokerHand.parse(line) for line in text.splitlines()]


def total_winnings(hands: list[Hand]) -> int:
    """Sum of each hand's bid times its rank, weakest hand ranked 1."""
    return sum(rank * hand.bid for rank, hand in enumerate(sorted(hands), start=1))


def joker_total_winnings(hands: list[JokerHand]) -> int:
    """Like :func:`total_winnings`, with ``J`` played as a joker."""
    return sum(rank * hand.bid for rank, hand in enumerate(sorted(hands), start=1))


def part1(path: str | Path = "inputs/input07") -> str:
    hands = parse_hands(Path(path).read_text(encoding="utf-8"))
    return str(total_winnings(hands))


def part2(path: str | Path = "inputs/input07") -> str:
    hands = joker_parse_hands(Path(path).read_text(encoding="utf-8"))
    return str(joker_total_winnings(hands))