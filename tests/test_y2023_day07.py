import pytest

from aocdays.y2023_day07 import (
    Card,
    Hand,
    HandType,
    JokerHand,
    joker_parse_hands,
    joker_total_winnings,
    parse_hands,
    part1,
    part2,
    total_winnings,
)

EXAMPLE = "32T3K 765\nT55J5 684\nKK677 28\nKTJJT 220\nQQQJA 483\n"


def test_parse():
    assert Hand.parse("32T3K 765") == Hand(
        (Card.THREE, Card.TWO, Card.TEN, Card.THREE, Card.KING), 765
    )


@pytest.mark.parametrize(
    "line, expected",
    [
        ("AAAAA 0", HandType.FIVE_OF_A_KIND),
        ("AA8AA 0", HandType.FOUR_OF_A_KIND),
        ("23332 0", HandType.FULL_HOUSE),
        ("TTT98 0", HandType.THREE_OF_A_KIND),
        ("23432 0", HandType.TWO_PAIR),
        ("A23A4 0", HandType.ONE_PAIR),
        ("23456 0", HandType.HIGH_CARD),
    ],
)
def test_hand_type(line, expected):
    assert Hand.parse(line).hand_type() == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("KTJJT 0", HandType.FOUR_OF_A_KIND),
        ("T55J5 0", HandType.FOUR_OF_A_KIND),
        ("32T3K 0", HandType.ONE_PAIR),
        ("JJJJJ 0", HandType.FIVE_OF_A_KIND),
    ],
)
def test_joker_hand_type(line, expected):
    assert JokerHand.parse(line).hand_type() == expected


def test_total_winnings():
    assert total_winnings(parse_hands(EXAMPLE)) == 6440


def test_joker_total_winnings():
    assert joker_total_winnings(joker_parse_hands(EXAMPLE)) == 5905


def test_invalid_card():
    with pytest.raises(ValueError):
        Hand.parse("32X3K 1")


def test_wrong_hand_size():
    with pytest.raises(ValueError):
        Hand.parse("32T3 1")


def test_parts_from_file(tmp_path):
    path = tmp_path / "input07"
    path.write_text(EXAMPLE)
    assert part1(path) == "6440"
    assert part2(path) == "5905"