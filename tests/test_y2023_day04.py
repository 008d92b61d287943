import pytest

from aocdays.y2023_day04 import Card, parse_cards, part1, part2, total_cards

EXAMPLE = (
    "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53\n"
    "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19\n"
    "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1\n"
    "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83\n"
    "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36\n"
    "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11\n"
)


def test_parse_card():
    card = Card.parse("Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53")
    assert card == Card(matching_numbers=4)


def test_card_points():
    cards = parse_cards(EXAMPLE)
    assert [card.points() for card in cards] == [8, 2, 2, 1, 0, 0]


def test_total_cards():
    assert total_cards(parse_cards(EXAMPLE)) == 30


def test_total_cards_past_end_raises():
    with pytest.raises(ValueError):
        total_cards([Card(2)])


def test_invalid_card_raises():
    with pytest.raises(ValueError):
        Card.parse("Card 1: 1 2 3")


def test_parts_read_file(tmp_path):
    path = tmp_path / "input04"
    path.write_text(EXAMPLE)
    assert part1(path) == "13"
    assert part2(path) == "30"