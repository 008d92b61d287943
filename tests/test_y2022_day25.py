import pytest

from aocdays.y2022_day25 import (
    SnafuDigit,
    SnafuNumber,
    parse_numbers,
    part1,
    part2,
)

D = SnafuDigit


def test_parse_numbers():
    numbers = parse_numbers("1=-0-2\n12111\n2=0=\n")
    assert len(numbers) == 3
    assert numbers[0] == SnafuNumber(
        (D.ONE, D.DOUBLE_MINUS, D.MINUS, D.ZERO, D.MINUS, D.TWO)
    )
    assert numbers[1] == SnafuNumber((D.ONE, D.TWO, D.ONE, D.ONE, D.ONE))
    assert numbers[2] == SnafuNumber((D.TWO, D.DOUBLE_MINUS, D.ZERO, D.DOUBLE_MINUS))


def test_to_decimal():
    contents = "1=-0-2\n12111\n2=0=\n21\n2=01\n111\n20012\n112\n1=-1=\n1-12\n12\n1=\n122\n"
    numbers = parse_numbers(contents)
    assert len(numbers) == 13
    assert [n.to_decimal() for n in numbers] == [
        1747, 906, 198, 11, 201, 31, 1257, 32, 353, 107, 7, 3, 37,
    ]


def test_from_decimal():
    decimals = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 15, 20, 2022, 12345, 314159265]
    expected = [
        "1", "2", "1=", "1-", "10", "11", "12", "2=", "2-", "20",
        "1=0", "1-0", "1=11-2", "1-0---0", "1121-1110-1=0",
    ]
    assert [str(SnafuNumber.from_decimal(n)) for n in decimals] == expected


@pytest.mark.parametrize("number", [1, 7, 42, 999, 2022, 4890, 123456789])
def test_round_trip(number):
    assert SnafuNumber.from_decimal(number).to_decimal() == number


def test_digit_conversions():
    assert SnafuDigit.from_char("=") is D.DOUBLE_MINUS
    assert SnafuDigit.from_value(-1) is D.MINUS
    assert str(D.TWO) == "2"


def test_invalid_digit_value():
    with pytest.raises(ValueError):
        SnafuDigit.from_value(3)


def test_invalid_character():
    with pytest.raises(ValueError):
        parse_numbers("12x\n")


def test_empty_line_rejected():
    with pytest.raises(ValueError):
        parse_numbers("12\n\n1=\n")


def test_parts_read_file(tmp_path):
    path = tmp_path / "input25"
    path.write_text(
        "1=-0-2\n12111\n2=0=\n21\n2=01\n111\n20012\n112\n1=-1=\n1-12\n12\n1=\n122\n",
        encoding="utf-8",
    )
    assert part1(path) == "2=-1=0"
    assert part2(path) == ""