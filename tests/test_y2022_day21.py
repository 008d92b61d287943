import pytest

from aocdays.y2022_day21 import (
    Monkey,
    Operation,
    Operator,
    bisect_humn_input,
    calc_root_number,
    parse_monkey,
    parse_monkeys,
    part1,
    part2,
)

EXAMPLE = (
    "root: pppw + sjmn\ndbpl: 5\ncczh: sllz + lgvd\nzczc: 2\nptdq: humn - dvpt\n"
    "dvpt: 3\nlfqf: 4\nhumn: 5\nljgn: 2\nsjmn: drzm * dbpl\nsllz: 4\n"
    "pppw: cczh / lfqf\nlgvd: ljgn * ptdq\ndrzm: hmdt - zczc\nhmdt: 32\n"
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("root: pppw + sjmn", Monkey("root", Operation(Operator.ADD, ("pppw", "sjmn")))),
        ("ptdq: humn - dvpt", Monkey("ptdq", Operation(Operator.SUBTRACT, ("humn", "dvpt")))),
        ("sjmn: drzm * dbpl", Monkey("sjmn", Operation(Operator.MULTIPLY, ("drzm", "dbpl")))),
        ("pppw: cczh / lfqf", Monkey("pppw", Operation(Operator.DIVIDE, ("cczh", "lfqf")))),
        ("dbpl: 5", Monkey("dbpl", 5.0)),
    ],
)
def test_parse_monkey(line, expected):
    assert parse_monkey(line) == expected


def test_parse_monkey_invalid_operator():
    with pytest.raises(ValueError):
        parse_monkey("root: pppw % sjmn")


def test_parse_monkeys():
    monkeys = parse_monkeys("root: pppw + sjmn\ndbpl: 5\n")
    assert monkeys == [
        Monkey("root", Operation(Operator.ADD, ("pppw", "sjmn"))),
        Monkey("dbpl", 5.0),
    ]


def test_parse_monkeys_rejects_blank_lines():
    with pytest.raises(ValueError):
        parse_monkeys("dbpl: 5\n\nroot: 3\n")


def test_calc_root_number():
    assert calc_root_number(parse_monkeys(EXAMPLE), None, False) == 152.0


def test_calc_root_number_with_root_override_is_zero_at_answer():
    monkeys = parse_monkeys(EXAMPLE)
    assert calc_root_number(monkeys, 301.0, True) == 0.0


def test_calc_root_number_without_root():
    with pytest.raises(KeyError):
        calc_root_number(parse_monkeys("dbpl: 5\n"))


def test_bisect_humn_input():
    assert bisect_humn_input(parse_monkeys(EXAMPLE)) == 301.0


def test_operator_apply():
    assert Operator.DIVIDE.apply(32.0, 4.0) == 8.0
    assert Operator.SUBTRACT.apply(2.0, 5.0) == -3.0


def test_parts_read_file(tmp_path):
    path = tmp_path / "input21"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert part1(path) == "152"
    assert part2(path) == "301"