"""Monkeys shouting numbers and arithmetic results at each other."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def apply(self, left: float, right: float) -> float:
        """Combine two operands with this operator using float semantics."""
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUBTRACT:
            return left - right
        if self is Operator.MULTIPLY:
            return left * right
        return _divide(left, right)


def _divide(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


@dataclass(frozen=True)
class Operation:
    operator: Operator
    operands: tuple[str, str]


@dataclass(frozen=True)
class Monkey:
    name: str
    output: Operation | float


_MONKEY_RE = re.compile(r"([A-Za-z]+): (?:(\d+)|([A-Za-z]+) (.) ([A-Za-z]+))")


def parse_monkey(line: str) -> Monkey:
    """Parse one ``name: value`` or ``name: a op b`` line."""
    match = _MONKEY_RE.fullmatch(line)
    if match is None:
        raise ValueError(f"Failed to parse monkey: {line!r}")
    name, number, left, op, right = match.groups()
    if number is not None:
        return Monkey(name, float(number))
    try:
        operator = Operator(op)
    except ValueError:
        raise ValueError(f"invalid operator: {op}") from None
    return Monkey(name, Operation(operator, (left, right)))


def parse_monkeys(contents: str) -> list[Monkey]:
    """Parse newline-separated monkeys, allowing one trailing newline."""
    body = contents[:-1] if contents.endswith("\n") else contents
    return [parse_monkey(line) for line in body.split("\n")]


def calc_root_number(
    monkeys: list[Monkey],
    humn_override: float | None = None,
    root_override: bool = False,
) -> float:
    """Evaluate the number the ``root`` monkey yells.

    With ``root_override`` the root monkey subtracts its operands instead.
    """
    by_name: dict[str, Monkey] = {}
    for monkey in monkeys:
        by_name.setdefault(monkey.name, monkey)

    values: dict[str, float] = {}
    in_progress: set[str] = set()
    stack: list[tuple[str, bool]] = [("root", False)]
    while stack:
        name, expanded = stack.pop()
        if name in values:
            continue
        monkey = by_name.get(name)
        if monkey is None:
            raise KeyError(name)
        output = monkey.output
        if not isinstance(output, Operation):
            if humn_override is not None and name == "humn":
                values[name] = humn_override
            else:
                values[name] = output
            continue
        if expanded:
            left, right = (values[operand] for operand in output.operands)
            if root_override and name == "root":
                values[name] = left - right
            else:
                values[name] = output.operator.apply(left, right)
            in_progress.discard(name)
            continue
        if name in in_progress:
            raise ValueError(f"cyclic dependency involving monkey {name!r}")
        in_progress.add(name)
        stack.append((name, True))
        stack.extend((operand, False) for operand in output.operands if operand not in values)
    return values["root"]


def bisect_humn_input(monkeys: list[Monkey]) -> float:
    """Find the ``humn`` value for which both root operands are equal."""
    a = 0.0
    b = sys.float_info.max
    c = (a + b) / 2.0
    while True:
        c_value = calc_root_number(monkeys, c, True)
        if c - a < 0.01:
            break
        a_value = calc_root_number(monkeys, a, True)
        b_value = calc_root_number(monkeys, b, True)
        if a_value < 0.0 and b_value > 0.0:
            if c_value > 0.0:
                b = c
            else:
                a = c
        elif c_value > 0.0:
            a = c
        else:
            b = c
        c = (a + b) / 2.0
    return float(math.floor(c + 0.5))


def _format_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def part1(path: str | Path = "inputs/input21") -> str:
    monkeys = parse_monkeys(Path(path).read_text(encoding="utf-8"))
    return _format_number(calc_root_number(monkeys))


def part2(path: str | Path = "inputs/input21") -> str:
    monkeys = parse_monkeys(Path(path).read_text(encoding="utf-8"))
    return _format_number(bisect_humn_input(monkeys))