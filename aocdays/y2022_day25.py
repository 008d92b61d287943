"""Balanced base-five numbers written with the digits 2, 1, 0, - and =."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SnafuDigit(Enum):
    TWO = 2
    ONE = 1
    ZERO = 0
    MINUS = -1
    DOUBLE_MINUS = -2

    @classmethod
    def from_char(cls, ch: str) -> SnafuDigit:
        """Digit written as ``ch``."""
        try:
            return _FROM_CHAR[ch]
        except KeyError:
            raise ValueError(f"invalid SNAFU digit: {ch!r}") from None

    @classmethod
    def from_value(cls, value: int) -> SnafuDigit:
        """Digit with numeric value ``value`` (from -2 to 2)."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"invalid digit value: {value}") from None

    def __str__(self) -> str:
        return _TO_CHAR[self]


_TO_CHAR = {
    SnafuDigit.TWO: "2",
    SnafuDigit.ONE: "1",
    SnafuDigit.ZERO: "0",
    SnafuDigit.MINUS: "-",
    SnafuDigit.DOUBLE_MINUS: "=",
}
_FROM_CHAR = {ch: digit for digit, ch in _TO_CHAR.items()}


@dataclass(frozen=True)
class SnafuNumber:
    digits: tuple[SnafuDigit, ...]

    @classmethod
    def parse(cls, text: str) -> SnafuNumber:
        """Parse a non-empty string of SNAFU digits."""
        if not text:
            raise ValueError("empty SNAFU number")
        return cls(tuple(SnafuDigit.from_char(ch) for ch in text))

    @classmethod
    def from_decimal(cls, number: int) -> SnafuNumber:
        """Write ``number`` in SNAFU, most significant digit first."""
        power = 0
        while number > 2 * 5**power:
            power += 1
        max_diff = sum(2 * 5**i for i in range(power))
        coefficient = 1 if 2 * 5**power - max_diff > number else 2
        digits = [SnafuDigit.from_value(coefficient)]
        remainder = number - coefficient * 5**power

        for power in range(power - 1, -1, -1):
            max_rest = sum(2 * 5**i for i in range(power))
            coefficient = -2
            while abs(remainder - coefficient * 5**power) > max_rest:
                coefficient += 1
            digits.append(SnafuDigit.from_value(coefficient))
            remainder -= coefficient * 5**power

        return cls(tuple(digits))

    def to_decimal(self) -> int:
        result = 0
        for digit in self.digits:
            result = result * 5 + digit.value
        return result

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self.digits)


def parse_numbers(contents: str) -> list[SnafuNumber]:
    """Parse newline-separated SNAFU numbers, allowing one trailing newline."""
    body = contents[:-1] if contents.endswith("\n") else contents
    return [SnafuNumber.parse(line) for line in body.split("\n")]


def part1(path: str | Path = "inputs/input25") -> str:
    numbers = parse_numbers(Path(path).read_text(encoding="utf-8"))
    total = sum(number.to_decimal() for number in numbers)
    return str(SnafuNumber.from_decimal(total))


def part2(path: str | Path = "inputs/input25") -> str:
    """The last day has no second puzzle: validate the input, answer nothing."""
    numbers = parse_numbers(Path(path).read_text(encoding="utf-8"))
    return "".join(str(number) for number in numbers[:0])