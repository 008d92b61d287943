"""Calibration values hidden in lines of text."""

from __future__ import annotations

from pathlib import Path

_ASCII_DIGITS = "0123456789"

_WRITTEN_DIGITS: tuple[tuple[str, int], ...] = (
    ("one", 1),
    ("two", 2),
    ("three", 3),
    ("four", 4),
    ("five", 5),
    ("six", 6),
    ("seven", 7),
    ("eight", 8),
    ("nine", 9),
    *((digit, int(digit)) for digit in _ASCII_DIGITS),
)


def first_and_last_ascii_digits(text: str) -> int:
    """Sum, over all lines, the two-digit number made of the first and last digit."""
    total = 0
    for line in text.splitlines():
        digits = [ch for ch in line if ch in _ASCII_DIGITS]
        if not digits:
            raise ValueError(f"no digit in line: {line!r}")
        total += int(digits[0]) * 10 + int(digits[-1])
    return total


def _first_and_last_value(line: str) -> tuple[int, int]:
    firsts = [
        (position, value)
        for word, value in _WRITTEN_DIGITS
        if (position := line.find(word)) != -1
    ]
    if not firsts:
        raise ValueError(f"no digit in line: {line!r}")
    lasts = [
        (line.rfind(word), value) for word, value in _WRITTEN_DIGITS if word in line
    ]
    first = min(firsts, key=lambda item: item[0])[1]
    last = max(lasts, key=lambda item: item[0])[1]
    return first, last


def first_and_last_ascii_and_written_digits(text: str) -> int:
    """Like :func:`first_and_last_ascii_digits`, also counting spelled-out digits."""
    total = 0
    for line in text.splitlines():
        first, last = _first_and_last_value(line)
        total += first * 10 + last
    return total


def part1(path: str | Path = "inputs/input01") -> str:
    return str(first_and_last_ascii_digits(Path(path).read_text(encoding="utf-8")))


def part2(path: str | Path = "inputs/input01") -> str:
    return str(
        first_and_last_ascii_and_written_digits(Path(path).read_text(encoding="utf-8"))
    )