"""Part numbers and gears in an engine schematic."""

from __future__ import annotations

from pathlib import Path

NumberPosition = tuple[int, int, int]

_DIGITS = frozenset("0123456789")


def input_to_grid(text: str) -> list[str]:
    return text.splitlines()


def get_number_positions(grid: list[str]) -> list[NumberPosition]:
    """Every run of digits as ``(row, start_col, end_col)``, inclusive."""
    positions = []
    for row, line in enumerate(grid):
        start_col = None
        for col, ch in enumerate(line):
            if ch in _DIGITS:
                if start_col is None:
                    start_col = col
            elif start_col is not None:
                positions.append((row, start_col, col - 1))
                start_col = None
        if start_col is not None:
            positions.append((row, start_col, len(line) - 1))
    return positions


def position_to_number(grid: list[str], row: int, start_col: int, end_col: int) -> int:
    return int(grid[row][start_col : end_col + 1])


def _is_symbol(ch: str) -> bool:
    return ch not in _DIGITS and ch != "."


def is_part_number(grid: list[str], row: int, start_col: int, end_col: int) -> bool:
    """Whether the number is adjacent, diagonals included, to a symbol."""
    span_start, span_end = start_col, end_col
    line = grid[row]
    if start_col > 0:
        span_start -= 1
        if line[start_col - 1] != ".":
            return True
    if end_col < len(line) - 1:
        span_end += 1
        if line[end_col + 1] != ".":
            return True
    neighbor_rows = []
    if row > 0:
        neighbor_rows.append(grid[row - 1])
    if row < len(grid) - 1:
        neighbor_rows.append(grid[row + 1])
    return any(
        _is_symbol(other[col])
        for other in neighbor_rows
        for col in range(span_start, span_end + 1)
    )


def get_part_numbers(grid: list[str]) -> list[int]:
    return [
        position_to_number(grid, row, start, end)
        for row, start, end in get_number_positions(grid)
        if is_part_number(grid, row, start, end)
    ]


def _numbers_in_row(
    grid: list[str],
    positions: list[NumberPosition],
    row: int,
    span_start: int,
    span_end: int,
) -> list[int]:
    numbers = []
    col = span_start
    while col <= span_end:
        found = next(
            (p for p in positions if p[0] == row and p[1] <= col <= p[2]),
            None,
        )
        if found is None:
            col += 1
        else:
            numbers.append(position_to_number(grid, *found))
            col = found[2] + 1
    return numbers


def _is_gear(
    grid: list[str], positions: list[NumberPosition], row: int, col: int
) -> tuple[int, int] | None:
    numbers = []
    span_start = span_end = col
    if col > 0:
        span_start -= 1
        left = next((p for p in positions if p[0] == row and p[2] == col - 1), None)
        if left is not None:
            numbers.append(position_to_number(grid, *left))
    if col < len(grid[row]) - 1:
        span_end += 1
        right = next((p for p in positions if p[0] == row and p[1] == col + 1), None)
        if right is not None:
            numbers.append(position_to_number(grid, *right))
    if row > 0:
        numbers.extend(_numbers_in_row(grid, positions, row - 1, span_start, span_end))
    if row < len(grid) - 1:
        numbers.extend(_numbers_in_row(grid, positions, row + 1, span_start, span_end))
    if len(numbers) == 2:
        return numbers[0], numbers[1]
    return None


def get_gears(grid: list[str]) -> list[tuple[int, int]]:
    """Pairs of numbers adjacent to a ``*`` that touches exactly two numbers."""
    positions = get_number_positions(grid)
    gears = []
    for row, line in enumerate(grid):
        for col, ch in enumerate(line):
            if ch == "*":
                gear = _is_gear(grid, positions, row, col)
                if gear is not None:
                    gears.append(gear)
    return gears


def get_gear_ratios(grid: list[str]) -> list[int]:
    return [first * second for first, second in get_gears(grid)]


def part1(path: str | Path = "inputs/input03") -> str:
    grid = input_to_grid(Path(path).read_text(encoding="utf-8"))
    return str(sum(get_part_numbers(grid)))


def part2(path: str | Path = "inputs/input03") -> str:
    grid = input_to_grid(Path(path).read_text(encoding="utf-8"))
    return str(sum(get_gear_ratios(grid)))