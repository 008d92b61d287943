import pytest

from aocdays.y2022_day23 import Direction, ElfMap, part1, part2

SMALL = ".....\n..##.\n..#..\n.....\n..##.\n.....\n"
LARGER = "....#..\n..###.#\n#...#.#\n.#...##\n#.###..\n##.#.##\n.#..#..\n"


def test_parse_map():
    elf_map = ElfMap.parse(SMALL)
    assert len(elf_map.elves) == 5
    assert set(elf_map.elves) == {(1, 2), (1, 3), (2, 2), (4, 2), (4, 3)}


def test_move_elves():
    elf_map = ElfMap.parse(SMALL)
    elf_map.move_elves()
    assert set(elf_map.elves) == {(0, 2), (0, 3), (2, 2), (3, 3), (4, 2)}
    assert elf_map.directions == [
        Direction.SOUTH,
        Direction.WEST,
        Direction.EAST,
        Direction.NORTH,
    ]


def test_move_elves_3_rounds():
    elf_map = ElfMap.parse(SMALL)
    for _ in range(3):
        elf_map.move_elves()
    assert set(elf_map.elves) == {(0, 2), (1, 4), (2, 0), (3, 4), (5, 2)}


def test_move_preserves_elf_count():
    elf_map = ElfMap.parse(LARGER)
    before = len(elf_map.elves)
    for _ in range(5):
        elf_map.move_elves()
    assert len(set(elf_map.elves)) == before


def test_get_ground_tiles_count():
    elf_map = ElfMap.parse(LARGER)
    for _ in range(10):
        elf_map.move_elves()
    assert elf_map.ground_tiles_count() == 110


def test_num_rounds_to_finalise():
    assert ElfMap.parse(LARGER).num_rounds_to_finalise() == 20


def test_smallest_rectangle_of_parsed_map():
    assert ElfMap.parse(SMALL).smallest_rectangle() == (1, 4, 2, 3)


def test_smallest_rectangle_requires_elves():
    with pytest.raises(ValueError):
        ElfMap.parse(".....\n").smallest_rectangle()


def test_isolated_elf_does_not_move():
    elf_map = ElfMap.parse("...\n.#.\n...\n")
    assert elf_map.move_elves() == 0
    assert elf_map.elves == [(1, 1)]


def test_parts_read_file(tmp_path):
    path = tmp_path / "input23"
    path.write_text(LARGER, encoding="utf-8")
    assert part1(path) == "110"
    assert part2(path) == "20"