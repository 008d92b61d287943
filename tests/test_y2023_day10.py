import pytest

from aocdays.y2023_day10 import (
    Direction,
    PipeMap,
    Tile,
    part1,
    part2,
    path_to_edge,
)

SIMPLE = ".....\n.S-7.\n.|.|.\n.L-J.\n.....\n"


def test_parse():
    G = Tile.GROUND
    assert PipeMap.parse(SIMPLE) == PipeMap(
        tiles=[
            G, G, G, G, G,
            G, Tile.START, Tile.EAST_WEST, Tile.SOUTH_WEST, G,
            G, Tile.NORTH_SOUTH, G, Tile.NORTH_SOUTH, G,
            G, Tile.NORTH_EAST, Tile.EAST_WEST, Tile.NORTH_WEST, G,
            G, G, G, G, G,
        ],
        width=5,
    )


def test_parse_rejects_invalid_tile():
    with pytest.raises(ValueError):
        PipeMap.parse("..x\n")


def test_start_tile_type():
    pipe_map = PipeMap.parse(SIMPLE)
    assert pipe_map.start_index() == 6
    assert pipe_map.start_tile_type() is Tile.SOUTH_EAST


def test_find_loop_closes_at_start():
    loop = PipeMap.parse(SIMPLE).find_loop()
    assert loop[0] == loop[-1] == 6
    assert len(loop) == 9
    assert len(set(loop)) == 8


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-L|F7\n7S-7|\nL|7||\n-L-J|\nL|-JF\n", 4),
        ("7-F7-\n.FJ|7\nSJLL7\n|F--J\nLJ.LJ\n", 8),
    ],
)
def test_furthest_point_in_loop(text, expected):
    assert PipeMap.parse(text).furthest_point_in_loop() == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "...........\n.S-------7.\n.|F-----7|.\n.||.....||.\n.||.....||.\n"
            ".|L-7.F-J|.\n.|..|.|..|.\n.L--J.L--J.\n...........\n",
            4,
        ),
        (
            "..........\n.S------7.\n.|F----7|.\n.||....||.\n.||....||.\n"
            ".|L-7F-J|.\n.|..||..|.\n.L--JL--J.\n..........\n",
            4,
        ),
        (
            ".F----7F7F7F7F-7....\n.|F--7||||||||FJ....\n.||.FJ||||||||L7....\n"
            "FJL7L7LJLJ||LJ.L-7..\nL--J.L7...LJS7F-7L7.\n....F-J..F7FJ|L7L7L7\n"
            "....L7.F7||L7|.L7L7|\n.....|FJLJ|FJ|F7|.LJ\n....FJL-7.||.||||...\n"
            "....L---J.LJ.LJLJ...\n",
            8,
        ),
        (
            "FF7FSF7F7F7F7F7F---7\nL|LJ||||||||||||F--J\nFL-7LJLJ||||||LJL-77\n"
            "F--JF--7||LJLJ7F7FJ-\nL---JF-JLJ.||-FJLJJ7\n|F|F-JF---7F7-L7L|7|\n"
            "|FFJF7L7F-JF7|JL---7\n7-L-JL7||F7|L7F-7F7|\nL.L7LFJ|||||FJL7||LJ\n"
            "L7JLJL-JLJLJL--JLJ.L\n",
            10,
        ),
    ],
)
def test_tiles_enclosed_by_loop(text, expected):
    assert PipeMap.parse(text).tiles_enclosed_by_loop() == expected


def test_expanded_tiles_shape():
    expanded = PipeMap.parse(SIMPLE).expanded_tiles()
    assert len(expanded) == 9 * 9
    # The centre of the loop stays ground; the joint right of the start is a pipe.
    assert expanded[4 * 9 + 4] is Tile.GROUND
    assert expanded[2 * 9 + 3] is Tile.EAST_WEST


def test_direction_opposite():
    assert Direction.NORTH.opposite() is Direction.SOUTH
    assert Direction.EAST.opposite() is Direction.WEST


def test_tile_exit_direction():
    assert Tile.NORTH_EAST.exit_direction(Direction.NORTH) is Direction.EAST
    assert Tile.SOUTH_WEST.exit_direction(Direction.WEST) is Direction.SOUTH
    with pytest.raises(ValueError):
        Tile.NORTH_SOUTH.exit_direction(Direction.EAST)


def test_tile_has_direction():
    assert Tile.SOUTH_EAST.has_direction(Direction.SOUTH)
    assert not Tile.GROUND.has_direction(Direction.NORTH)


def test_path_to_edge():
    W = Tile.NORTH_SOUTH
    G = Tile.GROUND
    walled = [
        G, G, G, G, G,
        G, W, W, W, G,
        G, W, G, W, G,
        G, W, W, W, G,
        G, G, G, G, G,
    ]
    assert path_to_edge(12, walled, 5, 5) is False
    open_grid = [G] * 25
    assert path_to_edge(12, open_grid, 5, 5) is True


def test_parts_read_file(tmp_path):
    path = tmp_path / "input10"
    path.write_text(SIMPLE, encoding="utf-8")
    assert part1(path) == "4"
    assert part2(path) == "1"