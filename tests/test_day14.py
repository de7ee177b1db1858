import pytest

from aoc2022.day14 import (
    parse_path,
    parse_paths,
    part1,
    part2,
    rock_points,
    simulate_sand,
)

CONTENTS = "498,4 -> 498,6 -> 496,6\n503,4 -> 502,4 -> 502,9 -> 494,9\n"


def test_parse_paths():
    paths = parse_paths(CONTENTS)
    assert paths == [
        [(498, 4), (498, 6), (496, 6)],
        [(503, 4), (502, 4), (502, 9), (494, 9)],
    ]


def test_parse_path():
    assert parse_path("498,4 -> 498,6 -> 496,6") == [(498, 4), (498, 6), (496, 6)]


@pytest.mark.parametrize("line", ["498,4 ->", "a,b", "498,4 - 498,6", ""])
def test_parse_path_rejects_invalid(line):
    with pytest.raises(ValueError):
        parse_path(line)


def test_rock_points():
    points = rock_points(parse_paths(CONTENTS))
    expected = {
        (498, 4), (498, 5), (498, 6), (497, 6), (496, 6),
        (503, 4), (502, 4), (502, 5), (502, 6), (502, 7), (502, 8), (502, 9),
        (501, 9), (500, 9), (499, 9), (498, 9), (497, 9), (496, 9), (495, 9),
        (494, 9),
    }
    assert len(points) == 20
    assert points == expected


def test_simulate_sand_no_floor():
    assert len(simulate_sand(parse_paths(CONTENTS), False)) == 24


def test_simulate_sand_floor():
    resting = simulate_sand(parse_paths(CONTENTS), True)
    assert len(resting) == 93
    assert (500, 0) in resting


def test_simulate_sand_without_rocks():
    with pytest.raises(ValueError):
        simulate_sand([], False)


def test_parts():
    assert part1(CONTENTS) == "24"
    assert part2(CONTENTS) == "93"