import pytest

from aoc2022.day08 import (
    Direction,
    count_visible_trees,
    is_tree_visible,
    is_visible_from,
    parse_tree_grid,
    part1,
    part2,
    scenic_score,
    scenic_scores,
    viewing_distance,
)

EXAMPLE = "30373\n25512\n65332\n33549\n35390\n"


@pytest.fixture
def grid():
    return parse_tree_grid(EXAMPLE)


def test_parse(grid):
    assert grid == [
        [3, 0, 3, 7, 3],
        [2, 5, 5, 1, 2],
        [6, 5, 3, 3, 2],
        [3, 3, 5, 4, 9],
        [3, 5, 3, 9, 0],
    ]


def test_parse_rejects_non_digit():
    with pytest.raises(ValueError):
        parse_tree_grid("30x73\n")


def test_parse_rejects_leading_blank_line():
    with pytest.raises(ValueError):
        parse_tree_grid("\n30373\n")


def test_parse_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_tree_grid("303\n25\n")


def test_is_tree_visible(grid):
    assert is_tree_visible(grid, 1, 1) is True


@pytest.mark.parametrize(
    "row, col, expected",
    [
        (0, 0, True),
        (4, 4, True),
        (1, 2, True),
        (1, 3, False),
        (2, 1, True),
        (2, 2, False),
        (2, 3, True),
        (3, 2, True),
        (3, 1, False),
    ],
)
def test_visibility_of_example_trees(grid, row, col, expected):
    assert is_tree_visible(grid, row, col) is expected


def test_is_visible_from_directions(grid):
    assert is_visible_from(grid, 1, 1, Direction.LEFT) is True
    assert is_visible_from(grid, 1, 1, Direction.UP) is True
    assert is_visible_from(grid, 1, 1, Direction.RIGHT) is False
    assert is_visible_from(grid, 1, 1, Direction.DOWN) is False


def test_count_visible_trees(grid):
    assert count_visible_trees(grid) == 21


def test_tree_viewing_distance(grid):
    assert viewing_distance(grid, 1, 2, Direction.UP) == 1
    assert viewing_distance(grid, 1, 2, Direction.LEFT) == 1
    assert viewing_distance(grid, 1, 2, Direction.RIGHT) == 2
    assert viewing_distance(grid, 1, 2, Direction.DOWN) == 2

    assert viewing_distance(grid, 3, 2, Direction.UP) == 2
    assert viewing_distance(grid, 3, 2, Direction.LEFT) == 2
    assert viewing_distance(grid, 3, 2, Direction.RIGHT) == 2
    assert viewing_distance(grid, 3, 2, Direction.DOWN) == 1


def test_viewing_distance_at_edge_is_zero(grid):
    assert viewing_distance(grid, 0, 2, Direction.UP) == 0


def test_tree_scenic_score(grid):
    assert scenic_score(grid, 1, 2) == 4
    assert scenic_score(grid, 3, 2) == 8


def test_scenic_scores_edges_are_zero(grid):
    scores = scenic_scores(grid)
    assert len(scores) == 25
    assert scores[:5] == [0, 0, 0, 0, 0]
    assert max(scores) == 8


def test_position_outside_grid(grid):
    with pytest.raises(IndexError):
        is_tree_visible(grid, -1, 0)


def test_parts():
    assert part1(EXAMPLE) == "21"
    assert part2(EXAMPLE) == "8"