"""Count visible trees in a height grid and find the best scenic score."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

Grid = list[list[int]]


class Direction(Enum):
    """A direction to look in, as a (row, column) step."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)


def parse_tree_grid(contents: str) -> Grid:
    """Parse rows of single-digit tree heights."""
    lines = contents.split("\n")
    if not lines[0]:
        raise ValueError("The tree grid must start with a row of heights")
    grid: Grid = []
    for line in lines:
        if not line:
            continue
        if not (line.isascii() and line.isdigit()):
            raise ValueError(f"Failed to parse tree height in row {line!r}")
        grid.append([int(ch) for ch in line])
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("All rows of the tree grid must have the same length")
    return grid


def _check_position(grid: Grid, row: int, col: int) -> None:
    if not (0 <= row < len(grid) and 0 <= col < len(grid[0])):
        raise IndexError(f"Position ({row}, {col}) is outside the grid")


def _is_edge(grid: Grid, row: int, col: int) -> bool:
    return row in (0, len(grid) - 1) or col in (0, len(grid[0]) - 1)


def _line_of_sight(grid: Grid, row: int, col: int, direction: Direction) -> Iterator[int]:
    """Heights of the trees from the given tree outwards to the grid edge."""
    dr, dc = direction.value
    r, c = row + dr, col + dc
    while 0 <= r < len(grid) and 0 <= c < len(grid[0]):
        yield grid[r][c]
        r, c = r + dr, c + dc


def is_visible_from(grid: Grid, row: int, col: int, direction: Direction) -> bool:
    """Whether every tree between this one and the edge in the direction is shorter."""
    _check_position(grid, row, col)
    height = grid[row][col]
    return all(other < height for other in _line_of_sight(grid, row, col, direction))


def is_tree_visible(grid: Grid, row: int, col: int) -> bool:
    """Whether the tree can be seen from outside the grid in any direction."""
    _check_position(grid, row, col)
    if _is_edge(grid, row, col):
        return True
    return any(is_visible_from(grid, row, col, direction) for direction in Direction)


def count_visible_trees(grid: Grid) -> int:
    return sum(
        is_tree_visible(grid, row, col)
        for row in range(len(grid))
        for col in range(len(grid[0]))
    )


def viewing_distance(grid: Grid, row: int, col: int, direction: Direction) -> int:
    """Trees seen in the direction, up to and including the first as tall or taller."""
    _check_position(grid, row, col)
    height = grid[row][col]
    distance = 0
    for other in _line_of_sight(grid, row, col, direction):
        distance += 1
        if other >= height:
            break
    return distance


def scenic_score(grid: Grid, row: int, col: int) -> int:
    """Product of the viewing distances in all four directions; zero on the edge."""
    _check_position(grid, row, col)
    if _is_edge(grid, row, col):
        return 0
    score = 1
    for direction in Direction:
        score *= viewing_distance(grid, row, col, direction)
    return score


def scenic_scores(grid: Grid) -> list[int]:
    """Scenic score of every tree, row by row."""
    return [
        scenic_score(grid, row, col)
        for row in range(len(grid))
        for col in range(len(grid[0]))
    ]


def part1(contents: str) -> str:
    return str(count_visible_trees(parse_tree_grid(contents)))


def part2(contents: str) -> str:
    return str(max(scenic_scores(parse_tree_grid(contents))))