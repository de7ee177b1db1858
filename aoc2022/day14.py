"""Simulate sand pouring into a cave of rock paths."""

from __future__ import annotations

import re

Point = tuple[int, int]
Path = list[Point]

SAND_SOURCE: Point = (500, 0)

_POINT = r"\d+,\d+"
_PATH = re.compile(rf"{_POINT}(?: -> {_POINT})*")


def parse_path(line: str) -> Path:
    """Parse a line such as `498,4 -> 498,6 -> 496,6` into its corner points."""
    if not _PATH.fullmatch(line) or not line.isascii():
        raise ValueError(f"Failed to parse path: {line!r}")
    points = []
    for point in line.split(" -> "):
        x, y = point.split(",")
        points.append((int(x), int(y)))
    return points


def parse_paths(contents: str) -> list[Path]:
    """Parse one path per line; a single trailing newline is allowed."""
    text = contents[:-1] if contents.endswith("\n") else contents
    return [parse_path(line) for line in text.split("\n")]


def rock_points(paths: list[Path]) -> set[Point]:
    """Every point covered by the straight segments between consecutive corners."""
    points: set[Point] = set()
    for path in paths:
        for (x0, y0), (x1, y1) in zip(path, path[1:]):
            for x in range(min(x0, x1), max(x0, x1) + 1):
                for y in range(min(y0, y1), max(y0, y1) + 1):
                    points.add((x, y))
    return points


def simulate_sand(paths: list[Path], has_floor: bool) -> set[Point]:
    """Drop sand until it falls into the abyss or blocks the source; return resting sand."""
    rocks = rock_points(paths)
    if not rocks:
        raise ValueError("No rock points to pour sand onto")
    max_rock_y = max(y for _, y in rocks)
    floor_y = max_rock_y + 2

    def is_free(point: Point) -> bool:
        if point in rocks or point in resting:
            return False
        return not (has_floor and point[1] == floor_y)

    resting: set[Point] = set()
    while True:
        x, y = SAND_SOURCE
        while True:
            for option in ((x, y + 1), (x - 1, y + 1), (x + 1, y + 1)):
                if is_free(option):
                    x, y = option
                    break
            else:
                resting.add((x, y))
                if (x, y) == SAND_SOURCE:
                    return resting
                break
            if not has_floor and y > max_rock_y:
                return resting


def part1(contents: str) -> str:
    return str(len(simulate_sand(parse_paths(contents), False)))


def part2(contents: str) -> str:
    return str(len(simulate_sand(parse_paths(contents), True)))