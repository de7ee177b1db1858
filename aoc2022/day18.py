"""Measure the surface area of a droplet made of unit cubes."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable

Cube = tuple[int, int, int]

NEIGHBORS: tuple[Cube, ...] = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)
_POSITIVE_NEIGHBORS: tuple[Cube, ...] = ((1, 0, 0), (0, 1, 0), (0, 0, 1))


def parse_cube(line: str) -> Cube:
    """Parse `x,y,z` of non-negative integers."""
    parts = line.split(",")
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        raise ValueError(f"Failed to parse cube: {line!r}")
    x, y, z = (int(p) for p in parts)
    return (x, y, z)


def parse_cubes(contents: str) -> list[Cube]:
    """Parse one cube per line; a single trailing newline is allowed."""
    text = contents[:-1] if contents.endswith("\n") else contents
    return [parse_cube(line) for line in text.split("\n")]


def _shift(cube: Cube, delta: Cube) -> Cube:
    return (cube[0] + delta[0], cube[1] + delta[1], cube[2] + delta[2])


def surface_area(cubes: list[Cube]) -> int:
    """Faces of the cubes not touching another cube in the list."""
    counts = Counter(cubes)
    touching = sum(
        2 * count * counts[_shift(cube, delta)]
        for cube, count in counts.items()
        for delta in _POSITIVE_NEIGHBORS
    )
    return 6 * len(cubes) - touching


def _bounds(cubes: set[Cube]) -> tuple[Cube, Cube]:
    if not cubes:
        raise ValueError("No cubes given")
    low = tuple(min(c[axis] for c in cubes) - 1 for axis in range(3))
    high = tuple(max(c[axis] for c in cubes) + 1 for axis in range(3))
    return low, high  # type: ignore[return-value]


def _in_bounds(cube: Cube, low: Cube, high: Cube) -> bool:
    return all(lo <= v <= hi for v, lo, hi in zip(cube, low, high))


def _flood(start: Cube, cubes: set[Cube], low: Cube, high: Cube, target=None):
    """Breadth-first search through air within the bounding box."""
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == target:
            return True, visited
        for delta in NEIGHBORS:
            neighbor = _shift(current, delta)
            if (
                _in_bounds(neighbor, low, high)
                and neighbor not in cubes
                and neighbor not in visited
            ):
                visited.add(neighbor)
                queue.append(neighbor)
    return False, visited


def is_exterior(start: Cube, cubes: Iterable[Cube]) -> bool:
    """Whether air at start connects to the outside of the droplet."""
    cube_set = set(cubes)
    low, high = _bounds(cube_set)
    found, _ = _flood(start, cube_set, low, high, target=low)
    return found


def exterior_surface_area(cubes: list[Cube]) -> int:
    """Faces of the cubes that touch air connected to the outside."""
    cube_set = set(cubes)
    low, high = _bounds(cube_set)
    _, outside = _flood(low, cube_set, low, high)
    return sum(
        1
        for cube in cubes
        for delta in NEIGHBORS
        if _shift(cube, delta) not in cube_set and _shift(cube, delta) in outside
    )


def part1(contents: str) -> str:
    return str(surface_area(parse_cubes(contents)))


def part2(contents: str) -> str:
    return str(exterior_surface_area(parse_cubes(contents)))