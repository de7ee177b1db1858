"""Simulate rocks falling into a narrow chamber pushed by jets of gas."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Optional

CHAMBER_WIDTH = 7
SPAWN_X = 2
SPAWN_GAP = 3
REMEMBERED_ROWS = 100

PART1_ROCKS = 2022
PART2_ROCKS = 1_000_000_000_000

Cell = tuple[int, int]


class Push(Enum):
    """A jet of gas pushing the falling rock one unit sideways."""

    LEFT = "<"
    RIGHT = ">"


class RockType(Enum):
    """The five rock shapes, released in this order and then repeating."""

    HORIZONTAL = "horizontal"
    PLUS = "plus"
    CORNER = "corner"
    VERTICAL = "vertical"
    SQUARE = "square"

    @property
    def width(self) -> int:
        return _WIDTHS[self]

    @property
    def shape(self) -> tuple[Cell, ...]:
        """Cells of the rock relative to its bottom-left corner."""
        return _SHAPES[self]

    @property
    def following(self) -> RockType:
        return _FOLLOWING[self]


_WIDTHS = {
    RockType.HORIZONTAL: 4,
    RockType.PLUS: 3,
    RockType.CORNER: 3,
    RockType.VERTICAL: 1,
    RockType.SQUARE: 2,
}

_SHAPES = {
    RockType.HORIZONTAL: ((0, 0), (1, 0), (2, 0), (3, 0)),
    RockType.PLUS: ((0, 1), (1, 0), (1, 1), (1, 2), (2, 1)),
    RockType.CORNER: ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),
    RockType.VERTICAL: ((0, 0), (0, 1), (0, 2), (0, 3)),
    RockType.SQUARE: ((0, 0), (1, 0), (0, 1), (1, 1)),
}

_ORDER = list(RockType)
_FOLLOWING = {ty: _ORDER[(i + 1) % len(_ORDER)] for i, ty in enumerate(_ORDER)}


@dataclass
class Rock:
    """A rock of a given type whose bottom-left corner is at (x, y)."""

    ty: RockType
    x: int
    y: int

    def points(self, dx: int = 0, dy: int = 0) -> Iterator[Cell]:
        """Cells the rock would occupy if shifted by (dx, dy)."""
        return ((px + self.x + dx, py + self.y + dy) for px, py in self.ty.shape)


class Room:
    """The chamber: settled rock, at most one falling rock and the jet pattern."""

    def __init__(self, pattern: Iterable[Push]) -> None:
        self.pattern = list(pattern)
        if not self.pattern:
            raise ValueError("The jet pattern must not be empty")
        self.falling_rock: Optional[Rock] = None
        self.stationary_rock_points: set[Cell] = set()
        self.rocks_dropped_count = 0
        self.next_rock_type = RockType.HORIZONTAL
        self.pattern_index = 0
        self._height = 0

    def release_rock(self) -> None:
        """Start the next rock falling, three rows above the tower."""
        if self.falling_rock is not None:
            raise RuntimeError("Only one rock can be falling at a time")
        ty = self.next_rock_type
        self.next_rock_type = ty.following
        self.falling_rock = Rock(ty, SPAWN_X, self.height() + SPAWN_GAP)

    def _collides(self, rock: Rock, dx: int, dy: int) -> bool:
        return any(p in self.stationary_rock_points for p in rock.points(dx, dy))

    def drop_rock(self) -> None:
        """Let the falling rock be pushed and fall until it comes to rest."""
        rock = self.falling_rock
        if rock is None:
            raise RuntimeError("Can't drop a rock that isn't falling")
        width = rock.ty.width
        while True:
            push = self.pattern[self.pattern_index]
            if push is Push.LEFT:
                if rock.x > 0 and not self._collides(rock, -1, 0):
                    rock.x -= 1
            elif rock.x + width - 1 < CHAMBER_WIDTH - 1 and not self._collides(rock, 1, 0):
                rock.x += 1
            self.pattern_index = (self.pattern_index + 1) % len(self.pattern)

            if rock.y == 0 or self._collides(rock, 0, -1):
                break
            rock.y -= 1
        self._solidify()

    def _solidify(self) -> None:
        rock = self.falling_rock
        if rock is None:
            raise RuntimeError("Can't solidify a rock that isn't falling")
        points = list(rock.points())
        self.stationary_rock_points.update(points)
        self._height = max(self._height, max(y for _, y in points) + 1)
        self.falling_rock = None
        self.rocks_dropped_count += 1

        # Only the top of the tower can still be reached by falling rocks.
        cutoff = max(self._height - REMEMBERED_ROWS, 0)
        self.stationary_rock_points = {
            p for p in self.stationary_rock_points if p[1] >= cutoff
        }

    def height(self) -> int:
        """Height of the tower of settled rock."""
        return self._height

    def state_key(self) -> tuple[RockType, int, tuple[Cell, ...]]:
        """A key identifying the falling rock, jet position and remembered tower shape."""
        if self.falling_rock is None:
            raise RuntimeError("No rock is falling")
        min_y = min((y for _, y in self.stationary_rock_points), default=0)
        points = tuple(sorted((x, y - min_y) for x, y in self.stationary_rock_points))
        return (self.falling_rock.ty, self.pattern_index, points)

    def __str__(self) -> str:
        falling = set(self.falling_rock.points()) if self.falling_rock else set()
        lines = []
        for y in range(self.height() + 5, -1, -1):
            row = "".join(
                "#" if (x, y) in self.stationary_rock_points
                else "@" if (x, y) in falling
                else "."
                for x in range(CHAMBER_WIDTH)
            )
            lines.append(f"|{row}|\n")
        lines.append("+-------+\n")
        return "".join(lines)


def parse_pattern(contents: str) -> list[Push]:
    """Read the jet pattern, ignoring every character other than `<` and `>`."""
    return [Push(ch) for ch in contents if ch in "<>"]


def run_simulation(pattern: Iterable[Push], num_rocks: int) -> int:
    """Height of the tower after the given number of rocks have come to rest."""
    if num_rocks < 1:
        raise ValueError("At least one rock must be dropped")
    room = Room(pattern)
    seen: dict[tuple[RockType, int, tuple[Cell, ...]], tuple[int, int]] = {}
    found_repeat = False
    total_dropped = 0
    height_from_repeats = 0
    while True:
        room.release_rock()

        if not found_repeat:
            key = room.state_key()
            if key in seen:
                found_repeat = True
                previous_count, previous_height = seen[key]
                repeat_height = room.height() - previous_height
                repeat_rocks = room.rocks_dropped_count - previous_count
                repeats = (num_rocks - 1 - total_dropped) // repeat_rocks
                total_dropped += repeats * repeat_rocks
                height_from_repeats += repeats * repeat_height
            else:
                seen[key] = (room.rocks_dropped_count, room.height())

        room.drop_rock()
        total_dropped += 1
        if total_dropped == num_rocks:
            break
    return room.height() + height_from_repeats


def part1(contents: str) -> str:
    return str(run_simulation(parse_pattern(contents), PART1_ROCKS))


def part2(contents: str) -> str:
    return str(run_simulation(parse_pattern(contents), PART2_ROCKS))