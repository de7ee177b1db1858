"""Simulate a rope of knots following its head across a grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Point = tuple[int, int]

_MAX_STEPS = 255


class Direction(Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def delta(self) -> Point:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Motion:
    """Move the head a number of steps in one direction."""

    direction: Direction
    num_steps: int

    @classmethod
    def parse(cls, line: str) -> Motion:
        parts = line.split(" ")
        if len(parts) != 2:
            raise ValueError(f"Invalid motion: {line!r}")
        letter, steps = parts
        if not (steps.isascii() and steps.isdigit()) or int(steps) > _MAX_STEPS:
            raise ValueError(f"Failed to parse number of steps: {steps!r}")
        try:
            direction = Direction(letter)
        except ValueError:
            raise ValueError(f"Invalid direction: {letter!r}") from None
        return cls(direction, int(steps))


def _sign(value: int) -> int:
    return 1 if value > 0 else -1


class Rope:
    """A chain of knots starting at the origin; records where the tail has been."""

    def __init__(self, length: int) -> None:
        if length < 1:
            raise ValueError("A rope needs at least one knot")
        self.knots: list[Point] = [(0, 0)] * length
        self.tail_positions: set[Point] = {self.knots[-1]}

    def move_head(self, direction: Direction) -> None:
        x, y = self.knots[0]
        dx, dy = direction.delta
        self.knots[0] = (x + dx, y + dy)

    def move_knot(self, index: int) -> None:
        """Pull knot `index` one step towards the knot in front of it if they are apart."""
        if index <= 0:
            raise ValueError("The head is not pulled by another knot")
        if self.knots_are_adjacent(index, index - 1):
            return
        x, y = self.knots[index]
        lead_x, lead_y = self.knots[index - 1]
        dx, dy = lead_x - x, lead_y - y
        if dx == 0:
            if abs(dy) == 2:
                y += _sign(dy)
        elif dy == 0:
            if abs(dx) == 2:
                x += _sign(dx)
        else:
            x += _sign(dx)
            y += _sign(dy)
        self.knots[index] = (x, y)
        self.tail_positions.add(self.knots[-1])

    def apply_motion(self, motion: Motion) -> None:
        for _ in range(motion.num_steps):
            self.move_head(motion.direction)
            for index in range(1, len(self.knots)):
                self.move_knot(index)

    def knots_are_adjacent(self, i: int, j: int) -> bool:
        """Whether two knots overlap or touch, diagonals included."""
        (xi, yi), (xj, yj) = self.knots[i], self.knots[j]
        return abs(xi - xj) <= 1 and abs(yi - yj) <= 1

    def tail_positions_count(self) -> int:
        return len(self.tail_positions)


def parse_motions(contents: str) -> list[Motion]:
    return [Motion.parse(line) for line in contents.split("\n") if line]


def _simulate(contents: str, length: int) -> str:
    rope = Rope(length)
    for motion in parse_motions(contents):
        rope.apply_motion(motion)
    return str(rope.tail_positions_count())


def part1(contents: str) -> str:
    return _simulate(contents, 2)


def part2(contents: str) -> str:
    return _simulate(contents, 10)