"""Find the shortest climb across a heightmap."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

Position = tuple[int, int]

_TOP = ord("z") - ord("a")


@dataclass
class Heightmap:
    """Heights by (row, column), with the start and goal positions."""

    heights: list[list[int]]
    start: Position
    goal: Position

    @property
    def rows(self) -> int:
        return len(self.heights)

    @property
    def cols(self) -> int:
        return len(self.heights[0])

    def _positions(self) -> Iterable[Position]:
        return ((r, c) for r in range(self.rows) for c in range(self.cols))

    def neighbors(self, position: Position) -> list[Position]:
        """Positions from which one could climb to this one, walking backwards.

        A neighbour qualifies if it is at most one step lower than this position.
        """
        row, col = position
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Position {position} is outside the heightmap")
        lowest = self.heights[row][col] - 1
        candidates = [(row, col - 1), (row, col + 1), (row - 1, col), (row + 1, col)]
        return [
            (r, c)
            for r, c in candidates
            if 0 <= r < self.rows and 0 <= c < self.cols and self.heights[r][c] >= lowest
        ]

    def distances_from_goal(self) -> dict[Position, int]:
        """Steps needed from each position that can reach the goal."""
        distances = {self.goal: 0}
        queue = deque([self.goal])
        while queue:
            current = queue.popleft()
            for neighbor in self.neighbors(current):
                if neighbor not in distances:
                    distances[neighbor] = distances[current] + 1
                    queue.append(neighbor)
        return distances

    def shortest_path_length(self) -> Optional[int]:
        """Steps from the start to the goal, or None if it cannot be reached."""
        return self.distances_from_goal().get(self.start)

    def best_start(self) -> Optional[int]:
        """Fewest steps to the goal from any lowest position, or None if none reach it."""
        distances = self.distances_from_goal()
        reachable = [
            distances[pos]
            for pos in self._positions()
            if self.heights[pos[0]][pos[1]] == 0 and pos in distances
        ]
        return min(reachable, default=None)


def _height(ch: str) -> int:
    if "a" <= ch <= "z":
        return ord(ch) - ord("a")
    if ch == "S":
        return 0
    if ch == "E":
        return _TOP
    raise ValueError(f"Invalid height: {ch!r}")


def parse_heightmap(contents: str) -> Heightmap:
    """Parse rows of letters, with `S` marking the start and `E` the goal."""
    lines = contents.split("\n")
    if not lines[0]:
        raise ValueError("The heightmap must start with a row of heights")
    heights: list[list[int]] = []
    start: Optional[Position] = None
    goal: Optional[Position] = None
    for row, line in enumerate(line for line in lines if line):
        for col, ch in enumerate(line):
            if ch == "S":
                start = (row, col)
            elif ch == "E":
                goal = (row, col)
        heights.append([_height(ch) for ch in line])
    if any(len(row) != len(heights[0]) for row in heights):
        raise ValueError("All rows of the heightmap must have the same length")
    if start is None:
        raise ValueError("Failed to find start position")
    if goal is None:
        raise ValueError("Failed to find goal position")
    return Heightmap(heights, start, goal)


def part1(contents: str) -> str:
    length = parse_heightmap(contents).shortest_path_length()
    if length is None:
        raise ValueError("Failed to find path")
    return str(length)


def part2(contents: str) -> str:
    length = parse_heightmap(contents).best_start()
    if length is None:
        raise ValueError("No lowest position reaches the goal")
    return str(length)