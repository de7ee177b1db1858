"""Locate a distress beacon from sensors that report their nearest beacon."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

PART1_ROW = 2_000_000
PART2_MAX_COORDS = 4_000_000
TUNING_MULTIPLIER = 4_000_000

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_INT = re.compile(r"-?[0-9]+")
_POINT = re.compile(r"x=(-?[0-9]+), y=(-?[0-9]+)")
_SENSOR = re.compile(
    r"Sensor at (x=-?[0-9]+, y=-?[0-9]+): closest beacon is at (x=-?[0-9]+, y=-?[0-9]+)"
)

Range = tuple[int, int]


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def manhattan_distance(self, other: Point) -> int:
        return abs(other.x - self.x) + abs(other.y - self.y)


@dataclass(frozen=True)
class Sensor:
    position: Point
    nearest_beacon: Point

    def distance_to_beacon(self) -> int:
        return self.position.manhattan_distance(self.nearest_beacon)

    def row_coverage(self, y: int) -> Optional[Range]:
        """Inclusive range of x coordinates this sensor covers on row y, if any."""
        reach = self.distance_to_beacon() - abs(y - self.position.y)
        start, end = self.position.x - reach, self.position.x + reach
        return (start, end) if end >= start else None


def parse_int(text: str) -> int:
    """Parse an optionally negative decimal integer."""
    if not _INT.fullmatch(text):
        raise ValueError(f"Failed to parse coordinate: {text!r}")
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"Coordinate out of range: {text!r}")
    return value


def parse_point(text: str) -> Point:
    """Parse `x=<int>, y=<int>`."""
    match = _POINT.fullmatch(text)
    if not match:
        raise ValueError(f"Failed to parse point: {text!r}")
    return Point(parse_int(match.group(1)), parse_int(match.group(2)))


def parse_sensor(line: str) -> Sensor:
    match = _SENSOR.fullmatch(line)
    if not match:
        raise ValueError(f"Failed to parse sensor: {line!r}")
    return Sensor(parse_point(match.group(1)), parse_point(match.group(2)))


def parse_sensors(contents: str) -> list[Sensor]:
    """Parse one sensor per line; a single trailing newline is allowed."""
    text = contents[:-1] if contents.endswith("\n") else contents
    return [parse_sensor(line) for line in text.split("\n")]


def combine_ranges(ranges: list[Range]) -> list[Range]:
    """Merge overlapping or touching inclusive ranges into disjoint ones, in order."""
    points = sorted(
        [(start, 0) for start, _ in ranges] + [(end, 1) for _, end in ranges]
    )
    disjoint: list[Range] = []
    current_start: Optional[int] = None
    open_count = 0
    for value, is_end in points:
        if not is_end:
            open_count += 1
            if disjoint and disjoint[-1][1] == value - 1:
                current_start = disjoint.pop()[0]
            elif current_start is None:
                current_start = value
        else:
            open_count -= 1
            if open_count == 0:
                assert current_start is not None
                disjoint.append((current_start, value))
                current_start = None
    return disjoint


def measure_ranges(ranges: list[Range]) -> int:
    """Number of distinct integers covered by the ranges."""
    return sum(end - start + 1 for start, end in combine_ranges(ranges))


def row_coverage_ranges(y: int, sensors: list[Sensor]) -> list[Range]:
    return [r for r in (sensor.row_coverage(y) for sensor in sensors) if r is not None]


def row_coverage(y: int, sensors: list[Sensor]) -> int:
    """Positions on row y where a beacon cannot be, excluding the known beacon."""
    covered = measure_ranges(row_coverage_ranges(y, sensors))
    beacon_rows = {s.nearest_beacon.y for s in sensors if s.nearest_beacon.y == y}
    return covered - len(beacon_rows)


def range_overlap(a: Range, b: Range) -> Optional[Range]:
    start, end = max(a[0], b[0]), min(a[1], b[1])
    return (start, end) if start <= end else None


def beacon_location(max_coords: int, sensors: list[Sensor]) -> Point:
    """Find the only uncovered position with both coordinates in [0, max_coords]."""
    for y in range(max_coords):
        restricted = [
            overlap
            for overlap in (
                range_overlap((0, max_coords), r)
                for r in combine_ranges(row_coverage_ranges(y, sensors))
            )
            if overlap is not None
        ]
        if restricted == [(0, max_coords)]:
            continue
        if restricted:
            if len(restricted) != 2:
                raise ValueError(f"Ambiguous beacon location on row {y}")
            return Point(restricted[0][1] + 1, y)
    raise ValueError("Failed to locate beacon")


def tuning_frequency(beacon: Point) -> int:
    return beacon.x * TUNING_MULTIPLIER + beacon.y


def part1(contents: str) -> str:
    return str(row_coverage(PART1_ROW, parse_sensors(contents)))


def part2(contents: str) -> str:
    beacon = beacon_location(PART2_MAX_COORDS, parse_sensors(contents))
    return str(tuning_frequency(beacon))