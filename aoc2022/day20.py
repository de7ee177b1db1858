"""Decrypt grove coordinates by mixing a circular list of numbers."""

from __future__ import annotations

import re
from typing import Any

DECRYPTION_KEY = 811_589_153
MIX_ROUNDS = 10
COORDINATE_OFFSETS = (1000, 2000, 3000)

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_NUMBER = re.compile(r"[+-]?[0-9]+")


def parse_numbers(contents: str) -> list[int]:
    """Parse one integer per line."""
    lines = contents.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    numbers = []
    for line in lines:
        text = line[:-1] if line.endswith("\r") else line
        if not _NUMBER.fullmatch(text):
            raise ValueError(f"Failed to parse number: {line!r}")
        value = int(text)
        if not _I64_MIN <= value <= _I64_MAX:
            raise ValueError(f"Number out of range: {line!r}")
        numbers.append(value)
    return numbers


def move_left(items: list[Any], index: int) -> None:
    """Swap the element one step to the left, wrapping from the front to the back."""
    other = index - 1 if index > 0 else len(items) - 1
    items[index], items[other] = items[other], items[index]


def move_right(items: list[Any], index: int) -> None:
    """Swap the element one step to the right, wrapping from the back to the front."""
    other = index + 1 if index < len(items) - 1 else 0
    items[index], items[other] = items[other], items[index]


def _reduced(items: list[Any], count: int) -> int:
    if count < 0:
        raise ValueError("The move count must not be negative")
    if len(items) < 2:
        raise ValueError("Can't move an element within fewer than two elements")
    return count % (len(items) - 1)


def move_left_n_times(items: list[Any], index: int, count: int) -> None:
    """Apply `move_left` to the element `count` times, following it as it moves."""
    steps = _reduced(items, count)
    if steps <= index:
        items.insert(index - steps, items.pop(index))
        return
    # Reach the front, wrap to the back, then carry on leftwards.
    items.insert(0, items.pop(index))
    items[0], items[-1] = items[-1], items[0]
    remaining = steps - index - 1
    items.insert(len(items) - 1 - remaining, items.pop())


def move_right_n_times(items: list[Any], index: int, count: int) -> None:
    """Apply `move_right` to the element `count` times, following it as it moves."""
    steps = _reduced(items, count)
    to_end = len(items) - 1 - index
    if steps <= to_end:
        items.insert(index + steps, items.pop(index))
        return
    # Reach the back, wrap to the front, then carry on rightwards.
    items.append(items.pop(index))
    items[0], items[-1] = items[-1], items[0]
    remaining = steps - to_end - 1
    items.insert(remaining, items.pop(0))


def mix_numbers(numbers: list[int], rounds: int) -> list[int]:
    """Move each number by its value, in original order, for the given rounds."""
    order = list(range(len(numbers)))
    for _ in range(rounds):
        for original, number in enumerate(numbers):
            position = order.index(original)
            if number < 0:
                move_left_n_times(order, position, -number)
            elif number > 0:
                move_right_n_times(order, position, number)
    return [numbers[original] for original in order]


def decrypt_numbers(numbers: list[int]) -> list[int]:
    """Multiply by the decryption key and mix ten times."""
    return mix_numbers([n * DECRYPTION_KEY for n in numbers], MIX_ROUNDS)


def get_coordinate(numbers: list[int], index: int) -> int:
    """The number `index` places after the zero, wrapping around."""
    try:
        zero_index = numbers.index(0)
    except ValueError:
        raise ValueError("0 not found in numbers") from None
    return numbers[(zero_index + index) % len(numbers)]


def coordinates_sum(numbers: list[int], indices: list[int]) -> int:
    return sum(get_coordinate(numbers, index) for index in indices)


def part1(contents: str) -> str:
    mixed = mix_numbers(parse_numbers(contents), 1)
    return str(coordinates_sum(mixed, list(COORDINATE_OFFSETS)))


def part2(contents: str) -> str:
    decrypted = decrypt_numbers(parse_numbers(contents))
    return str(coordinates_sum(decrypted, list(COORDINATE_OFFSETS)))