"""Run a tiny CPU program, sampling signal strength and drawing a CRT screen."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

ROWS = 6
COLS = 40

_ADDX = re.compile(r"addx ([+-]?\d+)")


@dataclass(frozen=True)
class Noop:
    """Does nothing for one cycle."""


@dataclass(frozen=True)
class Addx:
    """Adds a value to X after two cycles."""

    value: int


Instruction = Union[Noop, Addx]


def parse_instruction(line: str) -> Instruction:
    if line == "noop":
        return Noop()
    match = _ADDX.fullmatch(line)
    if match and line.isascii():
        return Addx(int(match.group(1)))
    raise ValueError(f"Failed to parse instruction: {line!r}")


def parse_instructions(contents: str) -> list[Instruction]:
    return [parse_instruction(line) for line in contents.split("\n") if line]


class Cpu:
    """Executes instructions one cycle at a time."""

    def __init__(self, instructions: list[Instruction]) -> None:
        self.instructions = list(instructions)
        self.x = 1
        self.x_history: list[int] = []
        self.signal_strengths: list[int] = []
        self.cycle = 1
        self.instruction_counter = 0
        self._executing_addx = False
        self.pixels = [False] * (ROWS * COLS)

    def finished(self) -> bool:
        return self.instruction_counter == len(self.instructions)

    def _record_signal_strength(self) -> None:
        if self.cycle >= 20 and (self.cycle - 20) % 40 == 0:
            self.signal_strengths.append(self.x * self.cycle)

    def _draw_pixel(self) -> None:
        row, col = divmod(self.cycle - 1, COLS)
        self.pixels[row * COLS + col] = abs(col - self.x) <= 1

    def _observe(self) -> None:
        self.x_history.append(self.x)
        self._record_signal_strength()
        self._draw_pixel()

    def tick(self) -> None:
        """Run one cycle; does nothing once the program has finished."""
        if self.finished():
            return
        instruction = self.instructions[self.instruction_counter]
        self._observe()
        if isinstance(instruction, Addx):
            if self._executing_addx:
                self._executing_addx = False
                self.x += instruction.value
                self.instruction_counter += 1
            else:
                self._executing_addx = True
        else:
            self.instruction_counter += 1
        self.cycle += 1

    def run_program(self) -> None:
        while not self.finished():
            self.tick()

    def draw_screen(self) -> str:
        return "".join(
            "".join("#" if lit else "." for lit in self.pixels[start:start + COLS]) + "\n"
            for start in range(0, ROWS * COLS, COLS)
        )


def _run(contents: str) -> Cpu:
    cpu = Cpu(parse_instructions(contents))
    cpu.run_program()
    return cpu


def part1(contents: str) -> str:
    return str(sum(_run(contents).signal_strengths))


def part2(contents: str) -> str:
    return "\n" + _run(contents).draw_screen()