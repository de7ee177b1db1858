# aoc2022

Solutions to a run of 2022 programming puzzles, one module per day. Every
module has `part1(contents)` and `part2(contents)`. Each takes the puzzle
input as a string and returns the answer as a string.

| Module            | Puzzle                                           |
|-------------------|--------------------------------------------------|
| `aoc2022.day07`   | Directory sizes from a shell session transcript  |
| `aoc2022.day08`   | Tree visibility and scenic scores in a grid      |
| `aoc2022.day09`   | Knotted rope following its head                  |
| `aoc2022.day10`   | Simple CPU, signal strengths and a CRT screen    |
| `aoc2022.day12`   | Shortest climb on a heightmap                    |
| `aoc2022.day13`   | Ordering nested packet lists                     |
| `aoc2022.day14`   | Falling sand over rock paths                     |
| `aoc2022.day15`   | Sensors, beacons and row coverage                |
| `aoc2022.day17`   | Falling rocks pushed by jets of gas              |
| `aoc2022.day18`   | Surface area of a lava droplet                   |
| `aoc2022.day20`   | Mixing a circular list of numbers                |

## Installation

```
pip install .
```

## Usage

```python
from pathlib import Path

from aoc2022 import day13

contents = Path("input13.txt").read_text()
print(day13.part1(contents))
print(day13.part2(contents))
```

The building blocks are public too. For example:

```python
from aoc2022 import day15

sensors = day15.parse_sensors(contents)
print(day15.row_coverage(10, sensors))
print(day15.tuning_frequency(day15.beacon_location(20, sensors)))
```

```python
from aoc2022 import day10

cpu = day10.Cpu(day10.parse_instructions(contents))
cpu.run_program()
print(sum(cpu.signal_strengths))
print(cpu.draw_screen())
```

Malformed puzzle input makes the parsing functions raise `ValueError`.

## What the package does not do

- It has no command-line tool. It also does not read input files. Read the
  input yourself and pass the text to the functions.
- `day14` only counts the resting sand. It does not draw the simulation or
  export it as an image or animation.

## Tests

```
pip install ".[test]"
pytest
```