import pytest

from aoc2022.day17 import (
    Push,
    Rock,
    RockType,
    Room,
    parse_pattern,
    part1,
    part2,
    run_simulation,
)

EXAMPLE = ">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>"


def test_parse_pattern():
    assert parse_pattern(">>><<>\n") == [
        Push.RIGHT,
        Push.RIGHT,
        Push.RIGHT,
        Push.LEFT,
        Push.LEFT,
        Push.RIGHT,
    ]


def test_run_simulation():
    assert run_simulation(parse_pattern(EXAMPLE), 2022) == 3068


def test_run_simulation_big():
    assert run_simulation(parse_pattern(EXAMPLE), 1000000000000) == 1514285714288


def test_parts():
    assert part1(EXAMPLE) == "3068"
    assert part2(EXAMPLE) == "1514285714288"


def test_first_rock_lands_on_floor():
    room = Room(parse_pattern(EXAMPLE))
    room.release_rock()
    assert room.falling_rock == Rock(RockType.HORIZONTAL, 2, 3)
    room.drop_rock()
    assert room.height() == 1
    assert room.rocks_dropped_count == 1
    assert room.stationary_rock_points == {(2, 0), (3, 0), (4, 0), (5, 0)}
    assert str(room).endswith("|..####.|\n+-------+\n")
    assert room.next_rock_type is RockType.PLUS


def test_single_rock_simulation_height():
    assert run_simulation(parse_pattern(EXAMPLE), 1) == 1


def test_release_twice_raises():
    room = Room([Push.LEFT])
    room.release_rock()
    with pytest.raises(RuntimeError):
        room.release_rock()


def test_drop_without_falling_rock_raises():
    with pytest.raises(RuntimeError):
        Room([Push.LEFT]).drop_rock()


def test_state_key_requires_falling_rock():
    with pytest.raises(RuntimeError):
        Room([Push.LEFT]).state_key()


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        Room([])


def test_state_key_contents():
    room = Room(parse_pattern(EXAMPLE))
    room.release_rock()
    assert room.state_key() == (RockType.HORIZONTAL, 0, ())