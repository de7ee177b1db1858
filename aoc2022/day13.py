"""Compare and sort nested-list distress signal packets."""

from __future__ import annotations

import json
import re
from functools import cmp_to_key
from typing import Union

Packet = Union[int, list["Packet"]]

_MAX_INTEGER = 255
_PACKET_CHARS = re.compile(r"[\[\],0-9]*")


def _check_integers(packet: Packet) -> None:
    if isinstance(packet, int):
        if packet > _MAX_INTEGER:
            raise ValueError(f"Failed to parse integer: {packet} is out of range")
        return
    for value in packet:
        _check_integers(value)


def parse_packet(line: str) -> list[Packet]:
    """Parse one packet line such as `[1,[2,3]]`; a trailing newline is allowed."""
    text = line[:-1] if line.endswith("\n") else line
    if not text.startswith("[") or not _PACKET_CHARS.fullmatch(text):
        raise ValueError(f"Invalid packet: {line!r}")
    try:
        packet = json.loads(text)
    except ValueError as error:
        raise ValueError(f"Invalid packet: {line!r}") from error
    if not isinstance(packet, list):
        raise ValueError(f"Invalid packet: {line!r}")
    _check_integers(packet)
    return packet


def format_packet(packet: Packet) -> str:
    """Render a packet in the same form it is parsed from."""
    if isinstance(packet, int):
        return str(packet)
    return "[" + ",".join(format_packet(value) for value in packet) + "]"


def compare_packets(left: Packet, right: Packet) -> int:
    """Return -1, 0 or 1 as left orders before, equal to or after right."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        return compare_packets([left], right)
    if isinstance(right, int):
        return compare_packets(left, [right])
    for left_value, right_value in zip(left, right):
        order = compare_packets(left_value, right_value)
        if order:
            return order
    return (len(left) > len(right)) - (len(left) < len(right))


def is_ordered(left: Packet, right: Packet) -> bool:
    """Whether the pair is in the right order; equal packets are an error."""
    order = compare_packets(left, right)
    if order == 0:
        raise ValueError("Packets are equal")
    return order < 0


def parse_packet_pairs(contents: str) -> list[tuple[list[Packet], list[Packet]]]:
    """Parse pairs of packet lines separated by single blank lines."""
    if not contents.endswith("\n"):
        raise ValueError("Failed to parse packet pairs: missing final newline")
    pairs = []
    for block in contents[:-1].split("\n\n"):
        lines = block.split("\n")
        if len(lines) != 2:
            raise ValueError(f"Failed to parse packet pair: {block!r}")
        left, right = lines
        pairs.append((parse_packet(left), parse_packet(right)))
    return pairs


def parse_all_packets(contents: str) -> list[list[Packet]]:
    """Parse every packet line, ignoring the blank lines between pairs."""
    return [parse_packet(line) for line in contents.split("\n") if line]


def ordered_index_sum(pairs: list[tuple[Packet, Packet]]) -> int:
    """Sum of the 1-based indices of the pairs that are in the right order."""
    return sum(
        index for index, (left, right) in enumerate(pairs, start=1) if is_ordered(left, right)
    )


def divider_packets() -> list[list[Packet]]:
    return [[[2]], [[6]]]


def sort_packets(packets: list[Packet]) -> list[Packet]:
    """Return the packets in ascending packet order."""
    return sorted(packets, key=cmp_to_key(compare_packets))


def _position(packets: list[Packet], target: Packet) -> int:
    for index, packet in enumerate(packets, start=1):
        if compare_packets(packet, target) == 0:
            return index
    raise ValueError(f"Divider packet {format_packet(target)} not found")


def decoder_key(packets: list[Packet]) -> int:
    """Product of the 1-based positions of the divider packets in sorted packets."""
    first, second = divider_packets()
    return _position(packets, first) * _position(packets, second)


def part1(contents: str) -> str:
    return str(ordered_index_sum(parse_packet_pairs(contents)))


def part2(contents: str) -> str:
    packets = sort_packets(parse_all_packets(contents) + divider_packets())
    return str(decoder_key(packets))