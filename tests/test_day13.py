import pytest

from aoc2022.day13 import (
    compare_packets,
    decoder_key,
    divider_packets,
    format_packet,
    is_ordered,
    ordered_index_sum,
    parse_all_packets,
    parse_packet,
    parse_packet_pairs,
    part1,
    part2,
    sort_packets,
)

SHORT = "[1,1,3,1,1]\n[1,1,5,1,1]\n\n[[1],[2,3,4]]\n[[1],4]\n"

EXAMPLE = (
    "[1,1,3,1,1]\n[1,1,5,1,1]\n\n[[1],[2,3,4]]\n[[1],4]\n\n[9]\n[[8,7,6]]\n\n"
    "[[4,4],4,4]\n[[4,4],4,4,4]\n\n[7,7,7,7]\n[7,7,7]\n\n[]\n[3]\n\n[[[]]]\n[[]]\n\n"
    "[1,[2,[3,[4,[5,6,7]]]],8,9]\n[1,[2,[3,[4,[5,6,0]]]],8,9]\n"
)


def test_parse_all_packets():
    packets = parse_all_packets(SHORT)
    assert packets == [
        [1, 1, 3, 1, 1],
        [1, 1, 5, 1, 1],
        [[1], [2, 3, 4]],
        [[1], 4],
    ]


def test_parse_packet_pairs():
    pairs = parse_packet_pairs(SHORT)
    assert pairs == [
        ([1, 1, 3, 1, 1], [1, 1, 5, 1, 1]),
        ([[1], [2, 3, 4]], [[1], 4]),
    ]


def test_parse_single_packet_pair():
    pairs = parse_packet_pairs("[1,1,3,1,1]\n[1,1,5,1,1]\n")
    assert pairs == [([1, 1, 3, 1, 1], [1, 1, 5, 1, 1])]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("[1,1,3,1,1]\n", [1, 1, 3, 1, 1]),
        ("[]\n", []),
        ("[[]]\n", [[]]),
        ("[[4,4],4,4]\n", [[4, 4], 4, 4]),
    ],
)
def test_parse_packet(line, expected):
    assert parse_packet(line) == expected


@pytest.mark.parametrize("line", ["[1,]", "1", "[1", "[a]", "[256]", "[1, 2]"])
def test_parse_packet_rejects_invalid(line):
    with pytest.raises(ValueError):
        parse_packet(line)


def test_parse_packet_pairs_rejects_trailing_blank_line():
    with pytest.raises(ValueError):
        parse_packet_pairs(SHORT + "\n")


def test_is_ordered():
    pairs = parse_packet_pairs(EXAMPLE)
    results = [is_ordered(left, right) for left, right in pairs]
    assert results == [True, True, False, True, False, True, False, False]


def test_is_ordered_equal_packets_raise():
    with pytest.raises(ValueError):
        is_ordered([1, [2]], [1, [2]])


def test_compare_mixed_types():
    assert compare_packets([[1], 4], [1, 4]) == 0
    assert compare_packets(3, [[4]]) == -1


def test_ordered_index_sum():
    assert ordered_index_sum(parse_packet_pairs(EXAMPLE)) == 13


def test_sort_with_divider_packets():
    packets = sort_packets(parse_all_packets(EXAMPLE) + divider_packets())
    result = "".join(format_packet(packet) + "\n" for packet in packets)
    assert result == (
        "[]\n[[]]\n[[[]]]\n[1,1,3,1,1]\n[1,1,5,1,1]\n[[1],[2,3,4]]\n"
        "[1,[2,[3,[4,[5,6,0]]]],8,9]\n[1,[2,[3,[4,[5,6,7]]]],8,9]\n[[1],4]\n"
        "[[2]]\n[3]\n[[4,4],4,4]\n[[4,4],4,4,4]\n[[6]]\n[7,7,7]\n[7,7,7,7]\n"
        "[[8,7,6]]\n[9]\n"
    )


def test_calc_decoder_key():
    packets = sort_packets(parse_all_packets(EXAMPLE) + divider_packets())
    assert decoder_key(packets) == 140


def test_decoder_key_missing_divider_raises():
    with pytest.raises(ValueError):
        decoder_key(sort_packets(parse_all_packets(EXAMPLE)))


def test_format_round_trip():
    line = "[1,[2,[3,[4,[5,6,7]]]],8,9]"
    assert format_packet(parse_packet(line)) == line


def test_parts():
    assert part1(EXAMPLE) == "13"
    assert part2(EXAMPLE) == "140"