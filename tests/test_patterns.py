"""Tests for signal parsing and line splitting."""

import pytest

from segment_decoder import MalformedPattern, PatternSet, Signal
from segment_decoder.truth_tables import (
    DIGIT_MASKS,
    DIGIT_SEGMENTS,
    SIMPLE_DIGITS,
    UNIQUE_LENGTHS,
    segments_to_mask,
)


def test_truth_table_segment_counts():
    counts = {digit: len(segs) for digit, segs in DIGIT_SEGMENTS.items()}
    assert counts == {0: 6, 1: 2, 2: 5, 3: 5, 4: 4, 5: 5, 6: 6, 7: 3, 8: 7, 9: 6}

    for length, digit in UNIQUE_LENGTHS.items():
        assert counts[digit] == length
        assert list(counts.values()).count(length) == 1
    assert SIMPLE_DIGITS == {1, 4, 7, 8}


def test_signal_is_order_independent():
    assert Signal.from_letters("cdfeb") == Signal.from_letters("bcdef")
    assert Signal.from_letters("ab").mask == 0b0000011
    assert Signal.from_letters("gfedcba").mask == 0b1111111


def test_signal_set_operations():
    seven = Signal.from_letters("dab")
    one = Signal.from_letters("ab")

    assert (seven - one).letters() == "d"
    assert seven.issuperset(one)
    assert not one.issuperset(seven)
    assert (seven & one) == one
    assert (one | Signal.of_letter("g")).letters() == "abg"
    assert len(seven) == 3
    assert "d" in seven and "c" not in seven
    assert str(seven) == "abd"


@pytest.mark.parametrize("text", ["a", "abcdefga", "abh", "aab", "ABC", "ab1"])
def test_signal_rejects_bad_patterns(text):
    with pytest.raises(MalformedPattern):
        Signal.from_letters(text)


def test_pattern_set_from_line(example_line):
    ps = PatternSet.from_line(example_line)

    assert len(ps.observations) == 10
    assert len(ps.readout) == 4
    assert ps.readout[0] == ps.readout[2]
    assert sorted(s.num_segments for s in ps.observations) == [2, 3, 4, 5, 5, 5, 6, 6, 6, 7]
    assert [s.letters() for s in ps.with_length(2)] == ["ab"]
    assert len(ps.with_length(5)) == 3


def test_pattern_set_tolerates_trailing_newline(example_line):
    assert PatternSet.from_line(example_line + "\n") == PatternSet.from_line(example_line)


@pytest.mark.parametrize("mutate", [
    lambda line: line.replace(" | ", " "),                    # no separator
    lambda line: line.replace(" | ", " | ab | "),             # two separators
    lambda line: line.replace("acedgfb ", "", 1),             # 9 observations
    lambda line: line.rsplit(" ", 1)[0],                      # 3 readout digits
    lambda line: line + " ab",                                # 5 readout digits
    lambda line: line.replace("dab", "daz", 1),               # bad letter
    lambda line: line.replace("eafb", "eafa", 1),             # repeated letter
    lambda line: line.replace("cdfgeb", "cefabd", 1),         # duplicate observation
])
def test_pattern_set_rejects_malformed_lines(example_line, mutate):
    line = mutate(example_line)
    with pytest.raises(MalformedPattern) as excinfo:
        PatternSet.from_line(line)
    assert excinfo.value.line == line
    assert excinfo.value.stage == "parse"


def test_digit_masks():
    assert DIGIT_MASKS[8] == 0b1111111
    assert DIGIT_MASKS[1] == 0b0100100      # upper_right, lower_right
    assert DIGIT_MASKS[7] == 0b0100101      # + top
    assert DIGIT_MASKS[0] == 0b1110111      # all but middle
    assert segments_to_mask(['top', 'bottom']) == 0b1000001
    assert all(bin(DIGIT_MASKS[d]).count('1') == len(DIGIT_SEGMENTS[d]) for d in range(10))
