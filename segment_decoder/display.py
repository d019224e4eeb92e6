"""
Decoding of one display line into its 4-digit value.

    line -> PatternSet -> SegmentMapper -> DigitCatalog -> Display
"""

from dataclasses import dataclass

from .catalog import DigitCatalog
from .mapper import SegmentMapper, SegmentMap
from .patterns import PatternSet
from .truth_tables import SIMPLE_DIGITS, UNIQUE_LENGTHS


@dataclass(frozen=True, eq=False)
class Display:
    """A fully decoded display line."""

    pattern_set: PatternSet
    segment_map: SegmentMap
    catalog: DigitCatalog
    readout: tuple[int, ...]

    @classmethod
    def from_line(cls, line: str, method: str = "deductive") -> "Display":
        """
        Decode one raw line.

        Raises:
            MalformedPattern: the line could not be parsed
            AmbiguousDeduction: the wiring could not be pinned down
            UnknownPattern: a readout pattern is not one of the ten digits
        """
        pattern_set = PatternSet.from_line(line)
        segment_map = SegmentMapper(pattern_set, line=line).solve(method)
        catalog = DigitCatalog.from_segment_map(segment_map)
        readout = tuple(catalog.lookup(s, line) for s in pattern_set.readout)
        return cls(
            pattern_set=pattern_set,
            segment_map=segment_map,
            catalog=catalog,
            readout=readout,
        )

    @property
    def value(self) -> int:
        """Readout digits as a base-10 number, most significant first."""
        value = 0
        for digit in self.readout:
            value = value * 10 + digit
        return value

    @property
    def simple_digit_count(self) -> int:
        """How many readout digits are 1, 4, 7 or 8."""
        return sum(1 for digit in self.readout if digit in SIMPLE_DIGITS)


def count_simple_digits(pattern_set: PatternSet) -> int:
    """Count readout digits recognizable by wire count alone."""
    return sum(1 for s in pattern_set.readout if s.num_segments in UNIQUE_LENGTHS)


def decode_line(line: str, method: str = "deductive") -> tuple[int, int]:
    """Decode a line to (value, simple digit count)."""
    display = Display.from_line(line, method)
    return display.value, display.simple_digit_count
