"""Digit catalog: the ten wire-space digit patterns of one display."""

from dataclasses import dataclass
from typing import Optional

from .errors import UnknownPattern
from .mapper import SegmentMap
from .patterns import Signal
from .truth_tables import DIGIT_SEGMENTS


@dataclass(frozen=True, eq=False)
class DigitCatalog:
    """Lookup table from wire-space signal to digit value."""

    patterns: dict[int, Signal]     # digit -> signal
    by_mask: dict[int, int]         # signal mask -> digit

    @classmethod
    def from_segment_map(cls, segment_map: SegmentMap) -> "DigitCatalog":
        """
        Assemble every digit's signal from the canonical segment table.

        2 and 5 are never matched against observations; their patterns
        come purely from the known wire letters.
        """
        patterns = {
            digit: segment_map.signal_for(segments)
            for digit, segments in DIGIT_SEGMENTS.items()
        }
        by_mask = {signal.mask: digit for digit, signal in patterns.items()}
        return cls(patterns=patterns, by_mask=by_mask)

    def lookup(self, signal: Signal, line: Optional[str] = None) -> int:
        """Digit shown by a signal; raises UnknownPattern if none matches."""
        digit = self.by_mask.get(signal.mask)
        if digit is None:
            raise UnknownPattern(f"Readout pattern {signal} matches no digit", line)
        return digit

    def signals(self) -> set[Signal]:
        return set(self.patterns.values())

    def __len__(self):
        return len(self.patterns)
