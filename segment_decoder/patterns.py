"""
Parsing of one display line into observation and readout signals.

A signal is stored as a 7-bit mask over the wire letters, so the order of
letters in the input pattern is irrelevant:
- Bit 0 = 'a'
- Bit 1 = 'b'
- ...
- Bit 6 = 'g'
"""

from dataclasses import dataclass

from .errors import MalformedPattern
from .truth_tables import WIRE_LETTERS

N_OBSERVATIONS = 10
N_READOUT = 4


@dataclass(frozen=True)
class Signal:
    """An unordered set of lit wires, as a bitmask."""

    mask: int

    @classmethod
    def from_letters(cls, text: str) -> "Signal":
        """Parse a pattern like 'cdfeb' into a Signal."""
        if not 2 <= len(text) <= len(WIRE_LETTERS):
            raise MalformedPattern(f"Pattern {text!r} must have 2-7 letters")

        mask = 0
        for ch in text:
            idx = WIRE_LETTERS.find(ch)
            if idx < 0:
                raise MalformedPattern(f"Pattern {text!r} has letter {ch!r} outside a-g")
            bit = 1 << idx
            if mask & bit:
                raise MalformedPattern(f"Pattern {text!r} repeats letter {ch!r}")
            mask |= bit

        return cls(mask)

    @classmethod
    def of_letter(cls, letter: str) -> "Signal":
        return cls(1 << WIRE_LETTERS.index(letter))

    @property
    def num_segments(self) -> int:
        """Count the lit wires in this signal."""
        return bin(self.mask).count('1')

    def __len__(self):
        return self.num_segments

    def __contains__(self, letter: str) -> bool:
        idx = WIRE_LETTERS.find(letter)
        return idx >= 0 and bool(self.mask >> idx & 1)

    def __sub__(self, other: "Signal") -> "Signal":
        return Signal(self.mask & ~other.mask)

    def __or__(self, other: "Signal") -> "Signal":
        return Signal(self.mask | other.mask)

    def __and__(self, other: "Signal") -> "Signal":
        return Signal(self.mask & other.mask)

    def issuperset(self, other: "Signal") -> bool:
        return self.mask & other.mask == other.mask

    def letters(self) -> str:
        """Sorted letter string, e.g. 'bcdef'."""
        return "".join(ch for i, ch in enumerate(WIRE_LETTERS) if self.mask >> i & 1)

    def __str__(self):
        return self.letters()

    def __repr__(self):
        return f"Signal({self.letters()})"


@dataclass(frozen=True)
class PatternSet:
    """Ten observation signals and four readout signals from one line."""

    observations: tuple[Signal, ...]
    readout: tuple[Signal, ...]

    @classmethod
    def from_line(cls, line: str) -> "PatternSet":
        """
        Parse a line of the form 'p1 p2 ... p10 | d1 d2 d3 d4'.

        Raises:
            MalformedPattern: if the line does not have 10 distinct
                observation patterns and 4 readout patterns of letters a-g
        """
        groups = line.strip().split("|")
        if len(groups) != 2:
            raise MalformedPattern(
                f"Expected exactly one '|' separator, found {len(groups) - 1}", line
            )

        left, right = groups[0].split(), groups[1].split()
        if len(left) != N_OBSERVATIONS:
            raise MalformedPattern(
                f"Expected {N_OBSERVATIONS} observation patterns, got {len(left)}", line
            )
        if len(right) != N_READOUT:
            raise MalformedPattern(
                f"Expected {N_READOUT} readout patterns, got {len(right)}", line
            )

        try:
            observations = tuple(Signal.from_letters(p) for p in left)
            readout = tuple(Signal.from_letters(p) for p in right)
        except MalformedPattern as e:
            raise MalformedPattern(str(e), line) from e

        if len(set(observations)) != N_OBSERVATIONS:
            raise MalformedPattern("Observation patterns are not all distinct", line)

        return cls(observations=observations, readout=readout)

    def with_length(self, n: int) -> list[Signal]:
        """All observations with exactly n lit wires, in input order."""
        return [s for s in self.observations if s.num_segments == n]
