"""
Wire-to-segment mapping for one scrambled 7-segment display.

This module deduces which observed wire letter drives which canonical
segment position. Two methods are provided:
1. Deduction from set cardinalities and subset tests (fast, default)
2. SAT-based exact solving, which enumerates every consistent wiring
"""

from dataclasses import dataclass, field
from typing import Optional
from pysat.formula import CNF
from pysat.solvers import Solver

from .errors import AmbiguousDeduction
from .patterns import PatternSet, Signal
from .truth_tables import SEGMENT_NAMES, WIRE_LETTERS, DIGIT_SEGMENTS, UNIQUE_LENGTHS


@dataclass(frozen=True, eq=False)
class SegmentMap:
    """Result of mapping: a bijection from wire letter to segment position."""

    wiring: dict[str, str]          # wire letter -> segment name
    method: str
    # Observations identified as digits while mapping (digit -> signal)
    identified: dict[int, Signal] = field(default_factory=dict)

    def wire_for(self, segment: str) -> str:
        """The wire letter that drives a segment position."""
        for wire, seg in self.wiring.items():
            if seg == segment:
                return wire
        raise KeyError(segment)

    def signal_for(self, segments) -> Signal:
        """Wire-space signal that lights the given segment positions."""
        mask = 0
        for seg in segments:
            mask |= Signal.of_letter(self.wire_for(seg)).mask
        return Signal(mask)

    def translate(self, signal: Signal) -> frozenset[str]:
        """Segment positions lit by a wire-space signal."""
        return frozenset(self.wiring[ch] for ch in signal.letters())


def _only(candidates: list, step: str, line: Optional[str] = None):
    """Return the single candidate of a deduction step."""
    if len(candidates) != 1:
        raise AmbiguousDeduction(
            f"{step}: expected exactly one candidate, found {len(candidates)}", line
        )
    return candidates[0]


def _letter(signal: Signal, step: str, line: Optional[str] = None) -> str:
    """Return the single letter of a one-wire signal."""
    return _only(list(signal.letters()), step, line)


class SegmentMapper:
    """
    Deduces the wiring of one display from its ten observation signals.

    Deduction order (each step must yield exactly one candidate):
    1. Anchors by unique length: 2 -> 1, 3 -> 7, 4 -> 4, 7 -> 8
    2. top = seven - one
    3. three = the 5-wire signal containing seven
    4. middle = the letter of (four - one) also in three; the other is upper_left
    5. six = the 6-wire signal missing one wire of one; of the other
       two 6-wire signals, nine contains middle and zero does not
    6. lower_right = the letter of one present in six; the other is upper_right
    7. bottom = three minus {top, upper_right, middle, lower_right}
    8. lower_left = eight minus the six known segments
    """

    def __init__(self, pattern_set: PatternSet, line: Optional[str] = None):
        self.pattern_set = pattern_set
        self.line = line

    def solve(self, method: str = "deductive") -> SegmentMap:
        """
        Compute the segment map.

        Args:
            method: "deductive" or "exact"
        """
        if method == "deductive":
            return self.deduce()
        if method == "exact":
            return self.solve_exact()
        raise ValueError(f"Unknown mapping method: {method!r}")

    def deduce(self) -> SegmentMap:
        """Deduce the wiring using cardinality and subset tests."""
        ps = self.pattern_set
        line = self.line

        # Step 1: anchors
        anchors = {}
        for length, digit in UNIQUE_LENGTHS.items():
            anchors[digit] = _only(
                ps.with_length(length), f"find {digit} ({length} wires)", line
            )
        one, seven, four, eight = anchors[1], anchors[7], anchors[4], anchors[8]

        # Step 2
        top = _letter(seven - one, "top = seven - one", line)

        # Step 3
        three = _only(
            [s for s in ps.with_length(5) if s.issuperset(seven)],
            "find 3 (5 wires containing seven)", line,
        )

        # Step 4
        four_ambigs = four - one
        if four_ambigs.num_segments != 2:
            raise AmbiguousDeduction(
                f"four - one: expected 2 letters, found {four_ambigs.num_segments}", line
            )
        middle = _letter(four_ambigs & three, "middle = (four - one) & three", line)
        upper_left = _letter(four_ambigs - three, "upper_left = (four - one) - three", line)

        # Step 5
        sixes = ps.with_length(6)
        six = _only(
            [s for s in sixes if (s - one).num_segments == 5],
            "find 6 (6 wires sharing one wire with one)", line,
        )
        rest = [s for s in sixes if s != six]
        if len(rest) != 2:
            raise AmbiguousDeduction(
                f"find 0 and 9: expected 2 remaining 6-wire patterns, found {len(rest)}", line
            )
        nine = _only([s for s in rest if middle in s], "find 9 (contains middle)", line)
        zero = _only([s for s in rest if middle not in s], "find 0 (lacks middle)", line)

        # Step 6
        lower_right = _letter(one & six, "lower_right = one & six", line)
        upper_right = _letter(one - six, "upper_right = one - six", line)

        # Step 7
        known = Signal.of_letter(top) | Signal.of_letter(upper_right) \
            | Signal.of_letter(middle) | Signal.of_letter(lower_right)
        bottom = _letter(three - known, "bottom = three - known", line)

        # Step 8
        known = known | Signal.of_letter(upper_left) | Signal.of_letter(bottom)
        lower_left = _letter(eight - known, "lower_left = eight - known", line)

        wiring = {
            top: 'top',
            upper_left: 'upper_left',
            upper_right: 'upper_right',
            middle: 'middle',
            lower_left: 'lower_left',
            lower_right: 'lower_right',
            bottom: 'bottom',
        }
        if len(wiring) != len(SEGMENT_NAMES):
            raise AmbiguousDeduction(
                f"Deduced wiring is not a bijection: {wiring}", line
            )

        identified = {
            1: one, 4: four, 7: seven, 8: eight,
            3: three, 6: six, 9: nine, 0: zero,
        }
        return SegmentMap(wiring=wiring, method="deductive", identified=identified)

    def solve_exact(self, max_models: int = 2) -> SegmentMap:
        """
        Find the wiring with a SAT solver and check it is unique.

        Variables:
        - x[w][s] = wire w drives segment s (a permutation)
        - y[p][d] = observation p shows digit d (a permutation)

        Models are enumerated (blocking each wiring found) until
        max_models are seen; exactly one wiring must exist.
        """
        observations = self.pattern_set.observations
        n_wires = len(WIRE_LETTERS)
        n_segs = len(SEGMENT_NAMES)
        n_obs = len(observations)

        cnf = CNF()
        var_counter = [1]

        def new_var():
            v = var_counter[0]
            var_counter[0] += 1
            return v

        x = {w: {s: new_var() for s in range(n_segs)} for w in range(n_wires)}
        y = {p: {d: new_var() for d in range(10)} for p in range(n_obs)}

        def exactly_one(lits):
            cnf.append(lits)
            for idx1, lit1 in enumerate(lits):
                for lit2 in lits[idx1 + 1:]:
                    cnf.append([-lit1, -lit2])

        # Constraint 1: wiring is a permutation
        for w in range(n_wires):
            exactly_one([x[w][s] for s in range(n_segs)])
        for s in range(n_segs):
            exactly_one([x[w][s] for w in range(n_wires)])

        # Constraint 2: digit assignment is a permutation
        for p in range(n_obs):
            exactly_one([y[p][d] for d in range(10)])
        for d in range(10):
            exactly_one([y[p][d] for p in range(n_obs)])

        # Constraint 3: if observation p shows digit d, its wires map
        # onto d's segments and every other wire maps off them
        for p, signal in enumerate(observations):
            for d in range(10):
                lit_segs = {SEGMENT_NAMES.index(name) for name in DIGIT_SEGMENTS[d]}
                if signal.num_segments != len(lit_segs):
                    cnf.append([-y[p][d]])
                    continue
                for w, letter in enumerate(WIRE_LETTERS):
                    if letter in signal:
                        allowed = [x[w][s] for s in range(n_segs) if s in lit_segs]
                    else:
                        allowed = [x[w][s] for s in range(n_segs) if s not in lit_segs]
                    cnf.append([-y[p][d]] + allowed)

        solutions = []
        with Solver(bootstrap_with=cnf) as solver:
            while len(solutions) < max_models and solver.solve():
                model = set(solver.get_model())
                wiring = {
                    WIRE_LETTERS[w]: SEGMENT_NAMES[s]
                    for w in range(n_wires)
                    for s in range(n_segs)
                    if x[w][s] in model
                }
                identified = {
                    d: observations[p]
                    for p in range(n_obs)
                    for d in range(10)
                    if y[p][d] in model
                }
                solutions.append((wiring, identified))
                # Block this wiring
                solver.add_clause([
                    -x[WIRE_LETTERS.index(w)][SEGMENT_NAMES.index(s)]
                    for w, s in wiring.items()
                ])

        if not solutions:
            raise AmbiguousDeduction("exact: no wiring is consistent with the observations", self.line)
        if len(solutions) > 1:
            raise AmbiguousDeduction(
                f"exact: found {len(solutions)} or more consistent wirings", self.line
            )

        wiring, identified = solutions[0]
        return SegmentMap(wiring=wiring, method="exact", identified=identified)
