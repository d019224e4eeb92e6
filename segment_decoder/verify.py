"""
Verification module for segment maps.

Ensures a deduced wiring is a bijection and reproduces every observed pattern.
"""

from .catalog import DigitCatalog
from .mapper import SegmentMap
from .patterns import PatternSet
from .truth_tables import SEGMENT_NAMES, WIRE_LETTERS, DIGIT_MASKS, segments_to_mask


def verify_segment_map(pattern_set: PatternSet, segment_map: SegmentMap) -> tuple[bool, list[str]]:
    """
    Verify that a segment map is consistent with a display's observations.

    Args:
        pattern_set: The parsed display line
        segment_map: The wiring to check

    Returns:
        Tuple of (all_correct, list of error messages)
    """
    errors = []

    wires = set(segment_map.wiring)
    segments = set(segment_map.wiring.values())
    if wires != set(WIRE_LETTERS):
        errors.append(f"Wires mapped: {''.join(sorted(wires))}, expected {WIRE_LETTERS}")
    if segments != set(SEGMENT_NAMES):
        missing = sorted(set(SEGMENT_NAMES) - segments)
        errors.append(f"Segments not driven by any wire: {', '.join(missing)}")
    if errors:
        return False, errors

    catalog = DigitCatalog.from_segment_map(segment_map)
    expected = set(pattern_set.observations)
    actual = catalog.signals()

    for signal in sorted(expected - actual, key=lambda s: s.mask):
        errors.append(f"Observation {signal} is not produced by any digit")
    for digit, signal in sorted(catalog.patterns.items()):
        if signal not in expected:
            errors.append(f"Digit {digit}: pattern {signal} was never observed")

    for digit, signal in sorted(segment_map.identified.items()):
        if catalog.patterns[digit] != signal:
            errors.append(
                f"Digit {digit}: identified as {signal}, "
                f"catalog has {catalog.patterns[digit]}"
            )
        lit = segments_to_mask(segment_map.translate(signal))
        if lit != DIGIT_MASKS[digit]:
            errors.append(
                f"Digit {digit}: {signal} lights canonical mask {lit:07b}, "
                f"expected {DIGIT_MASKS[digit]:07b}"
            )

    return len(errors) == 0, errors


def print_catalog_comparison(pattern_set: PatternSet, segment_map: SegmentMap):
    """Print each digit's assembled pattern next to whether it was observed."""
    catalog = DigitCatalog.from_segment_map(segment_map)
    observed = set(pattern_set.observations)

    print("Catalog Verification")
    print("=" * 40)
    print(f"{'Digit':>5} | {'Pattern':<8} | Observed")
    print("-" * 40)

    all_match = True
    for digit in range(10):
        signal = catalog.patterns[digit]
        seen = signal in observed
        if not seen:
            all_match = False
        print(f"{digit:>5} | {signal.letters():<8} | {'.' if seen else 'X'}")

    print("-" * 40)
    print(f"All observed: {all_match}")
    return all_match
