"""
Truth tables for a canonical 7-segment display.

Segment positions (index in SEGMENT_NAMES):
     0000
    1    2
    1    2
     3333
    4    5
    4    5
     6666

Each digit's row: 1 = segment lit, 0 = segment dark.
"""

SEGMENT_NAMES = [
    'top',
    'upper_left',
    'upper_right',
    'middle',
    'lower_left',
    'lower_right',
    'bottom',
]

# Wire letters as they appear in scrambled input, bit i = letter 'a' + i
WIRE_LETTERS = "abcdefg"

# Truth table rows (one character per segment, in SEGMENT_NAMES order)
DIGIT_TRUTH_TABLE = {
    0: "1110111",
    1: "0010010",
    2: "1011101",
    3: "1011011",
    4: "0111010",
    5: "1101011",
    6: "1101111",
    7: "1010010",
    8: "1111111",
    9: "1111011",
}

DIGIT_SEGMENTS = {
    digit: frozenset(
        SEGMENT_NAMES[i] for i, bit in enumerate(row) if bit == "1"
    )
    for digit, row in DIGIT_TRUTH_TABLE.items()
}

# Segment count -> digit, for the digits whose count is unique
UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}

SIMPLE_DIGITS = frozenset(UNIQUE_LENGTHS.values())


def segments_to_mask(segments) -> int:
    """Convert a collection of segment position names to a 7-bit mask."""
    mask = 0
    for name in segments:
        mask |= 1 << SEGMENT_NAMES.index(name)
    return mask


# Canonical (position-space) masks, bit i = SEGMENT_NAMES[i]
DIGIT_MASKS = {digit: segments_to_mask(segs) for digit, segs in DIGIT_SEGMENTS.items()}


def print_truth_table():
    """Print the complete truth table for all digits."""
    print("7-Segment Digit Truth Table")
    print("=" * 50)
    print(f"{'Digit':>5} | ", end="")
    print(" ".join(f"{i}" for i in range(len(SEGMENT_NAMES))), end="")
    print(" | Lit")
    print("-" * 50)

    for digit in range(10):
        row = " ".join(DIGIT_TRUTH_TABLE[digit])
        lit = len(DIGIT_SEGMENTS[digit])
        marker = "  (unique)" if digit in SIMPLE_DIGITS else ""
        print(f"{digit:>5} | {row} | {lit:>3}{marker}")

    print("-" * 50)
    for i, name in enumerate(SEGMENT_NAMES):
        print(f"  {i} = {name}")


if __name__ == "__main__":
    print_truth_table()
