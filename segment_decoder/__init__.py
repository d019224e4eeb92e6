"""Seven-segment display decoder: unscrambles wire patterns and reads the digits."""

from .errors import DecodeError, MalformedPattern, AmbiguousDeduction, UnknownPattern
from .truth_tables import SEGMENT_NAMES, DIGIT_SEGMENTS, DIGIT_MASKS, UNIQUE_LENGTHS
from .patterns import Signal, PatternSet
from .mapper import SegmentMapper, SegmentMap
from .catalog import DigitCatalog
from .display import Display, decode_line, count_simple_digits
from .batch import decode_lines, DecodeTotals, LineResult
from .export import to_wiring_table, to_ascii_art, to_json
from .verify import verify_segment_map

__all__ = [
    "DecodeError",
    "MalformedPattern",
    "AmbiguousDeduction",
    "UnknownPattern",
    "SEGMENT_NAMES",
    "DIGIT_SEGMENTS",
    "DIGIT_MASKS",
    "UNIQUE_LENGTHS",
    "Signal",
    "PatternSet",
    "SegmentMapper",
    "SegmentMap",
    "DigitCatalog",
    "Display",
    "decode_line",
    "count_simple_digits",
    "decode_lines",
    "DecodeTotals",
    "LineResult",
    "to_wiring_table",
    "to_ascii_art",
    "to_json",
    "verify_segment_map",
]
__version__ = "0.1.0"
