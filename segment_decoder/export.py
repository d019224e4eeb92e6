"""
Export decoded displays to various formats (wiring table, ASCII art, JSON).
"""

import json
from typing import Optional

from .display import Display
from .mapper import SegmentMap
from .truth_tables import SEGMENT_NAMES, DIGIT_SEGMENTS


def to_wiring_table(segment_map: SegmentMap) -> str:
    """
    Export a segment map as a wire -> segment table.

    Args:
        segment_map: The wiring to render

    Returns:
        Table as a string, one wire per row in segment order
    """
    lines = []
    lines.append(f"Wiring ({segment_map.method})")
    lines.append("-" * 20)
    for segment in SEGMENT_NAMES:
        lines.append(f"  {segment_map.wire_for(segment)} -> {segment}")
    return "\n".join(lines)


def digit_to_art(digit: int) -> list[str]:
    """Render one digit as three rows of seven-segment art."""
    on = DIGIT_SEGMENTS[digit]

    def mark(segment, ch):
        return ch if segment in on else " "

    return [
        f" {mark('top', '_')} ",
        f"{mark('upper_left', '|')}{mark('middle', '_')}{mark('upper_right', '|')}",
        f"{mark('lower_left', '|')}{mark('bottom', '_')}{mark('lower_right', '|')}",
    ]


def to_ascii_art(digits) -> str:
    """Render a sequence of digits side by side."""
    rows = [digit_to_art(d) for d in digits]
    return "\n".join(
        " ".join(art[i] for art in rows).rstrip()
        for i in range(3)
    )


def to_json(display: Display, indent: Optional[int] = None) -> str:
    """Export one decoded line as a JSON document."""
    doc = {
        "observations": [s.letters() for s in display.pattern_set.observations],
        "readout_patterns": [s.letters() for s in display.pattern_set.readout],
        "wiring": dict(sorted(display.segment_map.wiring.items())),
        "method": display.segment_map.method,
        "catalog": {str(d): s.letters() for d, s in sorted(display.catalog.patterns.items())},
        "readout": list(display.readout),
        "value": display.value,
        "simple_digit_count": display.simple_digit_count,
    }
    return json.dumps(doc, indent=indent)
