"""
Decode many display lines, optionally across worker processes.

Each line is independent, so lines are mapped over a process pool and
collected back in input order.
"""

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Optional

from .display import Display
from .errors import DecodeError


@dataclass
class LineResult:
    """Outcome of decoding one input line."""

    lineno: int                          # 1-based line number in the input
    line: str
    display: Optional[Display] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class DecodeTotals:
    """Running totals over successfully decoded lines."""

    value_sum: int = 0
    simple_digits: int = 0
    decoded: int = 0
    failed: int = 0

    def add(self, result: LineResult):
        if result.ok:
            self.value_sum += result.display.value
            self.simple_digits += result.display.simple_digit_count
            self.decoded += 1
        else:
            self.failed += 1


def _decode_one(args) -> LineResult:
    """Decode a single (lineno, line, method) item. Runs in a worker process."""
    lineno, line, method = args
    try:
        return LineResult(lineno, line, display=Display.from_line(line, method))
    except DecodeError as e:
        return LineResult(lineno, line, error=e)


def decode_lines(lines, method: str = "deductive", workers: Optional[int] = None) -> list[LineResult]:
    """
    Decode every non-blank line.

    Args:
        lines: Iterable of raw text lines
        method: Mapping method, "deductive" or "exact"
        workers: Number of worker processes; None or 1 decodes in-process

    Returns:
        One LineResult per non-blank line, in input order
    """
    items = [
        (lineno, line.rstrip("\n"), method)
        for lineno, line in enumerate(lines, start=1)
        if line.strip()
    ]

    if workers is None or workers <= 1:
        return [_decode_one(item) for item in items]

    with ProcessPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(_decode_one, items))


def total(results: list[LineResult]) -> DecodeTotals:
    """Sum values and simple digit counts over a batch."""
    totals = DecodeTotals()
    for result in results:
        totals.add(result)
    return totals
