"""Exceptions raised while decoding a display line."""

from typing import Optional


class DecodeError(ValueError):
    """Base class for all per-line decoding failures."""

    stage = "decode"

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line

    def __reduce__(self):
        # Keep the offending line when sent across processes
        return (type(self), (str(self), self.line))


class MalformedPattern(DecodeError):
    """The line is not 10 observation patterns, a '|', and 4 readout patterns."""

    stage = "parse"


class AmbiguousDeduction(DecodeError):
    """A deduction step found zero or several candidates."""

    stage = "map"


class UnknownPattern(DecodeError):
    """A readout signal matches none of the ten catalog entries."""

    stage = "lookup"
