from enum import Enum


class CurveError(Exception):
    """Base class for every error raised by the curve engine."""


class DomainError(CurveError, ValueError):
    """A query coordinate lies outside [0, 1]."""

    def __init__(self, x: float):
        super().__init__(f"x={x!r} is outside the curve domain [0, 1]")
        self.x = x


class OutOfRangeError(CurveError, IndexError):
    """A point or segment index is outside its valid range."""

    def __init__(self, index: int, count: int, what: str = "point"):
        super().__init__(f"{what} index {index!r} out of range [0, {count})")
        self.index = index
        self.count = count


class MalformedInputError(CurveError, ValueError):
    pass


class InsertFailure(Enum):
    OUTSIDE_SEGMENTS = "outside_segments"
    TOO_CLOSE = "too_close"


class InsertionError(CurveError, ValueError):
    """
    insert_point could not produce a curve. `reason` tells why:
      - OUTSIDE_SEGMENTS: x is not strictly inside (0, 1)
      - TOO_CLOSE: the new point would sit closer than the minimum spacing
        to an existing one
    """

    def __init__(self, x: float, reason: InsertFailure):
        super().__init__(f"cannot insert at x={x!r}: {reason.value}")
        self.x = x
        self.reason = reason
