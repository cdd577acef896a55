import logging
import math
from bisect import bisect_right
from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Sequence, TYPE_CHECKING

from . import evaluator
from .constants import MIN_POINT_X_DISTANCE, SPACING_TOLERANCE, DEFAULT_SAMPLE_COUNT
from .errors import DomainError, OutOfRangeError, MalformedInputError
from .math import Point, Op, hermite_to_bezier
from .point import ControlPoint

if TYPE_CHECKING:
    from PySide6 import QtGui

logger = logging.getLogger(__name__)

DEFAULT_POINTS: tuple[ControlPoint, ...] = (
    ControlPoint(0.0, 0.0, 0.5, 0.5),
    ControlPoint(1.0, 1.0, 0.5, 0.5),
)


def _rejected(message: str) -> MalformedInputError:
    logger.debug("rejecting curve data: %s", message)
    return MalformedInputError(message)


def _check_points(points: Sequence[ControlPoint]) -> None:
    if len(points) < 2:
        raise _rejected(f"a curve needs at least 2 points, got {len(points)}")
    for i, p in enumerate(points):
        if not all(math.isfinite(v) for v in p.as_tuple()):
            raise _rejected(f"point {i} has a non-finite field: {p}")
        if p.tx <= 0.0:
            raise _rejected(f"point {i} has a non-positive tangent x: {p.tx}")
    if points[0].x != 0.0:
        raise _rejected(f"first point must sit at x=0, got {points[0].x}")
    if points[-1].x != 1.0:
        raise _rejected(f"last point must sit at x=1, got {points[-1].x}")
    for i, (a, b) in enumerate(zip(points, points[1:])):
        if b.x - a.x < MIN_POINT_X_DISTANCE - SPACING_TOLERANCE:
            raise _rejected(
                f"points {i} and {i + 1} are closer than {MIN_POINT_X_DISTANCE} along x "
                f"({a.x} -> {b.x})"
            )


@dataclass(frozen=True)
class Curve:
    """
    Segmented Hermite curve over x in [0, 1].

    N control points give N-1 segments; segment s spans [p_s.x, p_{s+1}.x)
    (the last one also includes x=1). On each segment x is linear in the
    local parameter t and y is a cubic Hermite whose tangents are the point
    slopes scaled by the segment width, which keeps dy/dx continuous across
    shared points.

    Instances never change after construction. Edits (see `editing`) return
    new curves whose point tuple reuses the untouched ControlPoint objects.
    """
    points: tuple[ControlPoint, ...] = DEFAULT_POINTS

    def __post_init__(self):
        points = tuple(self.points)
        _check_points(points)
        object.__setattr__(self, "points", points)

    @cached_property
    def _xs(self) -> tuple[float, ...]:
        return tuple(p.x for p in self.points)

    # ---- construction --------------------------------------------------------
    def with_points(self, points: Iterable[ControlPoint]) -> "Curve":
        return type(self)(tuple(points))

    @classmethod
    def from_flat(cls, data: Sequence[float]) -> "Curve":
        """
        Build a curve from consecutive (x, y, tx, ty) quadruples.
        Raises MalformedInputError on a bad length, non-numeric data or
        points that break the curve invariants.
        """
        n = len(data)
        if n % 4 != 0:
            raise _rejected(f"flat data length must be a multiple of 4, got {n}")
        if n < 8:
            raise _rejected(f"flat data needs at least 2 points (8 numbers), got {n}")
        try:
            values = [float(v) for v in data]
        except (TypeError, ValueError) as exc:
            raise _rejected(f"flat data must be numeric: {exc}") from exc
        points = tuple(ControlPoint(*values[i:i + 4]) for i in range(0, n, 4))
        return cls(points)

    def to_flat(self) -> list[float]:
        out: list[float] = []
        for p in self.points:
            out.extend(p.as_tuple())
        return out

    # ---- serialization -------------------------------------------------------
    def to_dict(self) -> dict:
        return {"points": [list(p.as_tuple()) for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict) -> "Curve":
        try:
            raw = data["points"]
            points = tuple(ControlPoint(*map(float, p)) for p in raw)
        except (KeyError, TypeError, ValueError) as exc:
            raise _rejected(f"invalid curve dict: {exc!r}") from exc
        return cls(points)

    # ---- indexing ------------------------------------------------------------
    def point_count(self) -> int:
        return len(self.points)

    def segment_count(self) -> int:
        return len(self.points) - 1

    def point_at(self, i: int) -> ControlPoint:
        if not 0 <= i < len(self.points):
            raise OutOfRangeError(i, len(self.points))
        return self.points[i]

    def segment_bounds(self, segment: int) -> tuple[ControlPoint, ControlPoint]:
        if not 0 <= segment < self.segment_count():
            raise OutOfRangeError(segment, self.segment_count(), what="segment")
        return self.points[segment], self.points[segment + 1]

    def segment_containing(self, x: float) -> int:
        """
        Index s with p_s.x <= x < p_{s+1}.x; x == 1 belongs to the last segment.
        """
        if not 0.0 <= x <= 1.0:
            raise DomainError(x)
        s = bisect_right(self._xs, x) - 1
        return min(s, self.segment_count() - 1)

    def local_t(self, segment: int, x: float) -> float:
        p0, p1 = self.segment_bounds(segment)
        return (x - p0.x) / (p1.x - p0.x)

    # ---- evaluation ----------------------------------------------------------
    def value_at(self, segment: int, t: float) -> Point:
        return evaluator.value_at(self, segment, t)

    def sample_at(self, x: float) -> float:
        return evaluator.sample_at(self, x)

    def derivative_at(self, segment: int, t: float) -> float:
        return evaluator.derivative_at(self, segment, t)

    def tangent_direction_at(self, segment: int, t: float) -> Point:
        return evaluator.tangent_direction_at(self, segment, t)

    def interpolate(self, n: int = DEFAULT_SAMPLE_COUNT) -> list[Point]:
        """
        Return n (x, y) samples evenly spaced along x, both ends included.
        """
        if n <= 0:
            return []
        step = 1.0 / max(1, n - 1)
        out: list[Point] = []
        for i in range(n):
            x = min(1.0, i * step)
            out.append((x, self.sample_at(x)))
        return out

    # ---- drawing -------------------------------------------------------------
    def segments(self) -> list[tuple[Point, Point, Point]]:
        """
        (c1, c2, p2) cubic Bezier triples, one per segment, assuming a moveTo
        at the first point.
        """
        out = []
        for s in range(self.segment_count()):
            p0, p1 = self.points[s], self.points[s + 1]
            dx = p1.x - p0.x
            out.append(hermite_to_bezier((p0.x, p0.y), (p1.x, p1.y), dx * p0.slope, dx * p1.slope))
        return out

    def path_ops(self) -> list[Op]:
        """
        Drawing ops in the same shape the path editor emits:
          - ("M", (x,y))       moveTo
          - ("C", (c1,c2,p2))  cubicTo
        """
        first = self.points[0]
        ops: list[Op] = [("M", (first.x, first.y))]
        for c1, c2, p2 in self.segments():
            ops.append(("C", (c1, c2, p2)))
        return ops

    def make_qpath(self) -> "QtGui.QPainterPath":
        from PySide6 import QtCore, QtGui

        qp = QtGui.QPainterPath()
        qpf = lambda t: QtCore.QPointF(t[0], t[1])

        for op, data in self.path_ops():
            if op == "M":
                qp.moveTo(qpf(data))
            elif op == "C":
                c1, c2, p2 = data
                qp.cubicTo(qpf(c1), qpf(c2), qpf(p2))
        return qp
