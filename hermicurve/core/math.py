import math
from typing import Literal

Point = tuple[float, float]
Op = tuple[Literal["M", "C"], tuple]


def hermite(x0: float, x1: float, t0: float, t1: float, t: float) -> float:
    """
    Cubic Hermite interpolation between x0 and x1 with derivatives t0/t1
    (expressed in the segment's own parametrization, t in [0, 1]).
    """
    return ((2 * t * t * t - 3 * t * t + 1) * x0 +
            (t * t * t - 2 * t * t + t) * t0 +
            (-2 * t * t * t + 3 * t * t) * x1 +
            (t * t * t - t * t) * t1)


def hermite_d(x0: float, x1: float, t0: float, t1: float, t: float) -> float:
    """First derivative of `hermite` with respect to t."""
    return ((6 * t * t - 6 * t) * x0 +
            (3 * t * t - 4 * t + 1) * t0 +
            (-6 * t * t + 6 * t) * x1 +
            (3 * t * t - 2 * t) * t1)


def derivative_coefficients(y0: float, y1: float, t0: float, t1: float) -> tuple[float, float, float]:
    """
    (A, B, C) such that hermite_d(y0, y1, t0, t1, t) == A*t^2 + B*t + C.
    """
    a = 3 * (2 * y0 - 2 * y1 + t0 + t1)
    b = 2 * (-3 * y0 + 3 * y1 - 2 * t0 - t1)
    c = t0
    return a, b, c


def quadratic_roots(a: float, b: float, c: float) -> tuple[float, ...]:
    """
    Real roots of a*t^2 + b*t + c. Caller guarantees a != 0.
    A double root is returned twice.
    """
    q0 = b / (2 * a)
    q1 = b * b / (4 * a * a) - c / a
    if q1 < 0.0:
        return ()
    s = math.sqrt(q1)
    return (-q0 + s, -q0 - s)


def hermite_to_bezier(p0: Point, p1: Point, t0: float, t1: float) -> tuple[Point, Point, Point]:
    """
    Convert a Hermite segment from p0 to p1 (scaled tangents t0/t1, x linear
    in t) to the (c1, c2, p2) cubic Bezier form used by path ops.
    """
    dx = p1[0] - p0[0]
    c1 = (p0[0] + dx / 3.0, p0[1] + t0 / 3.0)
    c2 = (p1[0] - dx / 3.0, p1[1] - t1 / 3.0)
    return c1, c2, (p1[0], p1[1])


def unit(x: float, y: float) -> Point:
    length = math.hypot(x, y)
    return x / length, y / length


def lerp(a: float, b: float, t: float) -> float:
    return a * (1 - t) + b * t
