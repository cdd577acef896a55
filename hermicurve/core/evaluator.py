"""
Point queries on a Curve.

The stored tangent (tx, ty) is a slope in the x-y plane. The Hermite basis
wants dy/dt in the segment's own parametrization, and since x(t) is linear
with x'(t) = dx, dy/dt = dx * dy/dx. Scaling each endpoint slope by the
width of the segment being evaluated is what keeps the derivative
continuous (C1) where two segments share a point.
"""
from typing import TYPE_CHECKING

from .math import Point, hermite, hermite_d, lerp, unit

if TYPE_CHECKING:
    from .curve import Curve


def _segment_terms(curve: "Curve", segment: int):
    p0, p1 = curve.segment_bounds(segment)
    dx = p1.x - p0.x
    return p0, p1, dx, dx * p0.slope, dx * p1.slope


def value_at(curve: "Curve", segment: int, t: float) -> Point:
    p0, p1, _, t0, t1 = _segment_terms(curve, segment)
    x = lerp(p0.x, p1.x, t)
    y = hermite(p0.y, p1.y, t0, t1, t)
    return x, y


def sample_at(curve: "Curve", x: float) -> float:
    segment = curve.segment_containing(x)
    return value_at(curve, segment, curve.local_t(segment, x))[1]


def derivative_at(curve: "Curve", segment: int, t: float) -> float:
    """dy/dx on `segment` at local parameter t."""
    p0, p1, dx, t0, t1 = _segment_terms(curve, segment)
    return hermite_d(p0.y, p1.y, t0, t1, t) / dx


def tangent_direction_at(curve: "Curve", segment: int, t: float) -> Point:
    return unit(1.0, derivative_at(curve, segment, t))


def slope_at(curve: "Curve", x: float) -> float:
    segment = curve.segment_containing(x)
    return derivative_at(curve, segment, curve.local_t(segment, x))
