import logging
from typing import NamedTuple, TYPE_CHECKING

from .constants import EXTREMA_EPSILON
from .math import hermite, derivative_coefficients, quadratic_roots

if TYPE_CHECKING:
    from .curve import Curve

logger = logging.getLogger(__name__)


class Extrema(NamedTuple):
    min: float
    max: float


def _critical_ts(a: float, b: float, c: float) -> tuple[float, ...]:
    # roots of a*t^2 + b*t + c, the segment derivative in power form
    if abs(a) > EXTREMA_EPSILON:
        return quadratic_roots(a, b, c)
    if abs(b) > EXTREMA_EPSILON:
        return (-c / b,)
    return ()


def extrema_of(curve: "Curve") -> Extrema:
    """
    Global (min, max) of y over the curve.

    Each segment contributes its endpoint values plus the value at every
    critical point of its Hermite cubic that falls inside t in [0, 1].
    """
    lo = float("inf")
    hi = float("-inf")

    for s in range(curve.segment_count()):
        p0, p1 = curve.segment_bounds(s)
        dx = p1.x - p0.x
        y0, y1 = p0.y, p1.y
        t0 = dx * p0.slope
        t1 = dx * p1.slope

        lo = min(lo, y0, y1)
        hi = max(hi, y0, y1)

        for t in _critical_ts(*derivative_coefficients(y0, y1, t0, t1)):
            if 0.0 <= t <= 1.0:
                y = hermite(y0, y1, t0, t1, t)
                lo = min(lo, y)
                hi = max(hi, y)

    logger.debug("extrema over %d segments: [%s, %s]", curve.segment_count(), lo, hi)
    return Extrema(lo, hi)
