import logging
from typing import Optional

from .constants import MIN_POINT_X_DISTANCE, MIN_TANGENT_X, SPACING_TOLERANCE
from .curve import Curve
from .errors import InsertionError, InsertFailure
from .point import ControlPoint

logger = logging.getLogger(__name__)


class CurveEditor:
    """
    Edits for Hermite curves. Every method takes a curve and returns a new
    one; the input is never touched, so callers can keep old values around
    (e.g. for undo).
      - move: clamp x between the neighbours, endpoints pinned to 0 and 1.
      - tangent: replace (tx, ty), tx floored to a small positive value.
      - insert: split a segment without changing the curve's shape.
      - remove: drop an interior point; endpoints stay.
    """
    min_point_distance: float = MIN_POINT_X_DISTANCE
    min_tangent_x: float = MIN_TANGENT_X

    def _replace(self, curve: Curve, i: int, point: ControlPoint) -> Curve:
        points = curve.points
        return curve.with_points(points[:i] + (point,) + points[i + 1:])

    def clamp_x(self, curve: Curve, i: int, new_x: float) -> float:
        last = curve.point_count() - 1
        if i == 0:
            return 0.0
        if i == last:
            return 1.0
        lo = curve.points[i - 1].x + self.min_point_distance
        hi = curve.points[i + 1].x - self.min_point_distance
        return min(hi, max(lo, new_x))

    def move_point(self, curve: Curve, i: int, new_x: float, new_y: float) -> Curve:
        p = curve.point_at(i)
        x = self.clamp_x(curve, i, new_x)
        logger.debug("move point %d: x %s -> %s (requested %s), y %s -> %s", i, p.x, x, new_x, p.y, new_y)
        return self._replace(curve, i, ControlPoint(x, new_y, p.tx, p.ty))

    def set_tangent(self, curve: Curve, i: int, tx: float, ty: float) -> Curve:
        p = curve.point_at(i)
        clamped = max(tx, self.min_tangent_x)
        if clamped != tx:
            logger.debug("tangent x %s of point %d clamped to %s", tx, i, clamped)
        return self._replace(curve, i, ControlPoint(p.x, p.y, clamped, ty))

    def set_point(self, curve: Curve, i: int, x: float, y: float, tx: float, ty: float) -> Curve:
        moved = self.move_point(curve, i, x, y)
        return self.set_tangent(moved, i, tx, ty)

    def insert_point(self, curve: Curve, x: float, y: Optional[float] = None) -> Curve:
        """
        Insert a point at x, taking its value and tangent from the current
        curve so the shape is unchanged. `y` is accepted for call-site
        symmetry with move_point and ignored.

        Raises InsertionError when x is not strictly inside (0, 1) or would
        land closer than the minimum spacing to an existing point.
        """
        if not 0.0 < x < 1.0:
            logger.debug("insert at x=%s rejected: outside segments", x)
            raise InsertionError(x, InsertFailure.OUTSIDE_SEGMENTS)

        s = curve.segment_containing(x)
        p0, p1 = curve.segment_bounds(s)
        limit = self.min_point_distance - SPACING_TOLERANCE
        if x - p0.x < limit or p1.x - x < limit:
            logger.debug("insert at x=%s rejected: too close to segment %d bounds", x, s)
            raise InsertionError(x, InsertFailure.TOO_CLOSE)

        t = curve.local_t(s, x)
        px, py = curve.value_at(s, t)
        dx, dy = curve.tangent_direction_at(s, t)
        logger.debug("insert point at segment %d, t=%s: (%s, %s)", s, t, px, py)

        points = curve.points
        return curve.with_points(points[:s + 1] + (ControlPoint(px, py, dx, dy),) + points[s + 1:])

    def remove_point(self, curve: Curve, i: int) -> Curve:
        if 0 < i < curve.point_count() - 1:
            logger.debug("remove point %d", i)
            points = curve.points
            return curve.with_points(points[:i] + points[i + 1:])
        return curve


default_editor = CurveEditor()


def move_point(curve: Curve, i: int, new_x: float, new_y: float) -> Curve:
    return default_editor.move_point(curve, i, new_x, new_y)


def set_tangent(curve: Curve, i: int, tx: float, ty: float) -> Curve:
    return default_editor.set_tangent(curve, i, tx, ty)


def set_point(curve: Curve, i: int, x: float, y: float, tx: float, ty: float) -> Curve:
    return default_editor.set_point(curve, i, x, y, tx, ty)


def insert_point(curve: Curve, x: float, y: Optional[float] = None) -> Curve:
    return default_editor.insert_point(curve, x, y)


def remove_point(curve: Curve, i: int) -> Curve:
    return default_editor.remove_point(curve, i)
