import pytest

from hermicurve.core import (
    Curve, CurveEditor, InsertFailure, InsertionError, OutOfRangeError,
    insert_point, move_point, remove_point, set_point, set_tangent,
)
from hermicurve.core.constants import MIN_POINT_X_DISTANCE, MIN_TANGENT_X


def four_point_curve():
    return Curve.from_flat([
        0.0, 0.0, 1.0, 1.0,
        0.3, 0.8, 1.0, 0.5,
        0.6, 0.4, 1.0, -2.0,
        1.0, 1.0, 1.0, 0.0,
    ])


def assert_invariants(curve):
    first = curve.point_at(0)
    last = curve.point_at(curve.point_count() - 1)
    assert first.x == 0.0
    assert last.x == 1.0
    for a, b in zip(curve.points, curve.points[1:]):
        assert b.x - a.x >= MIN_POINT_X_DISTANCE - 1e-9
    for p in curve.points:
        assert p.tx > 0.0


def test_move_interior_point():
    curve = four_point_curve()
    moved = move_point(curve, 1, 0.35, 2.0)
    p = moved.point_at(1)
    assert (p.x, p.y) == (0.35, 2.0)
    assert (p.tx, p.ty) == (1.0, 0.5)
    # original untouched
    assert curve.point_at(1).x == 0.3
    assert_invariants(moved)


def test_move_clamps_to_neighbours():
    curve = four_point_curve()
    right = move_point(curve, 1, 0.9, 0.0)
    assert abs(right.point_at(1).x - (0.6 - MIN_POINT_X_DISTANCE)) < 1e-12
    left = move_point(curve, 2, -3.0, 0.0)
    assert abs(left.point_at(2).x - (0.3 + MIN_POINT_X_DISTANCE)) < 1e-12
    assert_invariants(right)
    assert_invariants(left)


def test_move_endpoints_stay_anchored():
    curve = four_point_curve()
    first = move_point(curve, 0, 0.2, -1.0)
    assert first.point_at(0).x == 0.0
    assert first.point_at(0).y == -1.0
    last = move_point(curve, 3, 0.5, 2.0)
    assert last.point_at(3).x == 1.0
    assert last.point_at(3).y == 2.0


def test_move_out_of_range():
    with pytest.raises(OutOfRangeError):
        move_point(four_point_curve(), 4, 0.5, 0.5)


def test_move_shares_untouched_points():
    curve = four_point_curve()
    moved = move_point(curve, 1, 0.35, 2.0)
    assert moved.points[0] is curve.points[0]
    assert moved.points[3] is curve.points[3]


def test_set_tangent():
    curve = four_point_curve()
    edited = set_tangent(curve, 2, 2.0, 3.0)
    p = edited.point_at(2)
    assert (p.x, p.y, p.tx, p.ty) == (0.6, 0.4, 2.0, 3.0)
    assert curve.point_at(2).tx == 1.0


def test_set_tangent_clamps_to_positive():
    edited = set_tangent(four_point_curve(), 1, -1.0, 1.0)
    assert edited.point_at(1).tx == MIN_TANGENT_X
    edited = set_tangent(four_point_curve(), 1, 0.0, 1.0)
    assert edited.point_at(1).tx == MIN_TANGENT_X
    assert_invariants(edited)


def test_set_tangent_out_of_range():
    with pytest.raises(OutOfRangeError):
        set_tangent(four_point_curve(), -1, 1.0, 1.0)


def test_set_point():
    edited = set_point(four_point_curve(), 1, 0.32, 0.1, 1.0, 0.0)
    p = edited.point_at(1)
    assert (p.x, p.y, p.tx, p.ty) == (0.32, 0.1, 1.0, 0.0)


def test_insert_preserves_shape():
    curve = four_point_curve()
    xs = [i / 200 for i in range(201)]
    before = [curve.sample_at(x) for x in xs]
    for x in (0.1, 0.45, 0.77):
        inserted = insert_point(curve, x, 123.0)
        assert inserted.point_count() == curve.point_count() + 1
        assert_invariants(inserted)
        after = [inserted.sample_at(v) for v in xs]
        for a, b in zip(before, after):
            assert abs(a - b) < 1e-9


def test_insert_places_point_after_left_endpoint():
    curve = four_point_curve()
    inserted = insert_point(curve, 0.45)
    assert abs(inserted.point_at(2).x - 0.45) < 1e-12
    assert inserted.point_at(1) == curve.point_at(1)
    assert inserted.point_at(3) == curve.point_at(2)


def test_insert_ignores_requested_y():
    curve = four_point_curve()
    inserted = insert_point(curve, 0.45, 50.0)
    assert abs(inserted.point_at(2).y - curve.sample_at(0.45)) < 1e-12


def test_insert_outside_segments():
    curve = four_point_curve()
    for x in (0.0, 1.0, -0.5, 1.5):
        with pytest.raises(InsertionError) as exc:
            insert_point(curve, x)
        assert exc.value.reason is InsertFailure.OUTSIDE_SEGMENTS


def test_insert_too_close():
    curve = four_point_curve()
    for x in (0.3, 0.305, 0.595):
        with pytest.raises(InsertionError) as exc:
            insert_point(curve, x)
        assert exc.value.reason is InsertFailure.TOO_CLOSE


def test_remove_interior_point():
    curve = four_point_curve()
    removed = remove_point(curve, 2)
    assert removed.point_count() == 3
    assert removed.point_at(2) == curve.point_at(3)
    assert curve.point_count() == 4


def test_remove_endpoints_is_noop():
    curve = four_point_curve()
    assert remove_point(curve, 0) is curve
    assert remove_point(curve, 3) == curve
    assert remove_point(curve, 17) is curve


def test_edit_sequence_keeps_invariants():
    curve = Curve()
    curve = insert_point(curve, 0.5)
    curve = insert_point(curve, 0.25)
    curve = move_point(curve, 1, 0.9, 0.3)
    curve = set_tangent(curve, 2, 0.0, -1.0)
    curve = move_point(curve, 2, 0.0, 0.0)
    curve = remove_point(curve, 1)
    assert_invariants(curve)


def test_editor_subclass_spacing():
    class WideEditor(CurveEditor):
        min_point_distance = 0.1

    editor = WideEditor()
    curve = editor.insert_point(Curve(), 0.5)
    moved = editor.move_point(curve, 1, 0.99, 0.0)
    assert abs(moved.point_at(1).x - 0.9) < 1e-12
    with pytest.raises(InsertionError):
        editor.insert_point(curve, 0.55)
