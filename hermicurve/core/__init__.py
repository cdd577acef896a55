from .math import Point, hermite, hermite_d
from .errors import (
    CurveError, DomainError, OutOfRangeError, MalformedInputError, InsertionError, InsertFailure,
)
from .point import ControlPoint
from .curve import Curve
from .evaluator import value_at, sample_at, derivative_at, tangent_direction_at, slope_at
from .extrema import Extrema, extrema_of
from .editing import CurveEditor, move_point, set_tangent, set_point, insert_point, remove_point
from .presets import preset
from .registries import preset_registry
