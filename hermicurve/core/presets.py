from .curve import Curve
from .point import ControlPoint
from .registries import register_preset, preset_registry


def preset(name: str) -> Curve:
    """Build the named preset curve. Unknown names raise KeyError."""
    return preset_registry[name]()


@register_preset("default")
def default_curve() -> Curve:
    return Curve()


@register_preset("linear")
def linear_curve() -> Curve:
    return Curve((ControlPoint(0.0, 0.0, 1.0, 1.0), ControlPoint(1.0, 1.0, 1.0, 1.0)))


@register_preset("constant")
def constant_curve() -> Curve:
    return Curve((ControlPoint(0.0, 1.0, 1.0, 0.0), ControlPoint(1.0, 1.0, 1.0, 0.0)))


@register_preset("ease-in-out")
def ease_in_out_curve() -> Curve:
    # flat tangents at both ends give the smoothstep 3t^2 - 2t^3
    return Curve((ControlPoint(0.0, 0.0, 1.0, 0.0), ControlPoint(1.0, 1.0, 1.0, 0.0)))


@register_preset("ramp-down")
def ramp_down_curve() -> Curve:
    return Curve((ControlPoint(0.0, 1.0, 1.0, -1.0), ControlPoint(1.0, 0.0, 1.0, -1.0)))
