from dataclasses import dataclass


@dataclass(frozen=True)
class ControlPoint:
    """
    One anchor of a Hermite curve:
      - x: position along the normalized domain, 0..1
      - y: curve value at x (unbounded)
      - tx, ty: tangent run/rise; the slope is ty / tx, tx must stay > 0
    Frozen, so points handed out by a Curve can be shared freely.
    """
    x: float
    y: float
    tx: float
    ty: float

    @property
    def slope(self) -> float:
        return self.ty / self.tx

    def as_tuple(self, /) -> tuple[float, float, float, float]:
        return self.x, self.y, self.tx, self.ty
