from __future__ import annotations

from typing import Optional, Union

from curvelab.elliptic.point import INF, Affine, Point
from curvelab.elliptic.ring import PrimeField, RealField, Ring
from curvelab.exceptions import DomainError

# Short Weierstrass curve: y2 = x3 + a x + b
# over a prime field (default) or over the reals.


class Curve:
  """Curve parameters a, b, p, base point G of stated order n, and the coordinate ring."""

  def __init__(
    self,
    a: Union[int, float],
    b: Union[int, float],
    p: Optional[int] = None,
    G: Optional[Affine] = None,
    n: Optional[int] = None,
    *,
    real: bool = False,
    name: str = "",
  ):
    self.a, self.b, self.p, self.n, self.name = a, b, p, n, name
    self.field: Ring = RealField() if real else PrimeField(p)  # type: ignore
    self.G = Affine(*G) if G is not None else None

  @property
  def is_real(self) -> bool:
    return self.field.is_real

  def replace(self, **changes) -> Curve:
    """Return a copy of the curve with some parameters changed."""
    params = dict(a=self.a, b=self.b, p=self.p, G=self.G, n=self.n, real=self.is_real, name="")
    params.update(changes)
    return Curve(**params)

  def rhs(self, x):
    """The right hand side x3 + a x + b, reduced into the field"""
    return self.field.reduce(x * x * x + self.a * x + self.b)

  def contains(self, P: Point) -> bool:
    """Test if the point satisfies the curve equation (infinity always does)."""
    if P.is_infinity:
      return True
    return self.field.equal(self.field.reduce(P.y * P.y), self.rhs(P.x))

  def check(self, P: Point) -> Point:
    """Return P if it is on the curve, otherwise raise DomainError."""
    if not self.contains(P):
      raise DomainError(f"{P} is not a point on {self}")
    return P

  def neg(self, P: Point) -> Point:
    if P.is_infinity:
      return INF
    return Affine(P.x, self.field.reduce(-P.y))

  def add(self, P: Point, Q: Point) -> Point:
    """The group law."""
    if P.is_infinity:
      return Q
    if Q.is_infinity:
      return P
    F = self.field
    if F.equal(P.x, Q.x):
      # Either P = -Q or doubling a point with vertical tangent
      if not F.equal(P.y, Q.y) or F.is_zero(P.y):
        return INF
      slope = F.div(F.reduce(3 * P.x * P.x + self.a), F.reduce(2 * P.y))
    else:
      slope = F.div(F.reduce(Q.y - P.y), F.reduce(Q.x - P.x))
    x = F.reduce(slope * slope - P.x - Q.x)
    y = F.reduce(slope * (P.x - x) - P.y)
    return Affine(x, y)

  def sub(self, P: Point, Q: Point) -> Point:
    return self.add(P, self.neg(Q))

  def double(self, P: Point) -> Point:
    return self.add(P, P)

  def mul(self, k: int, P: Point) -> Point:
    """
    Scalar multiplication k P by double-and-add.

    The scalar is not reduced by the group order, callers that want the
    smallest representative need to reduce it first.
    """
    if not isinstance(k, int):
      raise TypeError(f"The scalar must be an integer, not {type(k).__name__}")
    if k < 0:
      return self.mul(-k, self.neg(P))
    R = INF
    while k and not P.is_infinity:
      if k & 1:
        R = self.add(R, P)
      P = self.add(P, P)
      k >>= 1
    return R

  def __eq__(self, other):
    if not isinstance(other, Curve): return NotImplemented
    return (self.a, self.b, self.p, self.G, self.n, self.field) == (other.a, other.b, other.p, other.G, other.n, other.field)

  def __hash__(self):
    return hash((self.a, self.b, self.p, self.G, self.n, self.field))

  def __str__(self):
    eq = f"y² = x³ {'+' if self.a >= 0 else '-'} {abs(self.a)}x {'+' if self.b >= 0 else '-'} {abs(self.b)}"
    return eq if self.is_real else f"{eq} (mod {self.p})"

  def __repr__(self):
    if self.name:
      return self.name
    mode = ", real=True" if self.is_real else f", p={self.p}"
    return f"Curve(a={self.a}, b={self.b}{mode}, G={self.G}, n={self.n})"


# Long-standing default parameters. Notice that G is not on this curve and
# n does not annihilate it: G's real order is recovered by ecdsa.order().
DEFAULT = Curve(-7, 10, 223, (47, 71), 227, name="DEFAULT")

# The secp256k1 equation over a toy field, a common textbook example
BITCOIN_TOY = Curve(0, 7, 223, (47, 71), 21, name="BITCOIN_TOY")

# Prime order group of 19 points, the field has p = 1 (mod 4)
TINY = Curve(2, 2, 17, (5, 1), 19, name="TINY")

# Continuous curve for plotting, no group order
REAL = Curve(-7, 10, G=(1, 2), real=True, name="REAL")

PRESETS = {c.name.lower(): c for c in (DEFAULT, BITCOIN_TOY, TINY, REAL)}
