from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Union

from curvelab.elliptic.curve import Curve
from curvelab.elliptic.point import INF, Affine, Point

# Enumeration is exhaustive up to this field size, above it x is sampled
MAX_EXHAUSTIVE = 1000
SAMPLE_SIZE = 100

# Plotting window for curves over the reals
REAL_RANGE = (-10.0, 10.0)
REAL_STEP = 0.1


def ys(x: Union[int, float], curve: Curve) -> List[Union[int, float]]:
  """All y such that (x, y) is on the curve: none, one or two values."""
  return curve.field.sqrt(curve.rhs(x))


def is_sampled(curve: Curve) -> bool:
  """True when points() only visits a sample of the x coordinates."""
  return curve.is_real or curve.p > MAX_EXHAUSTIVE


def xs(curve: Curve) -> Iterator[Union[int, float]]:
  """The x coordinates visited by points(), in increasing order."""
  if curve.is_real:
    lo, hi = REAL_RANGE
    steps = int(round((hi - lo) / REAL_STEP))
    # Computed from the index rather than accumulated to avoid drift
    return (round(lo + i * REAL_STEP, 10) for i in range(steps + 1))
  if curve.p <= MAX_EXHAUSTIVE:
    return iter(range(curve.p))
  return iter(range(0, curve.p, max(1, curve.p // SAMPLE_SIZE)))


def points(curve: Curve) -> List[Point]:
  """
  The points of the curve, starting with the point at infinity.

  Exact for small prime fields. Large fields and the reals are sampled, so the
  result is then a subset meant for plotting.
  """
  return [INF] + [Affine(x, y) for x in xs(curve) for y in ys(x, curve)]


def count(curve: Curve) -> int:
  """Number of points found by points(), the group order for small fields"""
  return 1 + sum(len(ys(x, curve)) for x in xs(curve))


class OperationLine(NamedTuple):
  """Two operands and their sum, drawn as a line by the visualizer"""
  first: Affine
  second: Affine
  result: Point


def operation_line(curve: Curve, P: Point, Q: Point) -> Optional[OperationLine]:
  """Overlay for P + Q, None when either operand is the point at infinity"""
  if P.is_infinity or Q.is_infinity:
    return None
  return OperationLine(P, Q, curve.add(P, Q))
