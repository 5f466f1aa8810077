from __future__ import annotations

from typing import NamedTuple, Union


class Infinity:
  """The point at infinity, identity element of the group. There is only one."""

  __slots__ = ()
  _instance = None
  is_infinity = True

  def __new__(cls):
    if cls._instance is None:
      cls._instance = super().__new__(cls)
    return cls._instance

  def __repr__(self): return "INF"
  def __str__(self): return "O"
  def __hash__(self): return hash("INF")

  def __eq__(self, other):
    return other is self

  def __reduce__(self):
    return Infinity, ()


class Affine(NamedTuple):
  """A point (x, y) with coordinates in the ring of its curve"""
  x: Union[int, float]
  y: Union[int, float]

  is_infinity = False

  def __str__(self): return f"({self.x}, {self.y})"


# Neutral element
INF = Infinity()

Point = Union[Affine, Infinity]


def parse_point(s: str) -> Point:
  """Parse "x,y" (integer or decimal coordinates), or "O"/"inf" for infinity."""
  s = s.strip().strip("()").strip()
  if s.lower() in ("o", "inf", "infinity"):
    return INF
  parts = s.split(",")
  if len(parts) != 2:
    raise ValueError(f"Expected a point as x,y but got {s!r}")
  return Affine(*(parse_number(p) for p in parts))


def parse_number(s: str) -> Union[int, float]:
  s = s.strip()
  try:
    return int(s)
  except ValueError:
    pass
  try:
    return float(s)
  except ValueError:
    raise ValueError(f"Not a number: {s!r}") from None
