"""
Coordinate arithmetic for the curve group.

The group law is written once against the Ring interface and the curve is
given either a PrimeField (exact integers mod p) or a RealField (floats, for
plotting the familiar continuous curve).
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import List

from curvelab.elliptic import modular
from curvelab.exceptions import DomainError


class Ring(ABC):
  """Abstract base class for coordinate rings."""

  is_real = False

  @abstractmethod
  def reduce(self, v):
    """Bring a value into its canonical representation."""
    raise NotImplementedError

  @abstractmethod
  def div(self, num, den):
    raise NotImplementedError

  @abstractmethod
  def sqrt(self, v) -> List:
    """All square roots of v, an empty list if there are none."""
    raise NotImplementedError

  @abstractmethod
  def equal(self, u, v) -> bool:
    raise NotImplementedError

  def is_zero(self, v) -> bool:
    return self.equal(v, 0)


class PrimeField(Ring):
  """Integers modulo the prime p"""

  def __init__(self, p: int):
    if not isinstance(p, int) or not modular.is_prime(p):
      raise DomainError(f"Field modulus must be a prime, got {p!r}")
    self.p = p

  def reduce(self, v: int) -> int:
    return modular.mod(v, self.p)

  def div(self, num: int, den: int) -> int:
    return modular.mod(num * modular.inverse(den, self.p), self.p)

  def sqrt(self, v: int) -> List[int]:
    return modular.sqrt(v, self.p)

  def equal(self, u: int, v: int) -> bool:
    return (u - v) % self.p == 0

  def __eq__(self, other):
    return isinstance(other, PrimeField) and other.p == self.p

  def __hash__(self): return hash(self.p)
  def __repr__(self): return f"PrimeField({self.p})"


class RealField(Ring):
  """Floating point reals, compared within a tolerance"""

  is_real = True

  def __init__(self, tolerance: float = 1e-4):
    self.tolerance = tolerance

  def reduce(self, v) -> float:
    return float(v)

  def div(self, num, den) -> float:
    return num / den

  def sqrt(self, v) -> List[float]:
    if self.is_zero(v):
      return [0.0]
    if v < 0:
      return []
    r = math.sqrt(v)
    return [r, -r]

  def equal(self, u, v) -> bool:
    return math.isclose(u, v, rel_tol=1e-9, abs_tol=self.tolerance)

  def __eq__(self, other):
    return isinstance(other, RealField) and other.tolerance == self.tolerance

  def __hash__(self): return hash(self.tolerance)
  def __repr__(self): return f"RealField({self.tolerance})"
