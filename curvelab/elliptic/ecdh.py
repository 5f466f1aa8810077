from typing import NamedTuple, Optional, Tuple

from curvelab.elliptic.curve import Curve
from curvelab.elliptic.point import Affine, Point
from curvelab.exceptions import DomainError
from curvelab.util import RandomSource, rng_or_default

# Elliptic curve Diffie-Hellman over the toy curves. Both parties end up with
# dA * QB = dA * dB * G = dB * QA, which holds only if the group law is right.


class KeyPair(NamedTuple):
  d: int
  Q: Point


def private_key(n: int, rng: Optional[RandomSource] = None) -> int:
  """Random scalar in [1, n - 1]"""
  if n is None or n < 2:
    raise DomainError(f"Cannot draw a private key for group order {n}")
  return rng_or_default(rng).randint(1, n - 1)


def public_key(d: int, curve: Curve) -> Point:
  if curve.G is None:
    raise DomainError("The curve has no base point")
  return curve.mul(d, curve.G)


def keypair(curve: Curve, rng: Optional[RandomSource] = None) -> KeyPair:
  d = private_key(curve.n, rng)
  return KeyPair(d, public_key(d, curve))


def shared_secret(d: int, Q: Point, curve: Curve) -> Point:
  """The shared point d * Q from our private key and their public key."""
  return curve.mul(d, Q)


def key_material(S: Point) -> Tuple[int, int]:
  """The coordinates of a shared point, for deriving a symmetric key"""
  if S.is_infinity:
    raise DomainError("The shared point is the point at infinity, no key can be derived")
  assert isinstance(S, Affine)
  return S.x, S.y
