from math import gcd, isqrt
from typing import NamedTuple, Optional

from curvelab.elliptic import ecdh
from curvelab.elliptic.curve import Curve
from curvelab.elliptic.modular import inverse
from curvelab.elliptic.point import INF, Point
from curvelab.exceptions import DomainError, SignatureError
from curvelab.util import Hasher, RandomSource, checksum, rng_or_default

# ECDSA with a toy checksum in place of a hash. Only for small educational
# curves: the nonce source is pluggable but nothing here is constant time.

# Each attempt fails with probability around 1/n, so this is never reached
# with a working random source
MAX_ATTEMPTS = 100


class Signature(NamedTuple):
  r: int
  s: int

  def __str__(self): return f"{self.r},{self.s}"


def order(curve: Curve) -> int:
  """
  Order of the base point G.

  The stated n is used when n * G is the point at infinity. Otherwise the
  parameters are inconsistent and the order is found by adding G to itself,
  up to the Hasse bound p + 2 sqrt(p) (plus some slack).
  """
  if curve.is_real:
    raise DomainError("Curves over the reals have no finite group order")
  G = curve.G
  if G is None:
    raise DomainError("The curve has no base point")
  if curve.n and curve.n > 0 and curve.mul(curve.n, G) is INF:
    return curve.n
  limit = curve.p + 2 * (isqrt(curve.p - 1) + 1) + 10
  Q, n = G, 1
  while n <= limit:
    if Q is INF:
      return n
    Q = curve.add(Q, G)
    n += 1
  raise DomainError(f"The order of {G} was not found within {limit} additions")


def signing_key(n: int, rng: Optional[RandomSource] = None) -> int:
  """Private key in [1, n - 1] that is invertible mod n, so that every message can be signed."""
  rng = rng_or_default(rng)
  for _ in range(MAX_ATTEMPTS):
    d = ecdh.private_key(n, rng)
    if gcd(d, n) == 1:
      return d
  raise DomainError(f"No key coprime to {n} found in {MAX_ATTEMPTS} attempts")


def keypair(curve: Curve, rng: Optional[RandomSource] = None) -> ecdh.KeyPair:
  """Signing key pair, drawn below the actual order of G"""
  d = signing_key(order(curve), rng)
  return ecdh.KeyPair(d, ecdh.public_key(d, curve))


def digest(message: str, n: int, hasher: Hasher = checksum) -> int:
  return hasher(message) % n


def sign(
  message: str,
  d: int,
  curve: Curve,
  rng: Optional[RandomSource] = None,
  hasher: Hasher = checksum,
  attempts: int = MAX_ATTEMPTS,
) -> Signature:
  """
  Sign a message with private key d.

  Degenerate attempts (kG at infinity, r = 0, s = 0, or k or s without an
  inverse mod a composite order) start over with a new nonce.

  Keys from signing_key() can sign any message. Other keys sharing a factor
  with a composite order fail on digests divisible by that factor.

  :raises DomainError: if the key can never sign this message
  :raises SignatureError: if no attempt succeeded
  """
  rng = rng_or_default(rng)
  n = order(curve)
  if n < 2:
    raise DomainError(f"Cannot sign with a base point of order {n}")
  z = digest(message, n, hasher)
  # A prime dividing n, d and z divides z + r d for every nonce, so s never has an inverse
  q = gcd(gcd(d, n), z)
  if q > 1:
    raise DomainError(f"Key {d} cannot sign this message: {q} divides the group order, the key and the digest")
  for _ in range(attempts):
    k = rng.randint(1, n - 1)
    R = curve.mul(k, curve.G)
    if R is INF or gcd(k, n) != 1:
      continue
    r = R.x % n
    if r == 0:
      continue
    s = inverse(k, n) * (z + r * d) % n
    if s == 0 or gcd(s, n) != 1:
      continue
    return Signature(r, s)
  raise SignatureError(f"No valid signature found in {attempts} attempts")


def verify(message: str, signature, Q: Point, curve: Curve, hasher: Hasher = checksum) -> bool:
  """Check a signature (r, s) against public key Q. Never raises on bad signatures."""
  n = order(curve)
  r, s = signature
  if not 0 < r < n or not 0 < s < n or gcd(s, n) != 1:
    return False
  z = digest(message, n, hasher)
  w = inverse(s, n)
  u1 = z * w % n
  u2 = r * w % n
  P = curve.add(curve.mul(u1, curve.G), curve.mul(u2, Q))
  if P is INF:
    return False
  return P.x % n == r
