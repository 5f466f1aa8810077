from typing import List

from curvelab.exceptions import DomainError, NoInverseError

# Plain integer arithmetic modulo m. Not constant time.


def mod(n: int, m: int) -> int:
  """Canonical residue of n in [0, m)"""
  return (n % m + m) % m


def inverse(a: int, m: int) -> int:
  """Modular inverse by the extended Euclidean algorithm."""
  old_r, r = mod(a, m), m
  old_s, s = 1, 0
  while r:
    q = old_r // r
    old_r, r = r, old_r - q * r
    old_s, s = s, old_s - q * s
  if old_r != 1:
    raise NoInverseError(f"{a} has no inverse modulo {m}")
  return mod(old_s, m)


def power(base: int, exp: int, m: int) -> int:
  """Square-and-multiply exponentiation, exp >= 0"""
  if exp < 0:
    raise ValueError("Negative exponents are not supported, use inverse()")
  result = 1 % m
  base %= m
  while exp:
    if exp & 1:
      result = result * base % m
    base = base * base % m
    exp >>= 1
  return result


# Legendre symbol by Euler's criterion:
# -  0   if n is zero
# -  1   if n is a non-zero square
# -  p-1 if n is not a square
def legendre(n: int, p: int) -> int:
  return power(n, (p - 1) // 2, p)


def is_residue(n: int, p: int) -> bool:
  """Test if n is a square modulo the odd prime p (zero included)."""
  return mod(n, p) == 0 or legendre(n, p) == 1


# Enough witnesses for a deterministic answer below 3.3e24, a strong probable
# prime test above that
WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def is_prime(n: int) -> bool:
  """Trial division by the witnesses, then Miller-Rabin."""
  if n < 2:
    return False
  for q in WITNESSES:
    if n % q == 0:
      return n == q
  if n < WITNESSES[-1] ** 2:
    return True
  d, e = n - 1, 0
  while d % 2 == 0:
    d //= 2
    e += 1
  for a in WITNESSES:
    x = power(a, d, n)
    if x in (1, n - 1):
      continue
    for _ in range(e - 1):
      x = x * x % n
      if x == n - 1:
        break
    else:
      return False
  return True


def sqrt(n: int, p: int) -> List[int]:
  """
  Square roots of n modulo the prime p.

  :returns: [] if n is not a square, [r] if the root is unique, else [r, p - r]
  """
  if not is_prime(p):
    raise DomainError(f"Modulus {p} is not a prime")
  n = mod(n, p)
  if p == 2 or n == 0:
    return [n]
  if legendre(n, p) != 1:
    return []
  if p % 4 == 3:
    r = power(n, (p + 1) // 4, p)
    return [r, p - r]
  # Tonelli-Shanks: p - 1 = s * 2^e with s odd
  s, e = p - 1, 0
  while s % 2 == 0:
    s //= 2
    e += 1
  # Any quadratic non-residue will do, the smallest is found quickly
  z = next(z for z in range(2, p) if legendre(z, p) == p - 1)
  x = power(n, (s + 1) // 2, p)
  b = power(n, s, p)
  g = power(z, s, p)
  r = e
  while True:
    # Least m such that b^(2^m) == 1
    t, m = b, 0
    while t != 1 and m < r:
      t = t * t % p
      m += 1
    if m == 0:
      return [x, p - x]
    gs = power(g, 1 << (r - m - 1), p)
    g = gs * gs % p
    x = x * gs % p
    b = b * g % p
    r = m
