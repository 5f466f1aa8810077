import pytest

from curvelab.elliptic import modular
from curvelab.exceptions import DomainError, NoInverseError

PRIMES = [2, 3, 5, 7, 13, 17, 41, 97, 223, 257, 65537]


def test_mod():
  assert modular.mod(-1, 7) == 6
  assert modular.mod(-14, 7) == 0
  assert modular.mod(15, 7) == 1
  assert modular.mod(0, 5) == 0


def test_inverse():
  for p in PRIMES[:8]:
    for a in range(1, p):
      assert a * modular.inverse(a, p) % p == 1
  assert modular.inverse(-3, 7) == 2
  assert modular.inverse(3, 10) == 7

  with pytest.raises(NoInverseError):
    modular.inverse(0, 7)
  with pytest.raises(NoInverseError) as exc:
    modular.inverse(6, 9)
  assert "no inverse" in str(exc.value)


def test_power():
  assert modular.power(3, 0, 7) == 1
  assert modular.power(3, 200, 1000003) == pow(3, 200, 1000003)
  assert modular.power(-2, 3, 11) == pow(-2, 3, 11)
  assert modular.power(5, 1, 1) == 0
  with pytest.raises(ValueError):
    modular.power(2, -1, 7)


def test_legendre():
  assert modular.legendre(4, 7) == 1
  assert modular.legendre(3, 7) == 6
  assert modular.legendre(0, 7) == 0
  assert modular.is_residue(0, 7)
  assert modular.is_residue(2, 7)
  assert not modular.is_residue(3, 7)


def test_sqrt_all_residues():
  """Every result squares back to n, and the result is empty exactly for non-squares."""
  for p in PRIMES[:10]:
    squares = {x * x % p for x in range(p)}
    for n in range(p):
      roots = modular.sqrt(n, p)
      assert all(r * r % p == n for r in roots), (n, p, roots)
      assert bool(roots) == (n in squares)
      if roots and n:
        # Two roots r and p - r, except in GF(2)
        if p == 2:
          assert roots == [1]
        else:
          assert len(roots) == 2
          assert roots[0] + roots[1] == p


def test_sqrt_special_cases():
  assert modular.sqrt(0, 13) == [0]
  assert modular.sqrt(26, 13) == [0]
  assert modular.sqrt(1, 2) == [1]
  assert modular.sqrt(3, 2) == [1]
  assert modular.sqrt(0, 2) == [0]
  assert modular.sqrt(-1, 13) in ([5, 8], [8, 5])
  assert sorted(modular.sqrt(2, 17)) == [6, 11]
  assert modular.sqrt(3, 17) == []
  # p = 3 (mod 4) takes the closed form
  assert sorted(modular.sqrt(2, 7)) == [3, 4]
  # Large prime with a long power of two in p - 1
  r = modular.sqrt(3, 65537)
  assert not r  # 3 is the smallest non-residue of Fermat primes
  r = modular.sqrt(10, 65537)
  assert all(x * x % 65537 == 10 for x in r)

  with pytest.raises(DomainError):
    modular.sqrt(4, 1)
  with pytest.raises(DomainError):
    modular.sqrt(4, 9)
  with pytest.raises(DomainError):
    modular.sqrt(2, 15)  # no non-residue search on composites


def test_is_prime():
  assert [n for n in range(60) if modular.is_prime(n)] == [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59
  ]
  assert all(modular.is_prime(p) for p in PRIMES)
  assert modular.is_prime(2**256 - 2**32 - 977)
  assert not modular.is_prime(-7)
  assert not modular.is_prime(1681)  # 41 squared
  assert not modular.is_prime(3215031751)  # strong pseudoprime to bases 2, 3, 5 and 7
  assert not modular.is_prime(2**64 + 1)
