import pickle

import pytest

from curvelab.elliptic import BITCOIN_TOY, DEFAULT, INF, REAL, TINY, Affine, Curve, parse_point, points
from curvelab.exceptions import DomainError


def test_infinity():
  assert INF.is_infinity
  assert not Affine(1, 2).is_infinity
  assert type(INF)() is INF
  assert pickle.loads(pickle.dumps(INF)) is INF
  assert INF != Affine(0, 0)
  assert Affine(0, 0) != INF
  assert repr(INF) == "INF"
  assert str(INF) == "O"
  assert str(Affine(3, 4)) == "(3, 4)"
  assert len({INF, type(INF)(), Affine(1, 2), Affine(1, 2)}) == 2


def test_parse_point():
  assert parse_point("192,105") == Affine(192, 105)
  assert parse_point(" (1.5, -2) ") == Affine(1.5, -2)
  assert parse_point("O") is INF
  assert parse_point("inf") is INF
  with pytest.raises(ValueError):
    parse_point("1,2,3")
  with pytest.raises(ValueError):
    parse_point("x,y")


def test_textbook_addition():
  """Vectors from the y2 = x3 + 7 (mod 223) textbook example; addition never uses a or b."""
  assert BITCOIN_TOY.add(Affine(192, 105), Affine(17, 56)) == Affine(170, 142)
  assert DEFAULT.add(Affine(192, 105), Affine(17, 56)) == Affine(170, 142)
  assert BITCOIN_TOY.add(Affine(47, 71), Affine(117, 141)) == Affine(60, 139)
  assert BITCOIN_TOY.add(Affine(143, 98), Affine(76, 66)) == Affine(47, 71)
  assert BITCOIN_TOY.double(Affine(192, 105)) == Affine(49, 71)
  assert BITCOIN_TOY.contains(Affine(170, 142))


def test_identity():
  for curve in (DEFAULT, TINY, BITCOIN_TOY):
    for P in points.points(curve):
      assert curve.add(P, INF) == P
      assert curve.add(INF, P) == P
  assert DEFAULT.add(INF, INF) is INF


def test_inverse():
  for P in points.points(DEFAULT)[1:]:
    assert DEFAULT.add(P, Affine(P.x, DEFAULT.p - P.y)) is INF
    assert DEFAULT.sub(P, P) is INF
    assert DEFAULT.neg(P) == Affine(P.x, (-P.y) % DEFAULT.p)
  assert DEFAULT.neg(INF) is INF


def test_closure():
  pts = points.points(DEFAULT)
  # A spread of pairs, including doublings
  for P in pts[::7]:
    for Q in pts[::11]:
      assert DEFAULT.contains(DEFAULT.add(P, Q))
  for P in pts:
    assert DEFAULT.contains(DEFAULT.double(P))


def test_vertical_tangent():
  # y = 0 points have order two
  curve = Curve(0, -1, 7)  # y2 = x3 - 1 has (1, 0)
  P = Affine(1, 0)
  assert curve.contains(P)
  assert curve.double(P) is INF
  assert curve.mul(2, P) is INF
  assert curve.mul(3, P) == P


def test_commutative_associative():
  G = TINY.G
  P, Q, R = TINY.mul(3, G), TINY.mul(7, G), TINY.mul(11, G)
  assert TINY.add(P, Q) == TINY.add(Q, P)
  assert TINY.add(TINY.add(P, Q), R) == TINY.add(P, TINY.add(Q, R))
  assert TINY.add(P, Q) == TINY.mul(10, G)


def test_scalar_multiplication():
  G = TINY.G
  multiples = [TINY.mul(k, G) for k in range(21)]
  assert multiples[0] is INF
  assert multiples[1] == G
  assert multiples[2] == Affine(6, 3)
  assert multiples[18] == Affine(5, 16)
  assert multiples[19] is INF
  assert multiples[20] == G
  # Repeated addition agrees with double-and-add
  Q = INF
  for k in range(21):
    assert Q == multiples[k]
    Q = TINY.add(Q, G)
  assert TINY.mul(-1, G) == TINY.neg(G)
  assert TINY.mul(-18, G) == G
  assert TINY.mul(5, INF) is INF
  assert TINY.mul(19 * 1000 + 2, G) == Affine(6, 3)  # no reduction needed by the caller
  with pytest.raises(TypeError):
    TINY.mul(1.5, G)


def test_default_curve_order():
  """The default parameters are inconsistent: G = (47, 71) is not on the curve and 227 G is not O."""
  G = DEFAULT.G
  assert not DEFAULT.contains(G)
  assert DEFAULT.mul(2, G) == Affine(72, 1)
  assert DEFAULT.mul(3, G) == Affine(94, 16)
  assert DEFAULT.mul(227, G) == DEFAULT.mul(10, G) == Affine(153, 146)
  assert DEFAULT.mul(217, G) is INF
  assert BITCOIN_TOY.mul(21, BITCOIN_TOY.G) is INF
  assert TINY.mul(19, TINY.G) is INF


def test_check():
  assert TINY.check(TINY.G) == TINY.G
  assert TINY.check(INF) is INF
  with pytest.raises(DomainError) as exc:
    DEFAULT.check(DEFAULT.G)
  assert "not a point on" in str(exc.value)


def test_bad_parameters():
  with pytest.raises(DomainError):
    Curve(1, 1)  # field mode needs p
  with pytest.raises(DomainError):
    Curve(1, 1, 1)
  with pytest.raises(DomainError) as exc:
    Curve(1, 1, 9)
  assert "must be a prime" in str(exc.value)
  with pytest.raises(DomainError):
    TINY.replace(p=221)  # 13 * 17


def test_replace_and_equality():
  curve = DEFAULT.replace(b=113)
  assert curve.contains(DEFAULT.G)
  assert curve.G == DEFAULT.G and curve.n == DEFAULT.n
  assert curve != DEFAULT
  assert Curve(-7, 10, 223, (47, 71), 227) == DEFAULT
  assert hash(Curve(-7, 10, 223, (47, 71), 227)) == hash(DEFAULT)
  assert str(DEFAULT) == "y² = x³ - 7x + 10 (mod 223)"
  assert str(REAL) == "y² = x³ - 7x + 10"
  assert repr(TINY) == "TINY"
  assert repr(DEFAULT.replace(n=217)).startswith("Curve(a=-7, b=10, p=223")


def test_real_curve():
  G = REAL.G
  assert REAL.contains(G)
  assert not REAL.contains(Affine(1, 2.1))
  P = REAL.double(G)
  assert REAL.contains(P)
  Q = REAL.add(G, P)
  assert REAL.contains(Q)
  assert REAL.add(Q, REAL.neg(Q)) is INF
  # Double-and-add agrees with repeated addition within float tolerance
  R = REAL.mul(3, G)
  assert R.x == pytest.approx(Q.x) and R.y == pytest.approx(Q.y)
  # y2 = x3 - x crosses the axis at -1, 0 and 1
  curve = Curve(-1, 0, real=True)
  for x in (-1.0, 0.0, 1.0):
    assert points.ys(x, curve) == [0.0]
    assert curve.double(Affine(x, 0.0)) is INF
  assert points.ys(0.5, curve) == []
  assert points.ys(2.0, curve) == pytest.approx([6 ** 0.5, -(6 ** 0.5)])
