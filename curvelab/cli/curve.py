import sys

from tqdm import tqdm

from curvelab.cli.args import coordinate, integer, make_curve, point
from curvelab.elliptic import INF, ecdsa, modular, points
from curvelab.exceptions import CliArgError


def warn(msg: str):
  sys.stderr.write(f" ⚠️  \x1B[1;33m{msg}\x1B[0m\n")


def check_points(curve, *P):
  """Warn about operands that are not on the curve (the algebra proceeds regardless)."""
  for Q in P:
    if not curve.contains(Q):
      warn(f"{Q} is not on the curve {curve}")


def base_point(curve):
  if curve.G is None:
    raise CliArgError("The curve has no base point, use -g x,y")
  check_points(curve, curve.G)
  return curve.G


def values(args, *names):
  """Positional arguments of the mode, exactly as many as names given."""
  if len(args.values) != len(names):
    raise CliArgError(f"curvelab {args.mode} expects {len(names)} argument(s): {' '.join(names)}")
  return args.values


def main_points(args):
  values(args)
  curve = make_curve(args)
  if points.is_sampled(curve):
    warn(f"Showing a sample of the points of {curve}")
  xs = list(points.xs(curve))
  total = 1
  print(INF)
  with tqdm(xs, ncols=78, unit='x', delay=1.0, leave=False, disable=not sys.stderr.isatty()) as progress:
    for x in progress:
      for y in points.ys(x, curve):
        progress.write(f"({x}, {y})", file=sys.stdout)
        total += 1
  sys.stderr.write(f"{total} points on {curve}\n")


def main_ys(args):
  curve = make_curve(args)
  x = coordinate(values(args, "x")[0], "x coordinate", curve)
  y = points.ys(x, curve)
  if not y:
    sys.stderr.write(f"No point on {curve} has x = {x}\n")
    return
  for v in y:
    print(f"({x}, {v})")


def main_add(args):
  curve = make_curve(args)
  P, Q = (point(s, curve=curve) for s in values(args, "P", "Q"))
  check_points(curve, P, Q)
  print(f"{P} + {Q} = {curve.add(P, Q)}")


def main_mul(args):
  curve = make_curve(args)
  if len(args.values) == 1:
    k, P = integer(args.values[0], "scalar"), base_point(curve)
  else:
    ks, Ps = values(args, "k", "P")
    k, P = integer(ks, "scalar"), point(Ps, curve=curve)
    check_points(curve, P)
  print(f"{k} × {P} = {curve.mul(k, P)}")


def main_order(args):
  values(args)
  curve = make_curve(args)
  base_point(curve)
  n = ecdsa.order(curve)
  if n != curve.n:
    warn(f"The stated order n = {curve.n} is wrong for G = {curve.G}")
  print(n)


def main_sqrt(args):
  ns, ps = values(args, "n", "p")
  n, p = integer(ns, "n"), integer(ps, "modulus p")
  roots = modular.sqrt(n, p)
  if not roots:
    sys.stderr.write(f"{n} is not a square modulo {p}\n")
    return
  print(" ".join(str(r) for r in roots))
