from curvelab.cli.args import integer, make_curve, point
from curvelab.cli.curve import base_point, values, warn
from curvelab.elliptic import ecdsa
from curvelab.exceptions import CliArgError


def group_order(curve) -> int:
  base_point(curve)
  n = ecdsa.order(curve)
  if n != curve.n:
    warn(f"Using the recovered order {n} of G instead of n = {curve.n}")
  return n


def main_keygen(args):
  values(args)
  curve = make_curve(args)
  group_order(curve)
  d, Q = ecdsa.keypair(curve)
  print(f"Private key  {d}")
  print(f"Public key   {Q}")


def main_sign(args):
  values(args)
  if not args.key: raise CliArgError("A private key is required: -k d")
  if args.message is None: raise CliArgError("A message is required: -m message")
  curve = make_curve(args)
  d = integer(args.key, "private key")
  group_order(curve)
  print(ecdsa.sign(args.message, d, curve))


def main_verify(args):
  values(args)
  if not args.public: raise CliArgError("The public key is required: -q x,y")
  if not args.signature: raise CliArgError("The signature is required: -s r,s")
  if args.message is None: raise CliArgError("A message is required: -m message")
  curve = make_curve(args)
  Q = point(args.public, "public key", curve)
  parts = args.signature.split(",")
  if len(parts) != 2:
    raise CliArgError(f"Invalid signature {args.signature!r}, expected r,s")
  sig = ecdsa.Signature(*(integer(v, "signature") for v in parts))
  group_order(curve)
  if not ecdsa.verify(args.message, sig, Q, curve):
    raise ValueError("Signature mismatch")
  print("Signature valid")
