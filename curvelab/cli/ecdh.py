import sys

from curvelab import cipher
from curvelab.cli.args import make_curve
from curvelab.cli.curve import base_point, values
from curvelab.elliptic import ecdh


def main_ecdh(args):
  values(args)
  curve = make_curve(args)
  base_point(curve)
  alice, bob = ecdh.keypair(curve), ecdh.keypair(curve)
  print(f"Alice  dA = {alice.d:<6}  QA = {alice.Q}")
  print(f"Bob    dB = {bob.d:<6}  QB = {bob.Q}")
  S1 = ecdh.shared_secret(alice.d, bob.Q, curve)
  S2 = ecdh.shared_secret(bob.d, alice.Q, curve)
  if S1 != S2:
    raise ValueError(f"Shared secrets do not match: {S1} != {S2}")
  print(f"Shared       S = {S1}")
  if args.message is None:
    return
  akey = cipher.derive_key(*ecdh.key_material(S1))
  bkey = cipher.derive_key(*ecdh.key_material(S2))
  ciphertext, nonce = cipher.encrypt(args.message, akey)
  print(f"Ciphertext     {ciphertext.hex()}")
  print(f"Nonce          {nonce.hex()}")
  plaintext = cipher.decrypt(ciphertext, nonce, bkey)
  print(f"Bob decrypted  {plaintext}")
  if sys.stderr.isatty():
    sys.stderr.write("\n\x1B[1m 🔒 Message exchanged with a key agreed over the curve\x1B[0m\n")
