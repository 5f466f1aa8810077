import sys
from typing import NoReturn

import colorama

from curvelab.cli.args import argparse
from curvelab.cli.curve import main_add, main_mul, main_order, main_points, main_sqrt, main_ys
from curvelab.cli.ecdh import main_ecdh
from curvelab.cli.ecdsa import main_keygen, main_sign, main_verify
from curvelab.exceptions import CliArgError

modes = {
  "points": main_points,
  "ys": main_ys,
  "add": main_add,
  "mul": main_mul,
  "order": main_order,
  "sqrt": main_sqrt,
  "keygen": main_keygen,
  "ecdh": main_ecdh,
  "sign": main_sign,
  "verify": main_verify,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling curvelab.elliptic directly if you use it from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Algebra errors, failed signature verification, decryption failures

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()

  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)
  except CliArgError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(1)
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
