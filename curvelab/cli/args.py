import sys

from curvelab.cli.help import print_help, print_version
from curvelab.elliptic import PRESETS, Curve, parse_point
from curvelab.elliptic.point import parse_number
from curvelab.exceptions import CliArgError


class Args:

  def __init__(self):
    self.mode = None
    self.values = []
    self.preset = ""
    self.a = ""
    self.b = ""
    self.p = ""
    self.g = ""
    self.n = ""
    self.real = None
    self.key = ""
    self.public = ""
    self.signature = ""
    self.message = None
    self.debug = None


curveargs = dict(
  preset='-c --curve'.split(),
  a='-a'.split(),
  b='-b'.split(),
  p='-p'.split(),
  g='-g --base'.split(),
  n='-n --order'.split(),
  real='--real'.split(),
  debug='--debug'.split(),
)

ecdhargs = dict(curveargs, message='-m --message'.split())
signargs = dict(curveargs, key='-k --key'.split(), message='-m --message'.split())
verifyargs = dict(curveargs, public='-q --public'.split(), signature='-s --signature'.split(), message='-m --message'.split())
sqrtargs = dict(debug='--debug'.split())

modes = {
  'points': curveargs,
  'ys': curveargs,
  'add': curveargs,
  'mul': curveargs,
  'order': curveargs,
  'sqrt': sqrtargs,
  'keygen': curveargs,
  'ecdh': ecdhargs,
  'sign': signargs,
  'verify': verifyargs,
}

aliases = {'list': 'points', 'multiply': 'mul', 'dh': 'ecdh', 'genkey': 'keygen'}

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  arg = aliases.get(arg, arg)
  if arg in modes: return arg, modes[arg]
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing so that negative numbers can be given as flag parameters
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(f' 💣  Invalid or missing command ({"/".join(modes)}/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  for a in aiter:
    if a == '--':
      args.values += aiter
      break
    if not a.startswith('-') or a[1:2].isdigit():
      args.values.append(a)
      continue
    if a.startswith('--'):
      a = a.lower()
    argvar = next((k for k, v in ad.items() if a in v), None)
    if argvar is None:
      print_help(args.mode, f' 💣  Unknown argument: curvelab {args.mode} {a}')
    try:
      var = getattr(args, argvar)
      if isinstance(var, str) or argvar == 'message':
        setattr(args, argvar, next(aiter))
      else:
        setattr(args, argvar, True)
    except StopIteration:
      print_help(args.mode, f' 💣  Argument parameter missing: curvelab {args.mode} {a} …')

  return args


def number(s: str, what: str):
  try:
    return parse_number(s)
  except ValueError:
    raise CliArgError(f"Invalid {what}: {s!r}") from None

def integer(s: str, what: str) -> int:
  v = number(s, what)
  if not isinstance(v, int):
    raise CliArgError(f"Invalid {what}: {s!r} is not an integer")
  return v

def point(s: str, what: str = "point", curve: Curve = None):
  """Parse x,y; coordinates must be integers unless the curve is over the reals."""
  try:
    P = parse_point(s)
  except ValueError as e:
    raise CliArgError(f"Invalid {what}: {e}") from None
  if curve is not None and not curve.is_real and not P.is_infinity and not all(isinstance(v, int) for v in P):
    raise CliArgError(f"Invalid {what}: {s!r}, coordinates modulo {curve.p} are integers")
  return P

def coordinate(s: str, what: str, curve: Curve):
  return number(s, what) if curve.is_real else integer(s, what)

def make_curve(args) -> Curve:
  """The preset curve (DEFAULT if none) with any parameters given on command line."""
  name = args.preset.lower() or "default"
  if name not in PRESETS:
    raise CliArgError(f"Unknown curve {args.preset!r}, the presets are {', '.join(PRESETS)}")
  curve = PRESETS[name]
  changes = {}
  if args.a: changes['a'] = number(args.a, "coefficient a")
  if args.b: changes['b'] = number(args.b, "coefficient b")
  if args.p: changes['p'] = integer(args.p, "modulus p")
  if args.n: changes['n'] = integer(args.n, "order n")
  if args.real: changes['real'] = True
  elif args.p: changes['real'] = False  # a modulus selects the prime field
  if args.g:
    G = point(args.g, "base point")
    if G.is_infinity: raise CliArgError("The base point cannot be the point at infinity")
    changes['G'] = G
  if not changes:
    return curve
  if not curve.is_real and changes.get('real') and 'n' not in changes:
    changes['n'] = None
  curve = curve.replace(**changes)
  if not curve.is_real and not all(isinstance(v, int) for v in (curve.a, curve.b, *(curve.G or ()))):
    raise CliArgError(f"Coefficients and the base point must be integers modulo {curve.p}")
  return curve
