# A plain Python engine for elliptic curves over small prime fields and the reals

# Not constant time and meant for curves small enough to list all their points.
# Signatures use a toy checksum rather than a hash, and the default random
# source may be replaced by anything with randint(). Do not protect secrets
# with this.

# Public symbols are imported here. Lower case constants are scalars or
# modules, upper case are points and curves.

from . import ecdh, ecdsa, modular, points
from .curve import BITCOIN_TOY, DEFAULT, PRESETS, REAL, TINY, Curve
from .ecdh import KeyPair
from .ecdsa import Signature, order
from .point import INF, Affine, Infinity, Point, parse_point
from .points import OperationLine
from .ring import PrimeField, RealField, Ring
