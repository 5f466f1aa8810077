import sys
from typing import NoReturn

import curvelab

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

curveflags = f"{D}[{F}-c {N}preset{D}] [{F}-a {N}A{D}] [{F}-b {N}B{D}] [{F}-p {N}P{D}] [{F}-g {N}x,y{D}] [{F}-n {N}N{D}] [{F}--real{D}]{N}"

usage = dict(
  points=f"{C}curvelab {F}points {curveflags} {D}—{N} list the points of the curve\n",
  ys=f"{C}curvelab {F}ys {N}x {D}[{N}curve{D}] —{N} y coordinates for x\n",
  add=f"{C}curvelab {F}add {N}x,y x,y {D}[{N}curve{D}] —{N} add two points\n",
  mul=f"{C}curvelab {F}mul {N}k {D}[{N}x,y{D}] [{N}curve{D}] —{N} scalar multiplication (of G by default)\n",
  order=f"{C}curvelab {F}order {D}[{N}curve{D}] —{N} order of the base point G\n",
  sqrt=f"{C}curvelab {F}sqrt {N}n p {D}—{N} square roots of n modulo the prime p\n",
  keygen=f"{C}curvelab {F}keygen {D}[{N}curve{D}] —{N} create a private key and its public point\n",
  ecdh=f"{C}curvelab {F}ecdh {D}[{F}-m {N}message{D}] [{N}curve{D}] —{N} simulate a key exchange\n",
  sign=f"{C}curvelab {F}sign -k {N}d {F}-m {N}message {D}[{N}curve{D}]{N}\n",
  verify=f"{C}curvelab {F}verify -q {N}x,y {F}-s {N}r,s {F}-m {N}message {D}[{N}curve{D}]{N}\n",
)

curvetext = f"""\
  {F}-c --curve {N}NAME   Start from a preset: default, bitcoin_toy, tiny or real
  {F}-a {N}A {F}-b {N}B           Curve coefficients of y² = x³ + ax + b
  {F}-p {N}P              Prime modulus, selects the field unless --real
  {F}-g --base {N}x,y     Base point G
  {F}-n --order {N}N      Stated order of G (recovered if it is wrong)
  {F}--real{N}            Use real numbers instead of a prime field
"""

usagetext = dict(
  points=f"""\
Prints every point of the curve, starting with the point at infinity O. Fields
larger than 1000 elements and curves over the reals are sampled instead.

{curvetext}""",
  mul=f"""\
Double-and-add scalar multiplication. The scalar is used as given, it is not
reduced modulo the group order.

{curvetext}""",
  order=f"""\
Checks that the stated order n annihilates G, and otherwise finds the real
order of G by repeated addition.

{curvetext}""",
  ecdh=f"""\
Alice and Bob each create a key pair and derive the shared point. With {F}-m{N}
Alice encrypts the message with AES-GCM keyed by the shared point and Bob
decrypts it.

{curvetext}""",
  sign=f"""\
Signs the message with private key d using ECDSA with a toy checksum. The
signature is printed as r,s.

{curvetext}""",
  verify=f"""\
Verifies the signature r,s of the message against the public point x,y.
Exits with an error if the signature is not valid.

{curvetext}""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"Curvelab {curvelab.__version__} - Elliptic curves over small fields"

introduction = f"""\
{T}{introduction:78}{N}
 🧮  Toy parameters and a toy hash: nothing here is secure
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
All commands accept the curve options, by default the curve is
y² = x³ - 7x + 10 (mod 223) with G = (47, 71):

{curvetext}
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

exampleshelp = f"""\
{H}Examples:{N}

  - {C}curvelab {F}add {N}192,105 17,56 {F}-c {N}bitcoin_toy
  - {C}curvelab {F}mul {N}20 {F}-c {N}tiny
  - {C}curvelab {F}points -a {N}2 {F}-b {N}3 {F}-p {N}97
  - {C}curvelab {F}sign -k {N}7 {F}-m {N}"hello" {F}-c {N}tiny
"""

allcommands = '\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}
{exampleshelp}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"Curvelab {curvelab.__version__}")
  sys.exit(0)
