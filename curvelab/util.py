from secrets import SystemRandom
from typing import Callable, Optional, Protocol


class RandomSource(Protocol):
  """Anything with the randint() of the random module, inclusive of both ends."""

  def randint(self, a: int, b: int) -> int:
    ...


# Message hash reduced by the caller modulo the group order
Hasher = Callable[[str], int]

default_rng: RandomSource = SystemRandom()


def rng_or_default(rng: Optional[RandomSource]) -> RandomSource:
  return default_rng if rng is None else rng


def checksum(message: str) -> int:
  """
  Toy rolling hash h = 31 h + c over UTF-16 code units, as a signed 32-bit
  value made non-negative. NOT a cryptographic hash: collisions are trivial.

  Lone surrogates (undecodable bytes in sys.argv) hash as their code units.
  """
  units = message.encode("utf-16-le", errors="surrogatepass")
  h = 0
  for i in range(0, len(units), 2):
    h = (h * 31 + int.from_bytes(units[i:i + 2], "little")) & 0xFFFFFFFF
  # Reinterpret as signed, then drop the sign
  if h & 0x80000000:
    h -= 1 << 32
  return abs(h)
