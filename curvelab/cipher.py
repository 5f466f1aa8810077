from secrets import token_bytes
from typing import Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from curvelab.exceptions import DecryptError

# Symmetric encryption keyed by an ECDH shared point. The coordinates are only
# key material: a fixed-salt PBKDF2 stretches them into an AES-256-GCM key.

SALT = b"elliptic-curve-crypto"
ITERATIONS = 100_000
NONCE_SIZE = 12


def derive_key(x: int, y: int) -> bytes:
  """32-byte key from the coordinates of the shared point"""
  kdf = PBKDF2HMAC(algorithm=hashes.SHA256(), length=32, salt=SALT, iterations=ITERATIONS)
  return kdf.derive(f"{x}-{y}".encode())


def encrypt(message: str, key: bytes) -> Tuple[bytes, bytes]:
  """:returns: (ciphertext, nonce)"""
  nonce = token_bytes(NONCE_SIZE)
  return AESGCM(key).encrypt(nonce, message.encode(), None), nonce


def decrypt(ciphertext: bytes, nonce: bytes, key: bytes) -> str:
  try:
    data = AESGCM(key).decrypt(nonce, ciphertext, None)
  except InvalidTag:
    raise DecryptError("Decryption failed: wrong key or corrupted message") from None
  try:
    return data.decode()
  except UnicodeDecodeError:
    raise DecryptError("Decrypted data is not UTF-8 text") from None
