class DomainError(ValueError):
  """Point or curve parameters outside the domain of the curve"""

class NoInverseError(ValueError):
  """The value shares a factor with the modulus and cannot be inverted"""

class SignatureError(ValueError):
  """No usable signature could be produced"""

class DecryptError(ValueError):
  """Decryption failed"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
