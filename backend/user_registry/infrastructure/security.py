"""Password Hashing — Argon2 via pwdlib, behind the PasswordHasher protocol.

Invariants:
    - hash() output never equals its input and is salted (two calls differ)
    - Output fits the users.password_hash column (120 chars)
"""

from pwdlib import PasswordHash


class Argon2PasswordHasher:
    """PasswordHasher backed by pwdlib's recommended (Argon2id) configuration."""

    def __init__(self, password_hash: PasswordHash | None = None):
        self._password_hash = password_hash or PasswordHash.recommended()

    def hash(self, password: str) -> str:
        return self._password_hash.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        return self._password_hash.verify(password, password_hash)
