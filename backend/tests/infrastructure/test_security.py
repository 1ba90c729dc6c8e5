"""Argon2 password hasher — one-way, salted, fits the column."""

from user_registry.infrastructure.security import Argon2PasswordHasher
from user_registry.models.user import PASSWORD_HASH_MAX_LENGTH


def test_hash_differs_from_plaintext_and_verifies():
    hasher = Argon2PasswordHasher()
    hashed = hasher.hash("secret")
    assert hashed != "secret"
    assert hashed.startswith("$argon2")
    assert hasher.verify("secret", hashed)
    assert not hasher.verify("wrong", hashed)


def test_hash_is_salted():
    hasher = Argon2PasswordHasher()
    assert hasher.hash("secret") != hasher.hash("secret")


def test_hash_fits_column():
    assert len(Argon2PasswordHasher().hash("p" * 120)) <= PASSWORD_HASH_MAX_LENGTH
