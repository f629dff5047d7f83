"""Password hashing with bcrypt."""

import bcrypt

BCRYPT_ROUNDS = 12
# bcrypt only reads the first 72 bytes; bcrypt>=5 rejects longer input outright
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash. Two calls with the same input never match.

    Input past 72 UTF-8 bytes is truncated, the same way for hashing and
    verification, so long passwords register and log in normally.
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(plain: str, hashed: str | None) -> bool:
    """Check a plaintext password against a stored hash.

    A missing or malformed hash counts as a mismatch.
    """
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        return False
