"""Password hashing and verification.

Stored format: ``pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>``.
The iteration count travels with the hash, so raising the configured
count never invalidates existing credentials.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 260_000
SALT_BYTES = 16


def hash_password(password: str, *, iterations: int = DEFAULT_ITERATIONS) -> str:
    """Derive a salted PBKDF2-SHA256 hash for *password*."""
    if iterations < 1:
        msg = f"iterations must be positive, got {iterations}"
        raise ValueError(msg)
    salt = secrets.token_bytes(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    """Check *password* against a hash produced by :func:`hash_password`.

    Malformed stored values never verify.
    """
    try:
        algorithm, raw_iterations, salt_hex, digest_hex = stored.split("$")
        iterations = int(raw_iterations)
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
    except ValueError:
        return False
    if algorithm != ALGORITHM or iterations < 1:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return hmac.compare_digest(digest, expected)
