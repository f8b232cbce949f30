"""Password Hashing — PBKDF2-SHA256 with a per-password random salt.

Invariants:
    - Plaintext passwords never reach the database
    - Stored format: pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>
"""

import hashlib
import secrets

_ALGORITHM = "pbkdf2_sha256"
_ITERATIONS = 260_000


def hash_password(password: str) -> str:
    salt = secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt, _ITERATIONS,
    )
    return f"{_ALGORITHM}${_ITERATIONS}${salt.hex()}${digest.hex()}"

