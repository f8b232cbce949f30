"""Password Hashing — tests for the stored hash format."""

from taskforge.core.passwords import hash_password


def test_hash_is_not_plaintext():
    assert "s3cret-pass" not in hash_password("s3cret-pass")


def test_same_password_hashes_differently():
    assert hash_password("s3cret-pass") != hash_password("s3cret-pass")


def test_hash_format_has_four_parts():
    algorithm, iterations, salt, digest = hash_password("s3cret-pass").split("$")
    assert algorithm == "pbkdf2_sha256"
    assert int(iterations) > 0
    assert len(bytes.fromhex(salt)) == 16
    assert len(bytes.fromhex(digest)) == 32
