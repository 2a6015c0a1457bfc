"""Unit tests for bcrypt password hashing."""

import pytest

from infrastructure.auth.password import (
    BcryptPasswordHasher,
    hash_password,
    verify_password,
)


class TestHashPassword:
    def test_same_password_gets_different_hashes(self):
        first = hash_password("secret1", rounds=4)
        second = hash_password("secret1", rounds=4)

        assert first != second
        assert first.startswith("$2")

    def test_empty_password_rejected(self):
        with pytest.raises(ValueError):
            hash_password("", rounds=4)

    def test_rejects_more_than_72_bytes(self):
        # 40 characters, 80 bytes in UTF-8
        with pytest.raises(ValueError, match="72 bytes"):
            hash_password("\u00e9" * 40, rounds=4)

    def test_accepts_exactly_72_bytes(self):
        hashed = hash_password("\u00e9" * 36, rounds=4)

        assert verify_password("\u00e9" * 36, hashed) is True


class TestVerifyPassword:
    def test_matches_hashed_password(self):
        hashed = hash_password("secret1", rounds=4)

        assert verify_password("secret1", hashed) is True
        assert verify_password("secret2", hashed) is False

    def test_invalid_hash_returns_false(self):
        assert verify_password("secret1", "not-a-bcrypt-hash") is False

    def test_empty_inputs_return_false(self):
        assert verify_password("", "whatever") is False
        assert verify_password("secret1", "") is False


class TestBcryptPasswordHasher:
    async def test_hash_then_verify(self):
        hasher = BcryptPasswordHasher(rounds=4)

        hashed = await hasher.hash("secret1")

        assert hashed != "secret1"
        assert await hasher.verify("secret1", hashed) is True
        assert await hasher.verify("wrong", hashed) is False
