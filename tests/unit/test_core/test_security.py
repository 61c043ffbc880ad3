"""Unit tests for password hashing."""
import pytest

from app.core.security import get_password_hash, verify_password


@pytest.mark.unit
class TestPasswordHashing:
    """Test Argon2 password hashing."""

    def test_hash_and_verify(self):
        password_hash = get_password_hash("correct horse")

        assert password_hash != "correct horse"
        assert verify_password("correct horse", password_hash)

    def test_wrong_password(self):
        assert not verify_password("wrong", get_password_hash("correct horse"))

    def test_hashes_are_salted(self):
        assert get_password_hash("same") != get_password_hash("same")

    def test_malformed_hash_is_a_mismatch(self):
        """A stored value that is not an Argon2 hash never verifies."""
        assert not verify_password("anything", "plaintext-password")
