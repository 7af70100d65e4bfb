"""Tests for password hashing and validation."""

import pytest

from medcoders.core.modules.user.service import check_password, hash_password
from medcoders.core.modules.user.validators import normalize_email, validate_password
from medcoders.errors import ValidationError


class TestPasswordHashing:
    """Tests for hash_password and check_password."""

    def test_roundtrip(self):
        password_hash = hash_password("correct horse")
        assert password_hash.startswith("$2b$")
        assert check_password("correct horse", password_hash)
        assert not check_password("wrong horse", password_hash)

    def test_non_bcrypt_hash(self):
        """Test that a corrupt stored hash fails closed instead of raising."""
        assert check_password("anything", "not-a-bcrypt-hash") is False


class TestValidatePassword:
    """Tests for validate_password function."""

    def test_valid(self):
        validate_password("long enough")

    def test_too_short(self):
        with pytest.raises(ValidationError, match="at least 8 characters"):
            validate_password("short")

    def test_blank(self):
        with pytest.raises(ValidationError, match="cannot be blank"):
            validate_password("          ")


def test_normalize_email():
    assert normalize_email("  Admin@Example.COM ") == "admin@example.com"
