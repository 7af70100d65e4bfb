"""Tests for signed session tokens."""

import hmac
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from medcoders.core.modules.session import tokens
from medcoders.core.modules.session.tokens import DEVELOPMENT_SECRET, SESSION_MAX_AGE, SessionSigner
from medcoders.errors import ConfigurationError


@pytest.fixture
def signer(clock):
    return SessionSigner("test-secret", production=True, clock=clock)


SIGNATURE_LENGTH = 64


def _flip_signature_char(token: str, position: int) -> str:
    index = len(token) - SIGNATURE_LENGTH + position
    replacement = "1" if token[index] == "0" else "0"
    return token[:index] + replacement + token[index + 1 :]


class TestIssue:
    """Tests for SessionSigner.issue."""

    def test_token_has_four_fields(self, signer):
        """Test that a token is subject, timestamp, nonce and signature."""
        token = signer.issue("user-1")
        subject, issued_at, nonce, signature = token.split(".")
        assert subject
        assert issued_at.isdigit()
        assert len(nonce) == 32
        assert len(signature) == 64

    def test_nonce_differs_between_tokens(self, signer):
        """Test that two tokens for the same subject and time are distinct."""
        assert signer.issue("user-1") != signer.issue("user-1")

    def test_empty_subject_rejected(self, signer):
        """Test that an empty subject cannot be signed."""
        with pytest.raises(ValueError):
            signer.issue("")

    def test_production_without_secret_raises(self, clock):
        """Test that production refuses to sign without a configured secret."""
        signer = SessionSigner(None, production=True, clock=clock)
        with pytest.raises(ConfigurationError):
            signer.issue("user-1")

    def test_development_uses_fallback_secret(self, clock):
        """Test that development signs with the fixed fallback secret."""
        token = SessionSigner("", production=False, clock=clock).issue("user-1")
        fallback = SessionSigner(DEVELOPMENT_SECRET, production=True, clock=clock)
        assert fallback.verify(token) == "user-1"


class TestVerify:
    """Tests for SessionSigner.verify."""

    def test_roundtrip(self, signer):
        """Test that a freshly issued token verifies to its subject."""
        assert signer.verify(signer.issue("9b2e0c7e-4d6a-4f39-9a55-0f1e3c2d1b00")) == "9b2e0c7e-4d6a-4f39-9a55-0f1e3c2d1b00"

    def test_subject_containing_separator(self, signer):
        """Test that subjects with dots and dashes survive encoding."""
        for subject in ("a.b.c", "user-with-dashes", "..", "ünïcode"):
            assert signer.verify(signer.issue(subject)) == subject

    @pytest.mark.parametrize("position", range(SIGNATURE_LENGTH))
    def test_tampered_signature(self, signer, position):
        """Test that changing any single signature character invalidates the token."""
        token = signer.issue("user-1")
        assert signer.verify(_flip_signature_char(token, position)) is None

    def test_signature_compared_in_constant_time(self, signer, monkeypatch):
        """Test that signatures are compared with hmac.compare_digest on bytes."""
        compare = MagicMock(wraps=hmac.compare_digest)
        monkeypatch.setattr(tokens.hmac, "compare_digest", compare)

        token = signer.issue("user-1")
        assert signer.verify(token) == "user-1"
        assert signer.verify(_flip_signature_char(token, 0)) is None

        assert compare.call_count == 2
        for call in compare.call_args_list:
            assert all(isinstance(arg, bytes) for arg in call.args)

    def test_tampered_subject(self, signer):
        """Test that swapping in another subject invalidates the token."""
        token = signer.issue("user-1")
        other_subject = signer.issue("user-2").split(".")[0]
        forged = ".".join([other_subject, *token.split(".")[1:]])
        assert signer.verify(forged) is None

    def test_other_secret_rejected(self, signer, clock):
        """Test that a token signed with a different secret is invalid."""
        other = SessionSigner("other-secret", production=True, clock=clock)
        assert signer.verify(other.issue("user-1")) is None

    def test_valid_until_max_age(self, signer, clock):
        """Test that a token is accepted right up to its maximum age."""
        token = signer.issue("user-1")
        clock.advance(SESSION_MAX_AGE)
        assert signer.verify(token) == "user-1"

    def test_expired(self, signer, clock):
        """Test that a token older than seven days is rejected."""
        token = signer.issue("user-1")
        clock.advance(SESSION_MAX_AGE + timedelta(milliseconds=1))
        assert signer.verify(token) is None

    def test_future_dated(self, signer, clock):
        """Test that a token issued in the future (negative age) is rejected."""
        clock.advance(timedelta(hours=1))
        token = signer.issue("user-1")
        clock.advance(timedelta(hours=-1))
        assert signer.verify(token) is None

    def test_custom_max_age(self, clock):
        """Test that max_age is configurable."""
        signer = SessionSigner("test-secret", production=True, max_age=timedelta(minutes=5), clock=clock)
        token = signer.issue("user-1")
        clock.advance(timedelta(minutes=6))
        assert signer.verify(token) is None
        assert signer.max_age == timedelta(minutes=5)

    @pytest.mark.parametrize(
        "token",
        [
            "",
            "garbage",
            "a.b.c",
            "a.b.c.d.e",
            "dXNlcg.notanumber.00000000000000000000000000000000." + "0" * 64,
            "dXNlcg.1714564800000.short." + "0" * 64,
            "dXNlcg.1714564800000.00000000000000000000000000000000.short",
            "dXN=cg.1714564800000.00000000000000000000000000000000." + "0" * 64,
            "тест.1714564800000.00000000000000000000000000000000." + "0" * 64,
            "\x00\x00\x00",
        ],
    )
    def test_malformed_input_returns_none(self, signer, token):
        """Test that malformed tokens never raise."""
        assert signer.verify(token) is None

    def test_non_string_input(self, signer):
        """Test that non-string values are rejected without raising."""
        assert signer.verify(None) is None  # type: ignore[arg-type]
        assert signer.verify(b"bytes") is None  # type: ignore[arg-type]

    def test_production_without_secret_rejects_everything(self, clock):
        """Test that a signer with no secret accepts no token."""
        token = SessionSigner(DEVELOPMENT_SECRET, production=False, clock=clock).issue("user-1")
        assert SessionSigner(None, production=True, clock=clock).verify(token) is None
