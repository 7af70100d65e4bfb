"""Signed, time-limited admin session tokens.

A token carries everything needed to verify it, nothing is stored server side:

    <base64url(subject)>.<issued_at ms>.<nonce hex>.<hmac-sha256 hex>

The subject is base64url encoded without padding, so the `.` separator never
occurs inside a field regardless of what the subject contains. The signature
covers the first three fields exactly as they appear in the token.
"""

import base64
import hashlib
import hmac
import re
import secrets
from collections.abc import Callable
from datetime import datetime, timedelta

import structlog

from medcoders.errors import ConfigurationError
from medcoders.utils import now, to_epoch_ms

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]

SESSION_MAX_AGE = timedelta(days=7)
DEVELOPMENT_SECRET = "change-this-in-production"  # noqa: S105
SEPARATOR = "."
NONCE_BYTES = 16

_ISSUED_AT_RE = re.compile(r"[0-9]{1,16}")
_NONCE_RE = re.compile(rf"[0-9a-f]{{{NONCE_BYTES * 2}}}")
_SIGNATURE_RE = re.compile(r"[0-9a-f]{64}")
_SUBJECT_RE = re.compile(r"[A-Za-z0-9_-]+")


def _encode_subject(subject: str) -> str:
    return base64.urlsafe_b64encode(subject.encode("utf-8")).rstrip(b"=").decode("ascii")


def _sign(key: bytes, payload: str) -> str:
    return hmac.new(key, payload.encode("ascii"), hashlib.sha256).hexdigest()


def _decode_subject(encoded: str) -> str:
    padding = "=" * (-len(encoded) % 4)
    return base64.urlsafe_b64decode(encoded + padding).decode("utf-8")


class SessionSigner:
    """Issues and verifies session tokens with a server-wide HMAC secret.

    Immutable after construction, one instance is shared by all requests.
    """

    def __init__(
        self,
        secret: str | None,
        *,
        production: bool,
        max_age: timedelta = SESSION_MAX_AGE,
        clock: Clock = now,
    ) -> None:
        self._production = production
        self._max_age_ms = int(max_age.total_seconds() * 1000)
        self._clock = clock
        if secret:
            self._key: bytes | None = secret.encode("utf-8")
        elif production:
            self._key = None
        else:
            logger.warning("session_secret_fallback", reason="no session secret configured, using development secret")
            self._key = DEVELOPMENT_SECRET.encode("utf-8")

    @property
    def max_age(self) -> timedelta:
        return timedelta(milliseconds=self._max_age_ms)

    def issue(self, subject: str) -> str:
        """Mint a token for an already authenticated subject.

        Raises:
            ValueError: If subject is empty
            ConfigurationError: If no secret is configured in production
        """
        if not subject:
            raise ValueError("Session subject cannot be empty")
        if self._key is None:
            raise ConfigurationError("Session secret is not configured")

        payload = SEPARATOR.join(
            [_encode_subject(subject), str(to_epoch_ms(self._clock())), secrets.token_hex(NONCE_BYTES)]
        )
        return payload + SEPARATOR + _sign(self._key, payload)

    def verify(self, token: str) -> str | None:
        """Return the token's subject, or None if the token is not acceptable.

        Malformed, forged, expired and future-dated tokens all yield None.
        """
        if self._key is None or not isinstance(token, str):
            return None

        parts = token.split(SEPARATOR)
        if len(parts) != 4:
            return None
        encoded_subject, issued_at, nonce, signature = parts
        if not (
            _SUBJECT_RE.fullmatch(encoded_subject)
            and _ISSUED_AT_RE.fullmatch(issued_at)
            and _NONCE_RE.fullmatch(nonce)
            and _SIGNATURE_RE.fullmatch(signature)
        ):
            return None

        payload = token.rsplit(SEPARATOR, 1)[0]
        expected = _sign(self._key, payload)
        if not hmac.compare_digest(signature.encode("ascii"), expected.encode("ascii")):
            return None

        age = to_epoch_ms(self._clock()) - int(issued_at)
        if age < 0 or age > self._max_age_ms:
            return None

        try:
            return _decode_subject(encoded_subject)
        except ValueError:
            return None
