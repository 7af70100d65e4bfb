import re
import secrets
import time
from datetime import UTC, datetime

SLUG_RE = re.compile(r"^[a-z0-9-]+$")


def is_slug(value: str) -> bool:
    return bool(SLUG_RE.fullmatch(value))


def now() -> datetime:
    return datetime.now(UTC)


def to_epoch_ms(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def unique_file_stem() -> str:
    """Millisecond timestamp plus a random suffix, e.g. `1718000000000-k3j9x0a1b2c4`."""
    return f"{time.time_ns() // 1_000_000}-{secrets.token_hex(6)}"


SLUG_MESSAGE = "Slug must contain only lowercase letters, numbers, and hyphens"


def check_slug(value: str | None) -> str | None:
    """Pydantic validator body for optional slug fields."""
    if value is not None and not is_slug(value):
        raise ValueError(SLUG_MESSAGE)
    return value
