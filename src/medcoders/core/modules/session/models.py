"""Session management models."""

from typing import NewType

AuthToken = NewType("AuthToken", str)

SESSION_COOKIE_NAME = "admin_session"
