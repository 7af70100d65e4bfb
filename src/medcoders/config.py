from typing import Literal

from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8000
    debug: bool = False
    environment: Literal["development", "production"] = "development"
    session_secret_key: str | None = None  # Required in production, a fixed fallback is used in development
    cors_origins: list[str] = []
    site_url: str = "http://localhost:3000"  # Public URL of the website, used in email links
    # Initial admin account, created on startup when no user with admin_email exists
    admin_email: str = "admin@surgicalcoders.com"
    admin_name: str = "Admin User"
    admin_password: str | None = None
    # Outgoing mail (SMTP)
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_password: str | None = None
    smtp_from: str | None = None  # Defaults to smtp_user, then noreply@elitesurgicalcoders.com
    internal_notification_email: str = "notifications@elitesurgicalcoders.com"
    uploads_path: str = "data/uploads"  # Directory for uploaded images and resumes
    blog_content_path: str | None = None  # Optional directory of frontmatter posts imported on startup

    model_config = {
        "env_file": [".env"],
        "env_prefix": "MEDCODERS_",
        "extra": "ignore",
    }

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def mail_sender(self) -> str:
        return self.smtp_from or self.smtp_user or "noreply@elitesurgicalcoders.com"
