"""Configuration data models."""

from dataclasses import dataclass

DEFAULT_API_BASE_URL = "https://www.cheatslips.com/api/v1"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration settings."""
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = 30.0
    verify_ssl: bool = True
    notification_timeout: float = 5.0  # Seconds before a channel message auto-clears
    copy_feedback_delay: float = 2.0  # Seconds a cheat stays in the "copied" state
    log_level: str = "INFO"
