"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# Settings that must be present before the app can serve requests.
REQUIRED_SETTINGS = ("buns_table_name", "devil_bot_test_channel_url")


class MissingConfigurationError(RuntimeError):
    """Raised when a required configuration value is absent."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Required the {name.upper()} environment variable")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_bot_token: str = ""
    slack_signing_secret: str = ""
    allowed_channel_id: str = "C0351GJ62Q0"
    devil_bot_test_channel_url: str = ""

    # DynamoDB
    buns_table_name: str = ""
    aws_region: str = ""

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()


def require_setting(name: str) -> str:
    """Return a required setting by field name.

    Raises MissingConfigurationError if the value is empty.
    """
    value = getattr(get_settings(), name)
    if not value:
        raise MissingConfigurationError(name)
    return value


def validate_settings(settings: Settings) -> None:
    """Check every required setting, raising on the first missing one.

    Called from the application lifespan so a misconfigured deployment
    fails at startup instead of mid-request.
    """
    for name in REQUIRED_SETTINGS:
        if not getattr(settings, name):
            raise MissingConfigurationError(name)
