"""Client configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "jira-cloud-python/0.1"


class Settings(BaseSettings):
    """Validated client settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Jira Cloud site, e.g. https://your-domain.atlassian.net
    JIRA_SITE: str | None = None
    JIRA_EMAIL: str | None = None
    JIRA_API_TOKEN: SecretStr | None = None
    JIRA_API_VERSION: Literal["2", "3"] = "3"
    JIRA_REQUEST_TIMEOUT_SEC: float = 30.0
    JIRA_USER_AGENT: str = DEFAULT_USER_AGENT

    @field_validator("JIRA_SITE")
    @classmethod
    def validate_jira_site(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        s = v.strip().rstrip("/").lower()
        if not (s.startswith("http://") or s.startswith("https://")):
            raise ValueError(
                "JIRA_SITE must use http or https (e.g. https://your-domain.atlassian.net)"
            )
        return v.strip().rstrip("/")

    @field_validator("JIRA_EMAIL")
    @classmethod
    def validate_jira_email(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("JIRA_REQUEST_TIMEOUT_SEC")
    @classmethod
    def validate_jira_timeout(cls, v: float) -> float:
        if v <= 0 or v > 120:
            raise ValueError(
                "JIRA_REQUEST_TIMEOUT_SEC must be greater than 0 and at most 120"
            )
        return v

    @field_validator("JIRA_USER_AGENT")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        if not v or not v.strip():
            return DEFAULT_USER_AGENT
        return v.strip()

    def is_configured(self) -> bool:
        """True when site, email and a non-empty API token are all set."""
        if not self.JIRA_SITE or not self.JIRA_EMAIL:
            return False
        if self.JIRA_API_TOKEN is None:
            return False
        return bool(self.JIRA_API_TOKEN.get_secret_value().strip())


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
