from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Resolved against the working directory of the host process.
ENV_FILE = ".env"


class Settings(BaseSettings):
    """Library configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    SMS_HTTP_TIMEOUT: float = Field(default=10.0, gt=0)

    SEMAPHORE_API_BASE: str = Field(default="http://beta.semaphore.co/api/v4/")
    SEMAPHORE_DEFAULT_SENDER_NAME: str = Field(default="SEMAPHORE")

    MYBUSYBEE_API_BASE: str = Field(default="http://cloud.mybusybee.net/app/smsapi/")

    SMS_SUPPLIER: Optional[str] = Field(default=None)
    SMS_API_KEY: Optional[str] = Field(default=None)

    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE_PATH: Optional[str] = Field(default=None)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("SEMAPHORE_API_BASE", "MYBUSYBEE_API_BASE")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        # Relative request paths are joined onto the base URL.
        return v if v.endswith("/") else f"{v}/"


@lru_cache
def get_settings() -> Settings:
    """Return cached library settings instance."""

    return Settings()
