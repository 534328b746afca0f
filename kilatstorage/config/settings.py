from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, ConfigDict, field_validator


# =======================
# Access Control Lists
# =======================
class ACL(str, Enum):
    """Canned ACLs accepted by S3-compatible storage.

    See https://docs.aws.amazon.com/AmazonS3/latest/dev/acl-overview.html
    """
    PRIVATE = "private"
    PUBLIC_READ = "public-read"
    PUBLIC_READ_WRITE = "public-read-write"
    AWS_EXEC_READ = "aws-exec-read"
    AUTHENTICATED_READ = "authenticated-read"
    BUCKET_OWNER_READ = "bucket-owner-read"
    BUCKET_OWNER_FULL_CONTROL = "bucket-owner-full-control"
    LOG_DELIVERY_WRITE = "log-delivery-write"


# =======================
# Storage Settings
# =======================
class Credentials(BaseModel):
    """Access key / secret key pair."""
    model_config = ConfigDict(frozen=True)

    key: str
    secret: str

    @field_validator("key", "secret", mode="after")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("credential values must not be empty")
        return v


class StorageSettings(BaseModel):
    """Kilat Storage (S3-compatible) client settings."""
    model_config = ConfigDict(frozen=True)

    version: str = "latest"
    region: str = "id-jkt-1"
    acl: ACL = ACL.PUBLIC_READ
    endpoint: str = "https://s3-id-jkt-1.kilatstorage.id/"
    credentials: Credentials

    @property
    def api_version(self) -> Optional[str]:
        """API version to pin on the SDK client, None for the SDK default."""
        if not self.version or self.version == "latest":
            return None
        return self.version


# =======================
# Logging Settings
# =======================
class LoggingSettings(BaseModel):
    """Logging configuration."""
    level: str = "INFO"


# =======================
# Main Settings
# =======================
class Settings(BaseSettings):
    """Application settings."""
    title: str = "Kilat Storage"
    version: str = "1.0.0"
    description: str = "Object storage facade for Kilat Storage (S3-compatible)"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="KILATSTORAGE_",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    storage: StorageSettings
    logging: LoggingSettings = LoggingSettings()


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment once per process."""
    return Settings()


__all__ = [
    "ACL",
    "Credentials",
    "StorageSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
