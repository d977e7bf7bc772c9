"""Plugin settings using pydantic-settings.

Settings are loaded from environment variables with defaults that match
the historical behavior of the hard-link rule engine plugin.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HardLinkSettings(BaseSettings):
    """Hard-link engine settings.

    Environment variables:
        HARD_LINKS_METADATA_ATTRIBUTE: Attribute name of the group tag (default: irods::hard_link)
        HARD_LINKS_SCOPE_BY_RESOURCE: Scope group membership per backing resource (default: false)
        HARD_LINKS_STRICT_REGISTRATION: Abort link creation when registration fails (default: false)
        HARD_LINKS_ELEVATE_PRIVILEGES: Elevate privileges for sibling updates and detaches (default: true)
    """

    model_config = SettingsConfigDict(
        env_prefix="HARD_LINKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    metadata_attribute: str = Field(
        default="irods::hard_link",
        description="Metadata attribute name carrying the group identifier",
        min_length=1,
    )
    scope_by_resource: bool = Field(
        default=False,
        description="Only treat members tagged with the same resource scope as siblings",
    )
    strict_registration: bool = Field(
        default=False,
        description="Fail link creation when registering the payload fails",
    )
    elevate_privileges: bool = Field(
        default=True,
        description="Run sibling path updates and detaches with elevated privileges",
    )

    @field_validator("metadata_attribute")
    @classmethod
    def validate_metadata_attribute(cls, value: str) -> str:
        """Reject attribute names that cannot be embedded in a catalog query."""
        if "'" in value:
            raise ValueError("metadata_attribute must not contain single quotes")
        return value.strip()


class LoggingSettings(BaseSettings):
    """Logging settings.

    Environment variables:
        HARD_LINKS_LOG_LEVEL: Minimum log level (default: INFO)
        HARD_LINKS_LOG_JSON_OUTPUT: Force JSON (true) or console (false) output (default: auto-detect)
    """

    model_config = SettingsConfigDict(
        env_prefix="HARD_LINKS_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Minimum log level")
    json_output: bool | None = Field(
        default=None,
        description="Force JSON output; auto-detected from the terminal when unset",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Normalize and validate the level name."""
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return normalized


@lru_cache
def get_settings() -> HardLinkSettings:
    """Get cached hard-link settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return HardLinkSettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()
