"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables with the
``AWS_PASS_`` prefix. Every field has a default, so a bare invocation works
against ``~/.aws-pass`` and AWS Secrets Manager in us-east-1.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from aws_pass.core.config import get_settings

    settings = get_settings()
    serial_path = settings.mfa_serial_file
    owner_filters = settings.owner_filters
"""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aws_pass.core.enums import Environment
from aws_pass.domain.value_objects import SecretFilter, SecretTag
from aws_pass.domain.value_objects.secret_filter import (
    TAG_KEY_FILTER_KEY,
    TAG_VALUE_FILTER_KEY,
)

# STS GetSessionToken bounds for IAM users (15 minutes to 36 hours)
MIN_SESSION_DURATION_SECONDS = 900
MAX_SESSION_DURATION_SECONDS = 129600


class Settings(BaseSettings):
    """
    Password store settings (flat structure).

    Configuration precedence:
        1. Keyword arguments (tests, container overrides)
        2. Environment variables (AWS_PASS_*, PASSWORD_STORE_DIR)
        3. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci)",
    )

    # Local store
    store_dir: Path = Field(
        default_factory=lambda: Path.home() / ".aws-pass",
        validation_alias=AliasChoices("AWS_PASS_STORE_DIR", "PASSWORD_STORE_DIR"),
        description="Directory holding identity credentials and the MFA serial",
    )
    credentials_file_name: str = Field(
        default=".aws-credentials",
        description="Identity credentials file name inside store_dir",
    )
    mfa_serial_file_name: str = Field(
        default=".mfa-serial",
        description="MFA device serial file name inside store_dir (first line is used)",
    )

    # AWS
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region for Secrets Manager and STS",
    )
    secrets_backend: str = Field(
        default="aws",
        description="Secret backend adapter ('aws' or 'memory')",
    )
    session_duration_seconds: int = Field(
        default=MIN_SESSION_DURATION_SECONDS,
        description="Requested lifetime of MFA session credentials",
    )
    list_page_size: int = Field(
        default=100,
        description="MaxResults per ListSecrets page",
    )
    force_delete: bool = Field(
        default=False,
        description="Delete secrets immediately instead of scheduling deletion",
    )

    # Ownership tag
    owner_tag_key: str = Field(
        default="aws-pass",
        description="Tag key stamped on every secret this tool creates",
    )
    owner_tag_value: str = Field(
        default="true",
        description="Tag value stamped on every secret this tool creates",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of console output",
    )

    model_config = SettingsConfigDict(
        env_prefix="AWS_PASS_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("store_dir")
    @classmethod
    def expand_store_dir(cls, v: Path) -> Path:
        """
        Expand a leading ~ in the store directory.

        Args:
            v: Store directory path.

        Returns:
            Path: Expanded path.
        """
        return v.expanduser()

    @field_validator("session_duration_seconds")
    @classmethod
    def validate_session_duration(cls, v: int) -> int:
        """
        Validate session duration is within STS limits.

        Raises:
            ValueError: If outside 900..129600 seconds.
        """
        if not MIN_SESSION_DURATION_SECONDS <= v <= MAX_SESSION_DURATION_SECONDS:
            raise ValueError(
                f"session_duration_seconds must be between "
                f"{MIN_SESSION_DURATION_SECONDS} and {MAX_SESSION_DURATION_SECONDS}"
            )
        return v

    @field_validator("list_page_size")
    @classmethod
    def validate_list_page_size(cls, v: int) -> int:
        """
        Validate page size against the ListSecrets MaxResults range.

        Raises:
            ValueError: If not between 1 and 100.
        """
        if not 1 <= v <= 100:
            raise ValueError("list_page_size must be between 1 and 100")
        return v

    @field_validator("secrets_backend")
    @classmethod
    def validate_secrets_backend(cls, v: str) -> str:
        """
        Normalize and validate the secret backend name.

        Raises:
            ValueError: If backend is not 'aws' or 'memory'.
        """
        backend = v.strip().lower()
        if backend not in {"aws", "memory"}:
            raise ValueError(f"Unsupported secrets_backend: {v}. Supported: 'aws', 'memory'")
        return backend

    @property
    def credentials_file(self) -> Path:
        """Path of the identity credentials file."""
        return self.store_dir / self.credentials_file_name

    @property
    def mfa_serial_file(self) -> Path:
        """Path of the MFA serial file."""
        return self.store_dir / self.mfa_serial_file_name

    @property
    def owner_tags(self) -> tuple[SecretTag, ...]:
        """Tags stamped on secrets created by this tool."""
        return (SecretTag(self.owner_tag_key, self.owner_tag_value),)

    @property
    def owner_filters(self) -> tuple[SecretFilter, ...]:
        """Listing filters scoping every lookup to owned secrets."""
        return (
            SecretFilter(TAG_KEY_FILTER_KEY, (self.owner_tag_key,)),
            SecretFilter(TAG_VALUE_FILTER_KEY, (self.owner_tag_value,)),
        )

    @property
    def is_testing(self) -> bool:
        """True when running under automated tests or CI."""
        return self.environment in {Environment.TESTING, Environment.CI}


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
