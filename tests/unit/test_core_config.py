"""Unit tests for Settings.

Tests cover:
- Defaults (store dir, region, backend, session duration, ownership tag)
- Environment variable loading (AWS_PASS_ prefix, PASSWORD_STORE_DIR alias)
- Validators (session duration bounds, page size, backend name)
- Derived properties (file paths, owner tags and filters)
- get_settings() caching
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from aws_pass.core.config import Settings, get_settings
from aws_pass.core.enums import Environment
from aws_pass.domain.value_objects import SecretFilter, SecretTag


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        """Test a bare Settings uses documented defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.aws_region == "us-east-1"
        assert settings.secrets_backend == "aws"
        assert settings.session_duration_seconds == 900
        assert settings.list_page_size == 100
        assert settings.force_delete is False
        assert settings.log_level == "WARNING"

    def test_default_store_dir_in_home(self):
        """Test store_dir defaults to ~/.aws-pass."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
            assert settings.store_dir == Path.home() / ".aws-pass"


@pytest.mark.unit
class TestSettingsEnvironment:
    """Test loading from environment variables."""

    def test_prefixed_variables(self):
        """Test AWS_PASS_ variables are read."""
        env = {
            "AWS_PASS_AWS_REGION": "eu-west-1",
            "AWS_PASS_SECRETS_BACKEND": "memory",
            "AWS_PASS_FORCE_DELETE": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.aws_region == "eu-west-1"
        assert settings.secrets_backend == "memory"
        assert settings.force_delete is True

    def test_password_store_dir_alias(self, tmp_path):
        """Test PASSWORD_STORE_DIR overrides the store directory."""
        with patch.dict(os.environ, {"PASSWORD_STORE_DIR": str(tmp_path)}, clear=True):
            settings = Settings()

        assert settings.store_dir == tmp_path

    def test_prefixed_store_dir(self, tmp_path):
        """Test AWS_PASS_STORE_DIR overrides the store directory."""
        with patch.dict(os.environ, {"AWS_PASS_STORE_DIR": str(tmp_path)}, clear=True):
            settings = Settings()

        assert settings.store_dir == tmp_path

    def test_unprefixed_store_dir_ignored(self, tmp_path):
        """Test a bare STORE_DIR variable does not move the store."""
        with patch.dict(os.environ, {"STORE_DIR": str(tmp_path)}, clear=True):
            settings = Settings()
            assert settings.store_dir == Path.home() / ".aws-pass"

    def test_store_dir_expands_user(self):
        """Test ~ in store_dir is expanded."""
        settings = Settings(store_dir="~/custom-store")

        assert settings.store_dir == Path.home() / "custom-store"


@pytest.mark.unit
class TestSettingsValidation:
    """Test field validators."""

    @pytest.mark.parametrize("duration", [899, 129601])
    def test_session_duration_out_of_range(self, duration):
        """Test durations outside STS limits are rejected."""
        with pytest.raises(ValidationError):
            Settings(session_duration_seconds=duration)

    @pytest.mark.parametrize("duration", [900, 3600, 129600])
    def test_session_duration_in_range(self, duration):
        """Test durations within STS limits are accepted."""
        assert Settings(session_duration_seconds=duration).session_duration_seconds == duration

    @pytest.mark.parametrize("page_size", [0, 101])
    def test_page_size_out_of_range(self, page_size):
        """Test page sizes outside ListSecrets limits are rejected."""
        with pytest.raises(ValidationError):
            Settings(list_page_size=page_size)

    def test_unknown_backend_rejected(self):
        """Test unsupported backend names are rejected."""
        with pytest.raises(ValidationError):
            Settings(secrets_backend="vault")

    def test_backend_name_normalized(self):
        """Test backend name is case-insensitive."""
        assert Settings(secrets_backend="MEMORY").secrets_backend == "memory"


@pytest.mark.unit
class TestSettingsDerived:
    """Test derived properties."""

    def test_file_paths(self, tmp_path):
        """Test store file paths live inside store_dir."""
        settings = Settings(store_dir=tmp_path)

        assert settings.credentials_file == tmp_path / ".aws-credentials"
        assert settings.mfa_serial_file == tmp_path / ".mfa-serial"

    def test_owner_tags_and_filters(self):
        """Test ownership tag and matching listing filters."""
        settings = Settings(owner_tag_key="team-pass", owner_tag_value="yes")

        assert settings.owner_tags == (SecretTag("team-pass", "yes"),)
        assert settings.owner_filters == (
            SecretFilter("tag-key", ("team-pass",)),
            SecretFilter("tag-value", ("yes",)),
        )

    def test_is_testing(self):
        """Test is_testing for testing and ci environments."""
        assert Settings(environment="testing").is_testing is True
        assert Settings(environment="ci").is_testing is True
        assert Settings(environment="development").is_testing is False


@pytest.mark.unit
class TestGetSettings:
    """Test get_settings() caching."""

    def test_returns_cached_instance(self):
        """Test get_settings returns the same object on repeated calls."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
