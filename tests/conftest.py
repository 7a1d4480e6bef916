"""Pytest configuration and shared fixtures.

This configuration provides:
1. Marker registration and automatic asyncio marking of async tests
2. A recording logger double (LoggerProtocol)
3. A scripted operator prompt (OperatorPromptProtocol)
4. In-memory backend and password store wiring for application tests
"""

import inspect
from datetime import UTC, datetime
from unittest.mock import Mock

import pytest

from aws_pass.application.services import PasswordStore, SecretResolver
from aws_pass.domain.value_objects import SecretFilter, SecretTag
from aws_pass.infrastructure.secrets.memory_adapter import InMemorySecretsAdapter
from aws_pass.infrastructure.storage.local_store import LocalStoreFiles

pytest_plugins = ("pytest_asyncio",)

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)

OWNER_TAGS = (SecretTag("aws-pass", "true"),)
OWNER_FILTERS = (
    SecretFilter("tag-key", ("aws-pass",)),
    SecretFilter("tag-value", ("true",)),
)


class FakePrompt:
    """Scripted OperatorPromptProtocol implementation.

    Attributes:
        mfa_codes: Codes handed out by prompt_mfa_code, in order.
        secret_values: Values handed out by read_secret_value, in order.
        edit_result: Returned by edit_secret_value.
        mfa_prompts: Number of MFA prompts shown.
        edited: (name, current) of every edit session.
    """

    def __init__(
        self,
        mfa_codes: list[str] | None = None,
        secret_values: list[str] | None = None,
        edit_result: str | None = None,
    ) -> None:
        self.mfa_codes = list(mfa_codes or ["123456"])
        self.secret_values = list(secret_values or [])
        self.edit_result = edit_result
        self.mfa_prompts = 0
        self.edited: list[tuple[str, str]] = []

    def prompt_mfa_code(self) -> str:
        self.mfa_prompts += 1
        if len(self.mfa_codes) > 1:
            return self.mfa_codes.pop(0)
        return self.mfa_codes[0]

    def read_secret_value(self, name: str) -> str:
        return self.secret_values.pop(0)

    def edit_secret_value(self, name: str, current: str) -> str | None:
        self.edited.append((name, current))
        return self.edit_result


@pytest.fixture
def mock_logger():
    """Logger double whose bind() returns itself."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def fake_prompt():
    """Operator prompt answering with scripted values."""
    return FakePrompt()


@pytest.fixture
def memory_backend():
    """In-memory secret backend with small pages to exercise pagination."""
    return InMemorySecretsAdapter(page_size=2)


@pytest.fixture
def local_store(tmp_path):
    """Local store rooted in a temporary directory (not yet initialized)."""
    return LocalStoreFiles(tmp_path / "store")


@pytest.fixture
def password_store(memory_backend, local_store, fake_prompt, mock_logger):
    """PasswordStore over the in-memory backend with default ownership tags."""
    return PasswordStore(
        resolver=SecretResolver(memory_backend, mock_logger),
        backend=memory_backend,
        local_store=local_store,
        prompt=fake_prompt,
        logger=mock_logger,
        owner_tags=OWNER_TAGS,
        owner_filters=OWNER_FILTERS,
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
