"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console/JSON on stderr)
- Local store (files under the store directory)
- Operator prompt (click)
- Token service (STS/in-memory)
- Credential cache (MFA-gated session credentials)
- Secret backend (Secrets Manager/in-memory)

One CLI invocation is one application scope. Tests reset a factory with
``get_x.cache_clear()``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from aws_pass.core.config import get_settings

if TYPE_CHECKING:
    from aws_pass.application.services.credential_cache import CredentialCache
    from aws_pass.domain.protocols import (
        LocalStoreProtocol,
        LoggerProtocol,
        OperatorPromptProtocol,
        SecretBackendProtocol,
        TokenServiceProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Logs go to stderr. JSON rendering is used when AWS_PASS_LOG_JSON is set
    or when running under tests/CI.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from aws_pass.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.log_json or settings.is_testing,
        level=settings.log_level,
    )


@lru_cache()
def get_local_store() -> "LocalStoreProtocol":
    """Get the local store directory adapter singleton.

    Returns:
        LocalStoreFiles rooted at Settings.store_dir.
    """
    from aws_pass.infrastructure.storage.local_store import LocalStoreFiles

    settings = get_settings()
    return LocalStoreFiles(
        settings.store_dir,
        credentials_file_name=settings.credentials_file_name,
        mfa_serial_file_name=settings.mfa_serial_file_name,
    )


@lru_cache()
def get_prompt() -> "OperatorPromptProtocol":
    """Get the terminal prompt adapter singleton."""
    from aws_pass.infrastructure.terminal.click_prompt import ClickPromptAdapter

    return ClickPromptAdapter()


@lru_cache()
def get_token_service() -> "TokenServiceProtocol":
    """Get the session token service singleton.

    Returns correct adapter based on AWS_PASS_SECRETS_BACKEND:
        - 'aws': AWSTokenServiceAdapter (STS GetSessionToken)
        - 'memory': InMemoryTokenServiceAdapter (offline)
    """
    settings = get_settings()

    if settings.secrets_backend == "memory":
        from aws_pass.infrastructure.sts.memory_adapter import (
            InMemoryTokenServiceAdapter,
        )

        return InMemoryTokenServiceAdapter()

    from aws_pass.infrastructure.sts.aws_adapter import AWSTokenServiceAdapter

    return AWSTokenServiceAdapter(
        local_store=get_local_store(),
        logger=get_logger(),
        region=settings.aws_region,
    )


@lru_cache()
def get_credential_cache() -> "CredentialCache":
    """Get the session credential cache singleton.

    The cache is owned here and handed to the AWS secret backend; nothing
    else holds credential state.
    """
    from aws_pass.application.services.credential_cache import CredentialCache

    settings = get_settings()
    return CredentialCache(
        token_service=get_token_service(),
        local_store=get_local_store(),
        prompt=get_prompt(),
        logger=get_logger(),
        duration_seconds=settings.session_duration_seconds,
    )


@lru_cache()
def get_secret_backend() -> "SecretBackendProtocol":
    """Get the secret backend singleton.

    Container owns factory logic - decides which adapter based on
    AWS_PASS_SECRETS_BACKEND:
        - 'aws': AWSSecretsManagerAdapter (signed with cached session credentials)
        - 'memory': InMemorySecretsAdapter (process-local, nothing persists,
          gated by the same credential cache with an offline token service)

    Returns:
        Secret backend implementing SecretBackendProtocol.
    """
    settings = get_settings()

    if settings.secrets_backend == "memory":
        from aws_pass.infrastructure.secrets.memory_adapter import (
            InMemorySecretsAdapter,
        )

        return InMemorySecretsAdapter(
            page_size=settings.list_page_size,
            region=settings.aws_region,
            credentials=get_credential_cache(),
        )

    from aws_pass.infrastructure.secrets.aws_adapter import AWSSecretsManagerAdapter

    return AWSSecretsManagerAdapter(
        credentials=get_credential_cache(),
        logger=get_logger(),
        region=settings.aws_region,
        page_size=settings.list_page_size,
        force_delete=settings.force_delete,
    )
