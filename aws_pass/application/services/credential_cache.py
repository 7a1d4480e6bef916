"""MFA-gated session credential cache.

Holds at most one session credential and hands it out while it is valid.
When it is absent or expired, a refresh reads the MFA device serial from the
local store, asks the operator for the current one-time code and exchanges
both for a new credential at the token service.

Architecture:
    - Application service (uses local store, prompt and token service ports)
    - Owned object built by the container, no module-level state
    - Implements CredentialProviderProtocol, consumed by the AWS secret backend

Concurrency:
    A single asyncio.Lock guards the cached cell. The validity check, the
    operator prompt and the token exchange all happen inside the critical
    section, so concurrent callers trigger at most one refresh and at most
    one MFA prompt.

Usage:
    cache = CredentialCache(token_service, local_store, prompt, logger)

    result = await cache.get_credential()
    if isinstance(result, Success):
        credential = result.value
"""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime

from aws_pass.core.errors import DomainError
from aws_pass.core.result import Failure, Result, Success
from aws_pass.domain.protocols import (
    LocalStoreProtocol,
    LoggerProtocol,
    OperatorPromptProtocol,
    TokenServiceProtocol,
)
from aws_pass.domain.value_objects import SessionCredential

DEFAULT_SESSION_DURATION_SECONDS = 900


def _utc_now() -> datetime:
    return datetime.now(UTC)


class CredentialCache:
    """Lazily refreshed, MFA-gated session credential.

    A credential is usable while ``now < expires_at``. A credential that
    expires exactly now is treated as expired.

    Dependencies (injected via constructor):
        - TokenServiceProtocol: Exchanges serial + code for a credential
        - LocalStoreProtocol: Source of the MFA device serial
        - OperatorPromptProtocol: Asks for the MFA code
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        token_service: TokenServiceProtocol,
        local_store: LocalStoreProtocol,
        prompt: OperatorPromptProtocol,
        logger: LoggerProtocol,
        duration_seconds: int = DEFAULT_SESSION_DURATION_SECONDS,
        clock: Callable[[], datetime] = _utc_now,
        credential: SessionCredential | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            token_service: Session token issuer.
            local_store: Local store holding the MFA serial.
            prompt: Operator prompt for the MFA code.
            logger: Structured logger.
            duration_seconds: Requested lifetime of refreshed credentials.
            clock: Source of the current time (timezone-aware).
            credential: Optional seed credential.
        """
        self._token_service = token_service
        self._local_store = local_store
        self._prompt = prompt
        self._logger = logger.bind(component="credential_cache")
        self._duration_seconds = duration_seconds
        self._clock = clock
        self._credential = credential
        self._lock = asyncio.Lock()

    @property
    def credential(self) -> SessionCredential | None:
        """Currently cached credential (possibly expired), or None."""
        return self._credential

    async def get_credential(self) -> Result[SessionCredential, DomainError]:
        """Return a valid session credential, refreshing it if needed.

        Returns:
            Success(SessionCredential): Valid at the time of the call.
            Failure(ConfigurationError): MFA serial file missing or empty.
            Failure(AuthenticationError): Token service rejected the code.
            Failure(BackendUnavailableError): Token service unreachable.

        Side Effects:
            - May prompt the operator for an MFA code (once per refresh)
            - Replaces the cached credential only on a successful refresh
        """
        async with self._lock:
            cached = self._credential
            if cached is not None and not cached.is_expired(self._clock()):
                return Success(value=cached)

            return await self._refresh()

    async def _refresh(self) -> Result[SessionCredential, DomainError]:
        """Obtain a new credential. Caller holds the lock."""
        serial_result = self._local_store.read_mfa_serial()
        if isinstance(serial_result, Failure):
            self._logger.error(
                "Cannot refresh session credential",
                error_code=serial_result.error.code.value,
            )
            return serial_result
        mfa_serial = serial_result.value

        mfa_code = self._prompt.prompt_mfa_code().strip()

        result = await self._token_service.get_session_token(
            self._duration_seconds, mfa_serial, mfa_code
        )
        match result:
            case Success(value=credential):
                self._credential = credential
                self._logger.info(
                    "Session credential refreshed",
                    expires_at=credential.expires_at.isoformat(),
                )
                return Success(value=credential)
            case Failure(error=error):
                self._logger.warning(
                    "Session credential refresh failed", error_code=error.code.value
                )
                return Failure(error=error)
