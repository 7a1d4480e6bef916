"""In-memory token service for offline use and tests.

Implements TokenServiceProtocol without any network call. Issues random
credentials that expire ``duration_seconds`` after the injected clock's now.

File: memory_adapter.py → class InMemoryTokenServiceAdapter (PEP 8 naming)
"""

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from aws_pass.core.enums import ErrorCode
from aws_pass.core.errors import AuthenticationError, DomainError
from aws_pass.core.result import Failure, Result, Success
from aws_pass.domain.value_objects import SessionCredential


def _utc_now() -> datetime:
    return datetime.now(UTC)


class InMemoryTokenServiceAdapter:
    """Offline session credential issuer.

    Args:
        expected_code: When set, any other MFA code is rejected.
        clock: Source of the current time (default: UTC wall clock).

    Attributes:
        requests: (duration_seconds, mfa_serial) of every exchange, in order.
    """

    def __init__(
        self,
        expected_code: str | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._expected_code = expected_code
        self._clock = clock
        self.requests: list[tuple[int, str]] = []

    async def get_session_token(
        self, duration_seconds: int, mfa_serial: str, mfa_code: str
    ) -> Result[SessionCredential, DomainError]:
        """Issue a credential, or reject a wrong MFA code."""
        self.requests.append((duration_seconds, mfa_serial))

        if self._expected_code is not None and mfa_code != self._expected_code:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.MFA_AUTHENTICATION_FAILED,
                    message="MFA authentication failed, check the code and try again",
                )
            )

        return Success(
            value=SessionCredential(
                access_key_id=f"ASIA{secrets.token_hex(8).upper()}",
                secret_access_key=secrets.token_urlsafe(30),
                session_token=secrets.token_urlsafe(64),
                expires_at=self._clock() + timedelta(seconds=duration_seconds),
            )
        )
