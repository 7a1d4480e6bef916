"""Token service protocol (port).

Issues short-lived session credentials in exchange for a long-lived identity,
an MFA device serial and the current MFA code.
"""

from typing import Protocol

from aws_pass.core.errors import DomainError
from aws_pass.core.result import Result
from aws_pass.domain.value_objects import SessionCredential


class TokenServiceProtocol(Protocol):
    """Protocol for MFA-gated session credential issuance.

    Implementations:
        - AWSTokenServiceAdapter: AWS STS GetSessionToken via boto3
        - InMemoryTokenServiceAdapter: offline issuer for local use and tests
    """

    async def get_session_token(
        self, duration_seconds: int, mfa_serial: str, mfa_code: str
    ) -> Result[SessionCredential, DomainError]:
        """Exchange an MFA code for a session credential.

        Args:
            duration_seconds: Requested credential lifetime.
            mfa_serial: MFA device serial number or ARN.
            mfa_code: Current one-time code from the device.

        Returns:
            Success(SessionCredential) with an absolute expires_at.
            Failure(AuthenticationError) if the code or identity is rejected.
            Failure(ConfigurationError) if the identity credentials are missing.
            Failure(BackendUnavailableError) on transport/service errors.
        """
        ...
