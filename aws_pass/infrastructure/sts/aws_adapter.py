"""AWS STS adapter for MFA-gated session credentials.

Implements TokenServiceProtocol with STS GetSessionToken, signed with the
long-lived identity credentials from the local store.

File: aws_adapter.py → class AWSTokenServiceAdapter (PEP 8 naming)
"""

import asyncio
from datetime import UTC, datetime
from functools import partial

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from mypy_boto3_sts.client import STSClient

from aws_pass.core.enums import ErrorCode
from aws_pass.core.errors import AuthenticationError, DomainError
from aws_pass.core.result import Failure, Result, Success
from aws_pass.domain.errors import BackendUnavailableError
from aws_pass.domain.protocols import LocalStoreProtocol, LoggerProtocol
from aws_pass.domain.value_objects import IdentityCredentials, SessionCredential

# STS error codes meaning the identity or the MFA code was rejected
AUTHENTICATION_ERROR_CODES = frozenset(
    {
        "AccessDenied",
        "ExpiredToken",
        "InvalidClientTokenId",
        "SignatureDoesNotMatch",
        "ValidationError",
    }
)


class AWSTokenServiceAdapter:
    """Session credentials from AWS STS.

    Features:
        - Identity credentials read from the local store on each exchange
        - Blocking boto3 call runs in the default executor
        - STS errors mapped to AuthenticationError / BackendUnavailableError

    Args:
        local_store: Store directory holding the identity credentials.
        logger: Structured logger.
        region: AWS region for the STS endpoint (default: us-east-1).
    """

    def __init__(
        self,
        local_store: LocalStoreProtocol,
        logger: LoggerProtocol,
        region: str = "us-east-1",
    ) -> None:
        self._local_store = local_store
        self._logger = logger.bind(component="sts")
        self.region = region

    def _client(self, identity: IdentityCredentials) -> STSClient:
        """Build an STS client signed with the identity credentials."""
        return boto3.client(
            "sts",
            region_name=self.region,
            aws_access_key_id=identity.access_key_id,
            aws_secret_access_key=identity.secret_access_key,
        )

    async def get_session_token(
        self, duration_seconds: int, mfa_serial: str, mfa_code: str
    ) -> Result[SessionCredential, DomainError]:
        """Exchange an MFA code for a session credential.

        Args:
            duration_seconds: Requested lifetime in seconds.
            mfa_serial: MFA device serial number or ARN.
            mfa_code: Current one-time code.

        Returns:
            Success(SessionCredential) with an absolute, UTC expires_at.
            Failure(ConfigurationError) if identity credentials are unusable.
            Failure(AuthenticationError) if STS rejects the identity or code.
            Failure(BackendUnavailableError) on other STS or transport errors.
        """
        identity_result = self._local_store.read_identity()
        if isinstance(identity_result, Failure):
            return identity_result
        identity = identity_result.value

        self._logger.debug(
            "Will send get session token request",
            duration_seconds=duration_seconds,
            mfa_serial=mfa_serial,
        )
        try:
            client = self._client(identity)
            loop = asyncio.get_running_loop()
            response = await loop.run_in_executor(
                None,
                partial(
                    client.get_session_token,
                    DurationSeconds=duration_seconds,
                    SerialNumber=mfa_serial,
                    TokenCode=mfa_code,
                ),
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in AUTHENTICATION_ERROR_CODES:
                self._logger.warning(
                    "Session token request rejected", aws_error_code=error_code
                )
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.MFA_AUTHENTICATION_FAILED,
                        message="MFA authentication failed, check the code and try again",
                        details={"aws_error_code": error_code},
                    )
                )
            self._logger.error("Session token request failed", error=e)
            return Failure(
                error=BackendUnavailableError(
                    code=ErrorCode.BACKEND_REQUEST_FAILED,
                    message="STS get session token request failed",
                    service="sts",
                    details={"aws_error_code": error_code},
                )
            )
        except BotoCoreError as e:
            self._logger.error("STS unavailable", error=e)
            return Failure(
                error=BackendUnavailableError(
                    code=ErrorCode.BACKEND_UNAVAILABLE,
                    message="Unable to reach STS",
                    service="sts",
                    details={"error": str(e)},
                )
            )

        credentials = response["Credentials"]
        expires_at: datetime = credentials["Expiration"]
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)

        self._logger.debug(
            "Did receive session token response",
            access_key_id=credentials["AccessKeyId"],
            expires_at=expires_at.isoformat(),
        )
        return Success(
            value=SessionCredential(
                access_key_id=credentials["AccessKeyId"],
                secret_access_key=credentials["SecretAccessKey"],
                session_token=credentials["SessionToken"],
                expires_at=expires_at,
            )
        )
