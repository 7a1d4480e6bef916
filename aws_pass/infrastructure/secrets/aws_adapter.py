"""AWS Secrets Manager adapter.

Implements SecretBackendProtocol using AWS Secrets Manager. Every call is
signed with the session credential supplied by the credential provider
(normally the MFA-gated CredentialCache).

File: aws_adapter.py → class AWSSecretsManagerAdapter (PEP 8 naming)
"""

import asyncio
import uuid
from functools import partial
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from mypy_boto3_secretsmanager.client import SecretsManagerClient

from aws_pass.core.enums import ErrorCode
from aws_pass.core.errors import DomainError
from aws_pass.core.result import Failure, Result, Success
from aws_pass.domain.errors import BackendUnavailableError, SecretsError
from aws_pass.domain.protocols import CredentialProviderProtocol, LoggerProtocol
from aws_pass.domain.value_objects import (
    SecretFilter,
    SecretsPage,
    SecretSummary,
    SecretTag,
    SecretValue,
    SessionCredential,
)
from aws_pass.infrastructure.secrets.base_adapter import BaseSecretsAdapter

# InvalidRequestException messages for secrets that are deleted or pending deletion
DELETED_MESSAGE_MARKERS = ("deleted", "marked for deletion")
# InvalidRequestException message when creating over a name pending deletion
PENDING_DELETION_MARKER = "scheduled for deletion"


class AWSSecretsManagerAdapter(BaseSecretsAdapter):
    """Secret backend on AWS Secrets Manager.

    Features:
        - Session credentials fetched from the provider before every call,
          so an expired session triggers a single MFA refresh mid-run
        - One boto3 client per session credential
        - Blocking boto3 calls run in the default executor
        - Idempotency tokens on create and put

    Error mapping:
        - ResourceNotFoundException, or a secret marked for deletion → NotFoundError
        - ResourceExistsException → ConflictError
        - Any other ClientError → BackendUnavailableError(BACKEND_REQUEST_FAILED)
        - Transport errors (BotoCoreError) → BackendUnavailableError(BACKEND_UNAVAILABLE)
    """

    service = "secretsmanager"

    def __init__(
        self,
        credentials: CredentialProviderProtocol,
        logger: LoggerProtocol,
        region: str = "us-east-1",
        page_size: int = 100,
        force_delete: bool = False,
    ) -> None:
        """Initialize the adapter.

        Args:
            credentials: Supplier of valid session credentials.
            logger: Structured logger.
            region: AWS region for secrets (default: us-east-1).
            page_size: MaxResults for each ListSecrets page.
            force_delete: Delete without the recovery window.
        """
        self._credentials = credentials
        self._logger = logger.bind(component="secretsmanager")
        self.region = region
        self.page_size = page_size
        self.force_delete = force_delete
        self._client: SecretsManagerClient | None = None
        self._client_credential: SessionCredential | None = None

    async def _get_client(self) -> Result[SecretsManagerClient, DomainError]:
        """Return a client signed with a currently valid session credential."""
        credential_result = await self._credentials.get_credential()
        if isinstance(credential_result, Failure):
            return credential_result
        credential = credential_result.value

        if self._client is None or credential != self._client_credential:
            self._client = boto3.client(
                "secretsmanager",
                region_name=self.region,
                aws_access_key_id=credential.access_key_id,
                aws_secret_access_key=credential.secret_access_key,
                aws_session_token=credential.session_token,
            )
            self._client_credential = credential
        return Success(value=self._client)

    async def _call(
        self, operation: str, resource: str, **kwargs: Any
    ) -> Result[dict[str, Any], DomainError]:
        """Run one Secrets Manager operation and map its errors.

        Args:
            operation: boto3 client method name (e.g. 'get_secret_value').
            resource: Id or name the call is about (used in error messages).
            **kwargs: Request parameters.

        Returns:
            Success(response) or Failure(mapped error).
        """
        client_result = await self._get_client()
        if isinstance(client_result, Failure):
            return client_result
        client = client_result.value

        try:
            loop = asyncio.get_running_loop()
            response: dict[str, Any] = await loop.run_in_executor(
                None, partial(getattr(client, operation), **kwargs)
            )
        except ClientError as e:
            error = e.response.get("Error", {})
            error_code = error.get("Code", "Unknown")
            error_message = error.get("Message", "")
            if (
                error_code == "InvalidRequestException"
                and PENDING_DELETION_MARKER in error_message.lower()
            ):
                return Failure(error=self._pending_deletion(resource))
            if error_code == "ResourceNotFoundException" or (
                error_code == "InvalidRequestException"
                and any(m in error_message.lower() for m in DELETED_MESSAGE_MARKERS)
            ):
                return Failure(error=self._not_found(resource))
            if error_code == "ResourceExistsException":
                return Failure(error=self._already_exists(resource))
            self._logger.error(
                "Secrets Manager request failed",
                operation=operation,
                aws_error_code=error_code,
            )
            return Failure(
                error=self._request_failed(
                    f"Secrets Manager {operation} failed: {error_code}",
                    details={"aws_error_code": error_code},
                )
            )
        except BotoCoreError as e:
            self._logger.error("Secrets Manager unavailable", error=e, operation=operation)
            return Failure(
                error=BackendUnavailableError(
                    code=ErrorCode.BACKEND_UNAVAILABLE,
                    message="Unable to reach Secrets Manager",
                    service=self.service,
                    details={"error": str(e)},
                )
            )
        return Success(value=response)

    async def create_secret(
        self, name: str, value: str, tags: tuple[SecretTag, ...] = ()
    ) -> Result[str, DomainError]:
        """Create a secret string, returning its ARN.

        Example:
            >>> result = await adapter.create_secret(
            ...     "github", "hunter2", (SecretTag("aws-pass", "true"),)
            ... )
            >>> # Success("arn:aws:secretsmanager:us-east-1:...:secret:github-AbCdEf")
        """
        request: dict[str, Any] = {
            "ClientRequestToken": str(uuid.uuid4()),
            "Name": name,
            "SecretString": value,
        }
        if tags:
            request["Tags"] = [{"Key": tag.key, "Value": tag.value} for tag in tags]

        self._logger.debug("Will send create secret request", secret_name=name)
        result = await self._call("create_secret", name, **request)
        match result:
            case Success(value=response):
                self._logger.debug(
                    "Did receive create secret response", secret_id=response["ARN"]
                )
                return Success(value=response["ARN"])
            case Failure(error=error) if error.code == ErrorCode.SECRET_ALREADY_EXISTS:
                # Names of secrets pending deletion are hidden from listings
                # but still taken.
                if await self._is_pending_deletion(name):
                    return Failure(error=self._pending_deletion(name))
                return Failure(error=error)
            case Failure(error=error):
                return Failure(error=error)

    async def _is_pending_deletion(self, name: str) -> bool:
        """Whether the secret named ``name`` is scheduled for deletion."""
        result = await self._call("describe_secret", name, SecretId=name)
        if isinstance(result, Failure):
            return False
        return result.value.get("DeletedDate") is not None

    async def get_secret(self, secret_id: str) -> Result[SecretValue, DomainError]:
        """Get the current string value of a secret by ARN."""
        self._logger.debug("Will send get secret value request", secret_id=secret_id)
        result = await self._call("get_secret_value", secret_id, SecretId=secret_id)
        if isinstance(result, Failure):
            return result
        response = result.value

        secret_string = response.get("SecretString")
        if secret_string is None:
            return Failure(
                error=SecretsError(
                    code=ErrorCode.SECRET_VALUE_NOT_STRING,
                    message=f"Secret has no string value: {secret_id}",
                )
            )
        self._logger.debug("Did receive get secret value response", secret_id=response["ARN"])
        return Success(
            value=SecretValue(id=response["ARN"], name=response["Name"], value=secret_string)
        )

    async def put_secret(self, secret_id: str, value: str) -> Result[None, DomainError]:
        """Store a new string value for a secret by ARN."""
        self._logger.debug("Will send put secret value request", secret_id=secret_id)
        result = await self._call(
            "put_secret_value",
            secret_id,
            ClientRequestToken=str(uuid.uuid4()),
            SecretId=secret_id,
            SecretString=value,
        )
        if isinstance(result, Failure):
            return result
        self._logger.debug("Did receive put secret value response", secret_id=secret_id)
        return Success(value=None)

    async def delete_secret(self, secret_id: str) -> Result[None, DomainError]:
        """Delete (or schedule deletion of) a secret by ARN."""
        request: dict[str, Any] = {"SecretId": secret_id}
        if self.force_delete:
            request["ForceDeleteWithoutRecovery"] = True

        self._logger.debug(
            "Will send delete secret request",
            secret_id=secret_id,
            force_delete=self.force_delete,
        )
        result = await self._call("delete_secret", secret_id, **request)
        if isinstance(result, Failure):
            return result
        self._logger.debug("Did receive delete secret response", secret_id=secret_id)
        return Success(value=None)

    async def list_secrets(
        self,
        filters: tuple[SecretFilter, ...] = (),
        next_token: str | None = None,
    ) -> Result[SecretsPage, DomainError]:
        """List one page of secrets matching all filters."""
        request: dict[str, Any] = {"MaxResults": self.page_size}
        if filters:
            request["Filters"] = [
                {"Key": secret_filter.key, "Values": list(secret_filter.values)}
                for secret_filter in filters
            ]
        if next_token is not None:
            request["NextToken"] = next_token

        self._logger.debug(
            "Will send list secrets request",
            filters=[f"{f.key}={','.join(f.values)}" for f in filters],
            has_next_token=next_token is not None,
        )
        result = await self._call("list_secrets", "secrets", **request)
        if isinstance(result, Failure):
            return result
        response = result.value

        items = tuple(
            SecretSummary(
                id=entry["ARN"],
                name=entry["Name"],
                tags=tuple(
                    SecretTag(tag["Key"], tag["Value"]) for tag in entry.get("Tags", [])
                ),
                description=entry.get("Description"),
            )
            for entry in response.get("SecretList", [])
        )
        page = SecretsPage(items=items, next_token=response.get("NextToken") or None)
        self._logger.debug(
            "Did receive list secrets response",
            item_count=len(items),
            is_last=page.is_last,
        )
        return Success(value=page)

    async def generate_password(
        self, exclude_chars: str | None = None, length: int | None = None
    ) -> Result[str, DomainError]:
        """Generate a random password with GetRandomPassword."""
        request: dict[str, Any] = {}
        if exclude_chars:
            request["ExcludeCharacters"] = exclude_chars
        if length is not None:
            request["PasswordLength"] = length

        self._logger.debug(
            "Will send get random password request",
            exclude_chars=exclude_chars,
            length=length,
        )
        result = await self._call("get_random_password", "random-password", **request)
        if isinstance(result, Failure):
            return result
        return Success(value=result.value["RandomPassword"])
