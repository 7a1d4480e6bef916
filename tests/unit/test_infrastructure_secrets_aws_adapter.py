"""Unit tests for AWSSecretsManagerAdapter (AWS Secrets Manager).

Tests cover:
- create/get/put/delete against mocked Secrets Manager
- Error mapping (not found, marked for deletion, name conflict, pending deletion)
- Tag stamping and tag-filtered listing with pagination
- GetRandomPassword parameters
- Credential provider failures propagate without any AWS call
- Client reuse per session credential

Architecture:
- Unit tests with moto mocking AWS Secrets Manager
- NO real AWS dependencies
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock, patch

import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from aws_pass.core.enums import ErrorCode
from aws_pass.core.errors import AuthenticationError, ConflictError, NotFoundError
from aws_pass.core.result import Failure, Success
from aws_pass.domain.value_objects import SecretFilter, SecretTag, SessionCredential
from aws_pass.infrastructure.secrets.aws_adapter import AWSSecretsManagerAdapter

OWNER_TAGS = (SecretTag("aws-pass", "true"),)
OWNER_FILTERS = (
    SecretFilter("tag-key", ("aws-pass",)),
    SecretFilter("tag-value", ("true",)),
)


def make_credential(access_key_id: str = "ASIAMOTOEXAMPLE") -> SessionCredential:
    return SessionCredential(
        access_key_id=access_key_id,
        secret_access_key="session-secret",
        session_token="session-token",
        expires_at=datetime.now(UTC) + timedelta(hours=1),
    )


def make_provider(credential: SessionCredential | None = None) -> Mock:
    provider = Mock()
    provider.get_credential = AsyncMock(
        return_value=Success(value=credential or make_credential())
    )
    return provider


@pytest.fixture
def aws():
    """Mocked AWS for the duration of one test."""
    with mock_aws():
        yield


@pytest.fixture
def adapter(aws, mock_logger):
    return AWSSecretsManagerAdapter(
        credentials=make_provider(), logger=mock_logger, region="us-east-1"
    )


@pytest.mark.unit
class TestAWSSecretsManagerCrud:
    """Test id-based operations."""

    @pytest.mark.asyncio
    async def test_create_then_get(self, adapter):
        """Test create returns an ARN that get_secret resolves."""
        created = await adapter.create_secret("github", "hunter2", OWNER_TAGS)

        assert isinstance(created, Success)
        assert created.value.startswith("arn:aws:secretsmanager:us-east-1:")

        fetched = await adapter.get_secret(created.value)
        assert isinstance(fetched, Success)
        assert fetched.value.id == created.value
        assert fetched.value.name == "github"
        assert fetched.value.value == "hunter2"

    @pytest.mark.asyncio
    async def test_create_duplicate_name_conflicts(self, adapter):
        """Test ResourceExistsException maps to ConflictError."""
        await adapter.create_secret("github", "a", OWNER_TAGS)

        result = await adapter.create_secret("github", "b", OWNER_TAGS)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.SECRET_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_get_unknown_not_found(self, adapter):
        """Test ResourceNotFoundException maps to NotFoundError."""
        result = await adapter.get_secret("does-not-exist")

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.SECRET_NOT_FOUND

    @pytest.mark.asyncio
    async def test_put_replaces_value(self, adapter):
        """Test put_secret stores a new current value."""
        secret_id = (await adapter.create_secret("github", "old", OWNER_TAGS)).value

        assert await adapter.put_secret(secret_id, "new") == Success(value=None)
        assert (await adapter.get_secret(secret_id)).value.value == "new"

    @pytest.mark.asyncio
    async def test_delete_with_recovery_then_get_not_found(self, adapter):
        """Test a secret scheduled for deletion reads as not found."""
        secret_id = (await adapter.create_secret("github", "v", OWNER_TAGS)).value

        assert await adapter.delete_secret(secret_id) == Success(value=None)
        result = await adapter.get_secret(secret_id)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SECRET_NOT_FOUND

    @pytest.mark.asyncio
    async def test_create_over_name_pending_deletion(self, adapter):
        """Test recreating a name removed with a recovery window is a pending-deletion conflict."""
        secret_id = (await adapter.create_secret("github", "v", OWNER_TAGS)).value
        await adapter.delete_secret(secret_id)

        result = await adapter.create_secret("github", "w", OWNER_TAGS)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.SECRET_PENDING_DELETION
        assert "AWS_PASS_FORCE_DELETE" in result.error.message

    @pytest.mark.asyncio
    async def test_create_scheduled_for_deletion_error_maps_to_conflict(self, adapter):
        """Test the InvalidRequestException AWS returns for such names maps to a conflict."""
        client = Mock()
        client.create_secret.side_effect = ClientError(
            {
                "Error": {
                    "Code": "InvalidRequestException",
                    "Message": (
                        "You can't create this secret because a secret with this "
                        "name is already scheduled for deletion."
                    ),
                }
            },
            "CreateSecret",
        )

        with patch.object(
            adapter, "_get_client", AsyncMock(return_value=Success(value=client))
        ):
            result = await adapter.create_secret("github", "w", OWNER_TAGS)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.SECRET_PENDING_DELETION

    @pytest.mark.asyncio
    async def test_force_delete(self, aws, mock_logger):
        """Test force_delete removes the secret without a recovery window."""
        adapter = AWSSecretsManagerAdapter(
            credentials=make_provider(), logger=mock_logger, force_delete=True
        )
        secret_id = (await adapter.create_secret("github", "v", OWNER_TAGS)).value

        assert await adapter.delete_secret(secret_id) == Success(value=None)
        result = await adapter.get_secret(secret_id)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SECRET_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_unknown_not_found(self, adapter):
        """Test deleting an unknown id fails with NotFoundError."""
        result = await adapter.delete_secret("does-not-exist")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SECRET_NOT_FOUND


@pytest.mark.unit
class TestAWSSecretsManagerListing:
    """Test list_secrets()."""

    @pytest.mark.asyncio
    async def test_owner_filters_exclude_foreign_secrets(self, adapter):
        """Test tag filters only return secrets stamped with the ownership tag."""
        await adapter.create_secret("owned", "a", OWNER_TAGS)
        await adapter.create_secret("foreign", "b")

        result = await adapter.list_secrets(OWNER_FILTERS)

        assert isinstance(result, Success)
        assert [s.name for s in result.value.items] == ["owned"]
        assert result.value.items[0].has_tag("aws-pass", "true")
        assert result.value.next_token is None

    @pytest.mark.asyncio
    async def test_pages_cover_all_secrets(self, aws, mock_logger):
        """Test following next_token enumerates every secret exactly once."""
        adapter = AWSSecretsManagerAdapter(
            credentials=make_provider(), logger=mock_logger, page_size=2
        )
        names = {"a", "b", "c", "d", "e"}
        for name in sorted(names):
            await adapter.create_secret(name, "v", OWNER_TAGS)

        seen: list[str] = []
        next_token = None
        while True:
            page = (await adapter.list_secrets(OWNER_FILTERS, next_token)).value
            seen.extend(s.name for s in page.items)
            if page.next_token is None:
                break
            next_token = page.next_token

        assert sorted(seen) == sorted(names)


@pytest.mark.unit
class TestAWSSecretsManagerPasswords:
    """Test generate_password()."""

    @pytest.mark.asyncio
    async def test_length_and_exclusions(self, adapter):
        """Test PasswordLength and ExcludeCharacters are honored."""
        result = await adapter.generate_password(exclude_chars="0O1l", length=20)

        assert isinstance(result, Success)
        assert len(result.value) == 20
        assert not set(result.value) & set("0O1l")


@pytest.mark.unit
class TestAWSSecretsManagerCredentials:
    """Test interaction with the credential provider."""

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(self, aws, mock_logger):
        """Test a failed credential refresh is returned unchanged."""
        error = AuthenticationError(
            code=ErrorCode.MFA_AUTHENTICATION_FAILED, message="rejected"
        )
        provider = Mock()
        provider.get_credential = AsyncMock(return_value=Failure(error=error))
        adapter = AWSSecretsManagerAdapter(credentials=provider, logger=mock_logger)

        result = await adapter.get_secret("anything")

        assert result == Failure(error=error)
        assert adapter._client is None

    @pytest.mark.asyncio
    async def test_client_reused_for_same_credential(self, adapter):
        """Test one client serves every call signed with the same credential."""
        await adapter.create_secret("github", "v", OWNER_TAGS)
        first_client = adapter._client
        await adapter.list_secrets(OWNER_FILTERS)

        assert adapter._client is first_client
        assert adapter._credentials.get_credential.await_count == 2

    @pytest.mark.asyncio
    async def test_client_rebuilt_for_new_credential(self, aws, mock_logger):
        """Test a refreshed credential gets a new client."""
        provider = Mock()
        provider.get_credential = AsyncMock(
            side_effect=[
                Success(value=make_credential("ASIAFIRST")),
                Success(value=make_credential("ASIASECOND")),
            ]
        )
        adapter = AWSSecretsManagerAdapter(credentials=provider, logger=mock_logger)

        await adapter.list_secrets()
        first_client = adapter._client
        await adapter.list_secrets()

        assert adapter._client is not first_client
