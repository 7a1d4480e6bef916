"""In-memory secret backend for offline use and tests.

Implements SecretBackendProtocol in process memory, reproducing the parts of
Secrets Manager behavior the rest of the tool relies on:

    - ARN-style opaque ids
    - Unique names among live secrets (ResourceExistsException analogue)
    - ListSecrets filters: prefix match, values ORed, filters ANDed
    - Pagination with opaque next tokens
    - Random passwords honoring excluded characters and length
    - Optional credential gate: with a provider, every call first obtains a
      session credential, so offline runs go through the MFA flow too

File: memory_adapter.py → class InMemorySecretsAdapter (PEP 8 naming)
"""

import secrets
import string
from dataclasses import dataclass

from aws_pass.core.enums import ErrorCode
from aws_pass.core.errors import DomainError, ValidationError
from aws_pass.core.result import Failure, Result, Success
from aws_pass.domain.protocols import CredentialProviderProtocol
from aws_pass.domain.value_objects import (
    SecretFilter,
    SecretsPage,
    SecretSummary,
    SecretTag,
    SecretValue,
)
from aws_pass.domain.value_objects.secret_filter import (
    ALL_FILTER_KEY,
    DESCRIPTION_FILTER_KEY,
    NAME_FILTER_KEY,
    TAG_KEY_FILTER_KEY,
    TAG_VALUE_FILTER_KEY,
)
from aws_pass.infrastructure.secrets.base_adapter import BaseSecretsAdapter

DEFAULT_PASSWORD_LENGTH = 32
PASSWORD_ALPHABET = string.ascii_letters + string.digits + string.punctuation


@dataclass(slots=True)
class _StoredSecret:
    id: str
    name: str
    value: str
    tags: tuple[SecretTag, ...]
    description: str | None = None

    def summary(self) -> SecretSummary:
        return SecretSummary(
            id=self.id, name=self.name, tags=self.tags, description=self.description
        )


def _matches(secret: _StoredSecret, secret_filter: SecretFilter) -> bool:
    """Check one filter against a secret (any value may match)."""
    candidates: list[str]
    match secret_filter.key:
        case "name":
            candidates = [secret.name]
        case "tag-key":
            candidates = [tag.key for tag in secret.tags]
        case "tag-value":
            candidates = [tag.value for tag in secret.tags]
        case "description":
            candidates = [secret.description or ""]
        case _:
            candidates = [
                secret.name,
                secret.description or "",
                *(tag.key for tag in secret.tags),
                *(tag.value for tag in secret.tags),
            ]
    return any(
        candidate.startswith(value)
        for value in secret_filter.values
        for candidate in candidates
    )


class InMemorySecretsAdapter(BaseSecretsAdapter):
    """Process-local secret backend.

    Args:
        page_size: Maximum items per listing page.
        region: Region used in generated ARNs.
        account_id: Account used in generated ARNs.
        credentials: Optional provider consulted before every call.

    Attributes:
        list_calls: (filters, next_token) of every list_secrets call, in order.
    """

    service = "memory"
    supported_filter_keys = frozenset(
        {
            NAME_FILTER_KEY,
            TAG_KEY_FILTER_KEY,
            TAG_VALUE_FILTER_KEY,
            DESCRIPTION_FILTER_KEY,
            ALL_FILTER_KEY,
        }
    )

    def __init__(
        self,
        page_size: int = 100,
        region: str = "us-east-1",
        account_id: str = "000000000000",
        credentials: CredentialProviderProtocol | None = None,
    ) -> None:
        self.page_size = page_size
        self.region = region
        self.account_id = account_id
        self._credentials = credentials
        self._secrets: dict[str, _StoredSecret] = {}
        self.list_calls: list[tuple[tuple[SecretFilter, ...], str | None]] = []

    async def _authorize(self) -> Result[None, DomainError]:
        """Obtain a session credential when a provider is configured."""
        if self._credentials is None:
            return Success(value=None)
        result = await self._credentials.get_credential()
        if isinstance(result, Failure):
            return Failure(error=result.error)
        return Success(value=None)

    def _new_id(self, name: str) -> str:
        suffix = "".join(secrets.choice(string.ascii_letters) for _ in range(6))
        return f"arn:aws:secretsmanager:{self.region}:{self.account_id}:secret:{name}-{suffix}"

    async def create_secret(
        self, name: str, value: str, tags: tuple[SecretTag, ...] = ()
    ) -> Result[str, DomainError]:
        """Create a secret; names are unique among stored secrets."""
        authorized = await self._authorize()
        if isinstance(authorized, Failure):
            return authorized

        if any(stored.name == name for stored in self._secrets.values()):
            return Failure(error=self._already_exists(name))

        secret_id = self._new_id(name)
        self._secrets[secret_id] = _StoredSecret(
            id=secret_id, name=name, value=value, tags=tuple(tags)
        )
        return Success(value=secret_id)

    async def get_secret(self, secret_id: str) -> Result[SecretValue, DomainError]:
        """Get a secret's value by id."""
        authorized = await self._authorize()
        if isinstance(authorized, Failure):
            return authorized

        stored = self._secrets.get(secret_id)
        if stored is None:
            return Failure(error=self._not_found(secret_id))
        return Success(value=SecretValue(id=stored.id, name=stored.name, value=stored.value))

    async def put_secret(self, secret_id: str, value: str) -> Result[None, DomainError]:
        """Replace a secret's value by id."""
        authorized = await self._authorize()
        if isinstance(authorized, Failure):
            return authorized

        stored = self._secrets.get(secret_id)
        if stored is None:
            return Failure(error=self._not_found(secret_id))
        stored.value = value
        return Success(value=None)

    async def delete_secret(self, secret_id: str) -> Result[None, DomainError]:
        """Delete a secret by id (immediately)."""
        authorized = await self._authorize()
        if isinstance(authorized, Failure):
            return authorized

        if self._secrets.pop(secret_id, None) is None:
            return Failure(error=self._not_found(secret_id))
        return Success(value=None)

    async def list_secrets(
        self,
        filters: tuple[SecretFilter, ...] = (),
        next_token: str | None = None,
    ) -> Result[SecretsPage, DomainError]:
        """List one page of secrets matching every filter."""
        self.list_calls.append((tuple(filters), next_token))
        authorized = await self._authorize()
        if isinstance(authorized, Failure):
            return authorized

        unsupported = [f.key for f in filters if f.key not in self.supported_filter_keys]
        if unsupported:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=f"Unsupported filter key: {unsupported[0]}",
                    field="filters",
                )
            )

        try:
            offset = int(next_token) if next_token is not None else 0
        except ValueError:
            return Failure(error=self._request_failed(f"Invalid next token: {next_token}"))

        matching = [
            stored.summary()
            for stored in self._secrets.values()
            if all(_matches(stored, secret_filter) for secret_filter in filters)
        ]
        end = offset + self.page_size
        items = tuple(matching[offset:end])
        return Success(
            value=SecretsPage(
                items=items,
                next_token=str(end) if end < len(matching) else None,
            )
        )

    async def generate_password(
        self, exclude_chars: str | None = None, length: int | None = None
    ) -> Result[str, DomainError]:
        """Generate a random password from letters, digits and punctuation."""
        authorized = await self._authorize()
        if isinstance(authorized, Failure):
            return authorized

        password_length = DEFAULT_PASSWORD_LENGTH if length is None else length
        alphabet = [c for c in PASSWORD_ALPHABET if c not in (exclude_chars or "")]

        if password_length < 1 or not alphabet:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Password length must be positive and leave characters to choose from",
                    field="length" if password_length < 1 else "exclude_chars",
                )
            )
        return Success(
            value="".join(secrets.choice(alphabet) for _ in range(password_length))
        )
