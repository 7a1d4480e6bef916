"""Secret backend protocol (port) for hexagonal architecture.

This protocol defines what the application needs from a remote key/value
secret store addressed by opaque id.

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (AWSSecretsManagerAdapter, InMemorySecretsAdapter)
    - Application uses protocol (backend-agnostic)

Names are NOT keys at the backend. Name-based access goes through
SecretResolver, which lists with filters and asserts a unique match.
"""

from typing import Protocol

from aws_pass.core.errors import DomainError
from aws_pass.core.result import Result
from aws_pass.domain.value_objects import (
    SecretFilter,
    SecretsPage,
    SecretTag,
    SecretValue,
)


class SecretBackendProtocol(Protocol):
    """Protocol for id-addressed secret stores.

    Implementations:
        - AWSSecretsManagerAdapter: AWS Secrets Manager via boto3
        - InMemorySecretsAdapter: process-local fake (offline use, tests)
    """

    async def create_secret(
        self, name: str, value: str, tags: tuple[SecretTag, ...] = ()
    ) -> Result[str, DomainError]:
        """Create a secret.

        Args:
            name: Human-assigned name.
            value: Secret string.
            tags: Tags stamped at creation.

        Returns:
            Success(secret_id) with the new opaque id.
            Failure(ConflictError) if the backend refuses the name.
            Failure(BackendUnavailableError) on transport/service errors.
        """
        ...

    async def get_secret(self, secret_id: str) -> Result[SecretValue, DomainError]:
        """Get a secret's current value by id.

        Returns:
            Success(SecretValue) if found.
            Failure(NotFoundError) if the id is unknown or deleted.
        """
        ...

    async def put_secret(self, secret_id: str, value: str) -> Result[None, DomainError]:
        """Replace a secret's value by id.

        Returns:
            Success(None) on write.
            Failure(NotFoundError) if the id is unknown or deleted.
        """
        ...

    async def delete_secret(self, secret_id: str) -> Result[None, DomainError]:
        """Delete a secret by id.

        Returns:
            Success(None) on delete.
            Failure(NotFoundError) if the id is unknown.
        """
        ...

    async def list_secrets(
        self,
        filters: tuple[SecretFilter, ...] = (),
        next_token: str | None = None,
    ) -> Result[SecretsPage, DomainError]:
        """List one page of secrets matching all filters.

        Args:
            filters: Predicates ANDed together (values ORed within one).
            next_token: Cursor from the previous page, None for the first.

        Returns:
            Success(SecretsPage); page.next_token is None on the last page.
        """
        ...

    async def generate_password(
        self, exclude_chars: str | None = None, length: int | None = None
    ) -> Result[str, DomainError]:
        """Generate a random password using the backend's facility.

        Args:
            exclude_chars: Characters the password must not contain.
            length: Password length (backend default when None).

        Returns:
            Success(password).
        """
        ...
