"""Secret name resolution service.

The backend addresses secrets by opaque id; operators address them by name.
SecretResolver bridges the two by enumerating the backend with filters and
asserting that exactly one secret carries the requested name.

Resolution:
    1. Effective filters: name filter first, then extra filters, duplicates
       removed with order preserved
    2. Enumerate every page (cursor starts at None, stops at None)
    3. Narrow to exact name matches (the backend name filter is a prefix match)
    4. Zero → NotFoundError, one → that secret, more → AmbiguousSecretError

Name-based writes are resolve-then-act and therefore not atomic.
"""

from aws_pass.core.enums import ErrorCode
from aws_pass.core.errors import DomainError, NotFoundError
from aws_pass.core.result import Failure, Result, Success
from aws_pass.domain.errors import AmbiguousSecretError
from aws_pass.domain.protocols import LoggerProtocol, SecretBackendProtocol
from aws_pass.domain.value_objects import (
    SecretFilter,
    SecretSummary,
    SecretValue,
    compose_filters,
)


class SecretResolver:
    """Resolves secret names to ids and performs by-name operations.

    Dependencies (injected via constructor):
        - SecretBackendProtocol: Listing and id-based operations
        - LoggerProtocol: Structured logging
    """

    def __init__(self, backend: SecretBackendProtocol, logger: LoggerProtocol) -> None:
        self._backend = backend
        self._logger = logger.bind(component="secret_resolver")

    async def list_all(
        self, filters: tuple[SecretFilter, ...] = ()
    ) -> Result[list[SecretSummary], DomainError]:
        """Enumerate every secret matching all filters.

        Pages are concatenated in backend order. Any failed page aborts the
        enumeration and its error is returned.

        Args:
            filters: Predicates ANDed together.

        Returns:
            Success(list[SecretSummary]) or the first page Failure.
        """
        summaries: list[SecretSummary] = []
        next_token: str | None = None
        page_count = 0

        while True:
            result = await self._backend.list_secrets(filters, next_token)
            if isinstance(result, Failure):
                return result
            page = result.value
            page_count += 1
            summaries.extend(page.items)
            if page.next_token is None:
                break
            next_token = page.next_token

        self._logger.debug(
            "Listed secrets", page_count=page_count, item_count=len(summaries)
        )
        return Success(value=summaries)

    async def resolve_by_name(
        self, name: str, extra_filters: tuple[SecretFilter, ...] = ()
    ) -> Result[SecretSummary, DomainError]:
        """Find the single secret named ``name``.

        Args:
            name: Exact secret name.
            extra_filters: Additional predicates (ownership tags).

        Returns:
            Success(SecretSummary) on a unique match.
            Failure(NotFoundError) when nothing matches.
            Failure(AmbiguousSecretError) when several secrets match.
        """
        filters = compose_filters((SecretFilter.name(name),), tuple(extra_filters))

        listed = await self.list_all(filters)
        if isinstance(listed, Failure):
            return listed

        # Listing matched by prefix; keep exact names only.
        matches = [summary for summary in listed.value if summary.name == name]

        if not matches:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.SECRET_NOT_FOUND,
                    message=f"Secret not found: {name}",
                    resource_type="Secret",
                    resource_id=name,
                )
            )
        if len(matches) > 1:
            secret_ids = tuple(summary.id for summary in matches)
            self._logger.error(
                "Secret name is ambiguous", secret_name=name, secret_ids=list(secret_ids)
            )
            return Failure(
                error=AmbiguousSecretError(
                    code=ErrorCode.SECRET_NAME_AMBIGUOUS,
                    message=f"{len(matches)} secrets named {name}: {', '.join(secret_ids)}",
                    name=name,
                    secret_ids=secret_ids,
                )
            )
        return Success(value=matches[0])

    async def get_by_name(
        self, name: str, extra_filters: tuple[SecretFilter, ...] = ()
    ) -> Result[SecretValue, DomainError]:
        """Resolve ``name`` and fetch the secret's value."""
        resolved = await self.resolve_by_name(name, extra_filters)
        if isinstance(resolved, Failure):
            return resolved
        return await self._backend.get_secret(resolved.value.id)

    async def put_by_name(
        self, name: str, value: str, extra_filters: tuple[SecretFilter, ...] = ()
    ) -> Result[None, DomainError]:
        """Resolve ``name`` and replace the secret's value."""
        resolved = await self.resolve_by_name(name, extra_filters)
        if isinstance(resolved, Failure):
            return resolved
        return await self._backend.put_secret(resolved.value.id, value)

    async def delete_by_name(
        self, name: str, extra_filters: tuple[SecretFilter, ...] = ()
    ) -> Result[None, DomainError]:
        """Resolve ``name`` and delete the secret."""
        resolved = await self.resolve_by_name(name, extra_filters)
        if isinstance(resolved, Failure):
            return resolved
        return await self._backend.delete_secret(resolved.value.id)
