"""Password store orchestrator.

Exposes the end-user operations of aws-pass (init, list, show, insert, edit,
generate, remove) by composing the secret backend, the name resolver, the
local store and the operator prompt.

Architecture:
    - Application service (imports only from core and domain)
    - Never talks to the token service directly; the AWS backend signs its
      calls with credentials from CredentialCache
    - Returns Result types; the CLI is the only place mapping them to exit codes

Ownership:
    Every secret-touching operation applies the owner filters, so secrets the
    tool did not create are never listed, shown, edited or removed even in a
    shared backend namespace. insert and generate stamp the owner tags so
    later filtering sees the new secret.
"""

from pathlib import Path

from aws_pass.application.services.secret_resolver import SecretResolver
from aws_pass.core.enums import ErrorCode
from aws_pass.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from aws_pass.core.result import Failure, Result, Success
from aws_pass.domain.protocols import (
    LocalStoreProtocol,
    LoggerProtocol,
    OperatorPromptProtocol,
    SecretBackendProtocol,
)
from aws_pass.domain.value_objects import (
    IdentityCredentials,
    SecretFilter,
    SecretTag,
)
from aws_pass.domain.value_objects.secret_filter import NAME_FILTER_KEY


def _validation_error(message: str, field: str) -> ValidationError:
    return ValidationError(
        code=ErrorCode.VALIDATION_FAILED, message=message, field=field
    )


class PasswordStore:
    """Operator-facing password store.

    Dependencies (injected via constructor):
        - SecretResolver: Name → id resolution and by-name operations
        - SecretBackendProtocol: Creation and password generation
        - LocalStoreProtocol: Store directory written by init
        - OperatorPromptProtocol: Secret values and editor sessions
        - LoggerProtocol: Structured logging

    Example:
        >>> store = PasswordStore(resolver, backend, local_store, prompt, logger,
        ...                       owner_tags=settings.owner_tags,
        ...                       owner_filters=settings.owner_filters)
        >>> result = await store.show("github")
        >>> if isinstance(result, Success):
        ...     print(result.value)
    """

    def __init__(
        self,
        resolver: SecretResolver,
        backend: SecretBackendProtocol,
        local_store: LocalStoreProtocol,
        prompt: OperatorPromptProtocol,
        logger: LoggerProtocol,
        owner_tags: tuple[SecretTag, ...],
        owner_filters: tuple[SecretFilter, ...],
    ) -> None:
        """Initialize the store.

        Args:
            resolver: Name resolver over the same backend.
            backend: Secret backend.
            local_store: Local store directory.
            prompt: Operator prompt.
            logger: Structured logger.
            owner_tags: Tags stamped on created secrets.
            owner_filters: Filters selecting secrets this tool owns.
        """
        self._resolver = resolver
        self._backend = backend
        self._local_store = local_store
        self._prompt = prompt
        self._logger = logger.bind(component="password_store")
        self._owner_tags = tuple(owner_tags)
        self._owner_filters = tuple(owner_filters)

    def init(
        self, access_key_id: str, secret_access_key: str, mfa_serial: str
    ) -> Result[Path, DomainError]:
        """Create the local store with identity credentials and MFA serial.

        Returns:
            Success(store_dir): Store written.
            Failure(ValidationError): A value is empty.
            Failure(ConfigurationError): Store already initialized.
        """
        try:
            identity = IdentityCredentials(
                access_key_id=access_key_id.strip(),
                secret_access_key=secret_access_key.strip(),
            )
        except ValueError as e:
            return Failure(error=_validation_error(str(e), "identity"))

        if not mfa_serial.strip():
            return Failure(error=_validation_error("MFA serial cannot be empty", "mfa_serial"))

        result = self._local_store.initialize(identity, mfa_serial.strip())
        if isinstance(result, Success):
            self._logger.info("Store initialized", store_dir=str(result.value))
        return result

    async def list(self, prefix: str | None = None) -> Result[list[str], DomainError]:
        """List names of owned secrets, optionally by name prefix.

        Returns:
            Success(list[str]): Names in backend page order.
        """
        filters = self._owner_filters
        if prefix:
            filters = filters + (SecretFilter(NAME_FILTER_KEY, (prefix,)),)

        result = await self._resolver.list_all(filters)
        if isinstance(result, Failure):
            return result
        return Success(value=[summary.name for summary in result.value])

    async def show(self, name: str) -> Result[str, DomainError]:
        """Return the value of the owned secret named ``name``."""
        if not name:
            return Failure(error=_validation_error("Secret name cannot be empty", "name"))

        result = await self._resolver.get_by_name(name, self._owner_filters)
        if isinstance(result, Failure):
            return result
        return Success(value=result.value.value)

    async def insert(self, name: str) -> Result[str, DomainError]:
        """Create an owned secret with a value read from the operator.

        Returns:
            Success(secret_id): Id of the new secret.
            Failure(ConflictError): An owned secret already has this name.
            Failure(ValidationError): Empty name or empty value.
        """
        available = await self._ensure_name_available(name)
        if isinstance(available, Failure):
            return available

        value = self._prompt.read_secret_value(name).rstrip()
        if not value:
            return Failure(error=_validation_error("Secret value cannot be empty", "value"))

        return await self._create(name, value)

    async def edit(self, name: str) -> Result[None, DomainError]:
        """Edit an owned secret's value in the operator's editor.

        The trimmed result is written back only when it differs from the
        current value. An aborted or unchanged edit writes nothing.
        """
        if not name:
            return Failure(error=_validation_error("Secret name cannot be empty", "name"))

        resolved = await self._resolver.resolve_by_name(name, self._owner_filters)
        if isinstance(resolved, Failure):
            return resolved
        secret_id = resolved.value.id

        current = await self._backend.get_secret(secret_id)
        if isinstance(current, Failure):
            return current
        current_value = current.value.value

        edited = self._prompt.edit_secret_value(name, current_value)
        if edited is None:
            self._logger.info("Edit aborted", secret_name=name)
            return Success(value=None)

        new_value = edited.strip()
        if new_value == current_value:
            self._logger.info("Secret unchanged", secret_name=name)
            return Success(value=None)
        if not new_value:
            return Failure(error=_validation_error("Secret value cannot be empty", "value"))

        result = await self._backend.put_secret(secret_id, new_value)
        if isinstance(result, Success):
            self._logger.info("Secret updated", secret_name=name, secret_id=secret_id)
        return result

    async def generate(
        self,
        name: str,
        exclude_chars: str | None = None,
        length: int | None = None,
    ) -> Result[str, DomainError]:
        """Create an owned secret holding a backend-generated password.

        Returns:
            Success(password): The generated value.
            Failure(ConflictError): An owned secret already has this name.
            Failure(ValidationError): Empty name or non-positive length.
        """
        if length is not None and length < 1:
            return Failure(error=_validation_error("Length must be positive", "length"))

        available = await self._ensure_name_available(name)
        if isinstance(available, Failure):
            return available

        generated = await self._backend.generate_password(exclude_chars, length)
        if isinstance(generated, Failure):
            return generated
        password = generated.value

        created = await self._create(name, password)
        if isinstance(created, Failure):
            return created
        return Success(value=password)

    async def remove(self, name: str) -> Result[None, DomainError]:
        """Delete the owned secret named ``name``."""
        if not name:
            return Failure(error=_validation_error("Secret name cannot be empty", "name"))

        result = await self._resolver.delete_by_name(name, self._owner_filters)
        if isinstance(result, Success):
            self._logger.info("Secret removed", secret_name=name)
        return result

    async def _ensure_name_available(self, name: str) -> Result[None, DomainError]:
        """Fail unless no owned secret is named ``name``."""
        if not name:
            return Failure(error=_validation_error("Secret name cannot be empty", "name"))

        resolved = await self._resolver.resolve_by_name(name, self._owner_filters)
        match resolved:
            case Success(value=existing):
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.SECRET_ALREADY_EXISTS,
                        message=f"Secret already exists: {name}",
                        resource_type="Secret",
                        conflicting_field="name",
                        details={"secret_id": existing.id},
                    )
                )
            case Failure(error=NotFoundError()):
                return Success(value=None)
            case Failure(error=error):
                return Failure(error=error)

    async def _create(self, name: str, value: str) -> Result[str, DomainError]:
        result = await self._backend.create_secret(name, value, self._owner_tags)
        match result:
            case Success(value=secret_id):
                self._logger.info("Secret created", secret_name=name, secret_id=secret_id)
            case Failure(error=error):
                self._logger.warning(
                    "Secret creation failed", secret_name=name, error_code=error.code.value
                )
        return result
