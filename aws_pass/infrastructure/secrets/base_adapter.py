"""Base secrets adapter with shared functionality.

Provides the error constructors shared by AWSSecretsManagerAdapter and
InMemorySecretsAdapter, so both backends report missing ids and duplicate
names identically.
"""

from aws_pass.core.enums import ErrorCode
from aws_pass.core.errors import ConflictError, NotFoundError
from aws_pass.domain.errors import BackendUnavailableError


class BaseSecretsAdapter:
    """Base adapter with shared secrets functionality.

    Subclasses implement SecretBackendProtocol and set ``service``.
    """

    service: str = "secrets"

    def _not_found(self, secret_id: str) -> NotFoundError:
        """Error for an id the backend does not know (or has deleted)."""
        return NotFoundError(
            code=ErrorCode.SECRET_NOT_FOUND,
            message=f"Secret not found: {secret_id}",
            resource_type="Secret",
            resource_id=secret_id,
        )

    def _already_exists(self, name: str) -> ConflictError:
        """Error for a create with a name the backend already holds."""
        return ConflictError(
            code=ErrorCode.SECRET_ALREADY_EXISTS,
            message=f"Secret already exists: {name}",
            resource_type="Secret",
            conflicting_field="name",
        )

    def _pending_deletion(self, name: str) -> ConflictError:
        """Error for a create whose name still belongs to a secret scheduled for deletion."""
        return ConflictError(
            code=ErrorCode.SECRET_PENDING_DELETION,
            message=(
                f"Secret name is pending deletion: {name}. Restore it or wait for "
                "the recovery window to end; set AWS_PASS_FORCE_DELETE=true to "
                "remove secrets immediately"
            ),
            resource_type="Secret",
            conflicting_field="name",
        )

    def _request_failed(
        self, message: str, details: dict[str, str] | None = None
    ) -> BackendUnavailableError:
        """Error for a request the backend answered with a failure."""
        return BackendUnavailableError(
            code=ErrorCode.BACKEND_REQUEST_FAILED,
            message=message,
            service=self.service,
            details=details,
        )
