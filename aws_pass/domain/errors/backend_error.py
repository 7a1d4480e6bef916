"""Remote backend error types.

Used when Secrets Manager or STS cannot be reached, or answers with an error
that has no more specific mapping (not found, conflict, authentication).
"""

from dataclasses import dataclass

from aws_pass.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class BackendUnavailableError(DomainError):
    """Transport or service failure from a remote backend.

    Attributes:
        code: BACKEND_UNAVAILABLE (transport) or BACKEND_REQUEST_FAILED (service).
        message: Human-readable message.
        service: Backend that failed (secretsmanager, sts, memory).
        details: Additional context (AWS error code).
    """

    service: str
