"""Secrets management error types.

Used when name resolution finds more than one candidate.

Usage:
    from aws_pass.domain.errors import AmbiguousSecretError
    from aws_pass.core.enums import ErrorCode
    from aws_pass.core.result import Failure

    return Failure(error=AmbiguousSecretError(
        code=ErrorCode.SECRET_NAME_AMBIGUOUS,
        message="2 secrets named github",
        name="github",
        secret_ids=(arn_a, arn_b),
    ))
"""

from dataclasses import dataclass

from aws_pass.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretsError(DomainError):
    """Secrets management failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        details: Additional context.
    """

    pass  # Inherits all fields from DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AmbiguousSecretError(SecretsError):
    """A name resolved to more than one secret.

    Store invariant violation. Never recovered by picking one of the
    candidates, since a later put or delete would hit the wrong secret.

    Attributes:
        name: The name that was resolved.
        secret_ids: Ids of every matching secret.
    """

    name: str
    secret_ids: tuple[str, ...]
