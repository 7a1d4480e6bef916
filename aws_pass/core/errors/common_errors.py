"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures (empty name, bad length)
- NotFoundError: Name resolved to zero secrets, or id unknown to backend
- ConflictError: Name already taken by an owned secret
- AuthenticationError: Token service rejected the identity or MFA code

Usage:
    from aws_pass.core.errors import NotFoundError
    from aws_pass.core.enums import ErrorCode
    from aws_pass.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.SECRET_NOT_FOUND,
        message="Secret not found: github",
        resource_type="Secret",
        resource_id="github",
    ))
"""

from dataclasses import dataclass

from aws_pass.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Secret).
        resource_id: Name or id that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate name).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (name).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (rejected MFA code, invalid identity).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        details: Additional context.
    """

    pass
