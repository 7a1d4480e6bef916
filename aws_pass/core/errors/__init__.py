"""Core errors package.

Usage:
    from aws_pass.core.errors import DomainError, ValidationError, NotFoundError
"""

from aws_pass.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from aws_pass.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
]
