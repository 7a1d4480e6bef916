"""Local configuration error types.

Used when a store file (identity credentials, MFA serial) is missing or
malformed, or when init would overwrite an existing store.
"""

from dataclasses import dataclass

from aws_pass.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ConfigurationError(DomainError):
    """Local configuration failure.

    Attributes:
        code: ErrorCode enum (CONFIG_FILE_MISSING, CONFIG_FILE_INVALID, ...).
        message: Human-readable message naming the file.
        path: Path of the offending file or directory.
        details: Additional context.
    """

    path: str
