"""Domain errors package.

Usage:
    from aws_pass.domain.errors import AmbiguousSecretError, ConfigurationError
"""

from aws_pass.domain.errors.backend_error import BackendUnavailableError
from aws_pass.domain.errors.configuration_error import ConfigurationError
from aws_pass.domain.errors.secrets_error import AmbiguousSecretError, SecretsError

__all__ = [
    "AmbiguousSecretError",
    "BackendUnavailableError",
    "ConfigurationError",
    "SecretsError",
]
