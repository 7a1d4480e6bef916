"""Secrets infrastructure package.

This package provides secret backend adapters implementing
SecretBackendProtocol. All dependencies are wired through
aws_pass.core.container.

Architecture:
- BaseSecretsAdapter: Shared error constructors
- AWSSecretsManagerAdapter: AWS Secrets Manager, signed with MFA session credentials
- InMemorySecretsAdapter: Process-local fake (AWS_PASS_SECRETS_BACKEND=memory, tests)
- Use aws_pass.core.container.get_secret_backend() for dependency injection

Security:
- Every AWS call is signed with a short-lived session credential
- Secret values are never logged
"""

from aws_pass.infrastructure.secrets.aws_adapter import AWSSecretsManagerAdapter
from aws_pass.infrastructure.secrets.base_adapter import BaseSecretsAdapter
from aws_pass.infrastructure.secrets.memory_adapter import InMemorySecretsAdapter

__all__ = [
    "BaseSecretsAdapter",
    "AWSSecretsManagerAdapter",
    "InMemorySecretsAdapter",
]
