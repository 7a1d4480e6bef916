"""Domain protocols (ports).

Usage:
    from aws_pass.domain.protocols import SecretBackendProtocol
"""

from aws_pass.domain.protocols.credential_provider_protocol import (
    CredentialProviderProtocol,
)
from aws_pass.domain.protocols.local_store_protocol import LocalStoreProtocol
from aws_pass.domain.protocols.logger_protocol import LoggerProtocol
from aws_pass.domain.protocols.operator_prompt_protocol import OperatorPromptProtocol
from aws_pass.domain.protocols.secret_backend_protocol import SecretBackendProtocol
from aws_pass.domain.protocols.token_service_protocol import TokenServiceProtocol

__all__ = [
    "CredentialProviderProtocol",
    "LocalStoreProtocol",
    "LoggerProtocol",
    "OperatorPromptProtocol",
    "SecretBackendProtocol",
    "TokenServiceProtocol",
]
