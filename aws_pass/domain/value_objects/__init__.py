"""Domain value objects.

Usage:
    from aws_pass.domain.value_objects import SecretFilter, SessionCredential
"""

from aws_pass.domain.value_objects.identity_credentials import IdentityCredentials
from aws_pass.domain.value_objects.secret_filter import (
    SecretFilter,
    SecretTag,
    compose_filters,
)
from aws_pass.domain.value_objects.secret_record import (
    SecretsPage,
    SecretSummary,
    SecretValue,
)
from aws_pass.domain.value_objects.session_credential import SessionCredential

__all__ = [
    "IdentityCredentials",
    "SecretFilter",
    "SecretTag",
    "SecretSummary",
    "SecretValue",
    "SecretsPage",
    "SessionCredential",
    "compose_filters",
]
