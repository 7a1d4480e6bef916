"""Application services.

Usage:
    from aws_pass.application.services import PasswordStore
"""

from aws_pass.application.services.credential_cache import CredentialCache
from aws_pass.application.services.password_store import PasswordStore
from aws_pass.application.services.secret_resolver import SecretResolver

__all__ = ["CredentialCache", "PasswordStore", "SecretResolver"]
