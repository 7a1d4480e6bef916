"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from aws_pass.core.container import get_password_store, get_logger

The container is organized into modules:
- infrastructure: Logging, local store, prompt, token service, credential
  cache, secret backend
- services: Secret resolver and password store
"""

from aws_pass.core.container.infrastructure import (
    get_credential_cache,
    get_local_store,
    get_logger,
    get_prompt,
    get_secret_backend,
    get_token_service,
)
from aws_pass.core.container.services import (
    get_password_store,
    get_secret_resolver,
)

__all__ = [
    "get_credential_cache",
    "get_local_store",
    "get_logger",
    "get_password_store",
    "get_prompt",
    "get_secret_backend",
    "get_secret_resolver",
    "get_token_service",
]
