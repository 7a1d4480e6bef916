"""Application service factories.

Wires SecretResolver and PasswordStore onto the infrastructure singletons.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from aws_pass.core.config import get_settings
from aws_pass.core.container.infrastructure import (
    get_local_store,
    get_logger,
    get_prompt,
    get_secret_backend,
)

if TYPE_CHECKING:
    from aws_pass.application.services.password_store import PasswordStore
    from aws_pass.application.services.secret_resolver import SecretResolver


@lru_cache()
def get_secret_resolver() -> "SecretResolver":
    """Get the name resolver singleton over the configured backend."""
    from aws_pass.application.services.secret_resolver import SecretResolver

    return SecretResolver(backend=get_secret_backend(), logger=get_logger())


@lru_cache()
def get_password_store() -> "PasswordStore":
    """Get the password store singleton.

    Usage:
        store = get_password_store()
        result = await store.show("github")
    """
    from aws_pass.application.services.password_store import PasswordStore

    settings = get_settings()
    return PasswordStore(
        resolver=get_secret_resolver(),
        backend=get_secret_backend(),
        local_store=get_local_store(),
        prompt=get_prompt(),
        logger=get_logger(),
        owner_tags=settings.owner_tags,
        owner_filters=settings.owner_filters,
    )
