"""Credential provider protocol (port).

Anything able to hand out a currently-valid session credential. The AWS
secret backend depends on this port, not on the cache implementation.
"""

from typing import Protocol

from aws_pass.core.errors import DomainError
from aws_pass.core.result import Result
from aws_pass.domain.value_objects import SessionCredential


class CredentialProviderProtocol(Protocol):
    """Protocol for session credential suppliers."""

    async def get_credential(self) -> Result[SessionCredential, DomainError]:
        """Return a credential that is valid now.

        May prompt the operator for an MFA code when a refresh is needed.
        """
        ...
