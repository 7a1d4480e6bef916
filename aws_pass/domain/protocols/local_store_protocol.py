"""Local store protocol (port).

The store directory on the operator's machine: identity credentials written
by `init`, and the MFA device serial read on every credential refresh.
"""

from pathlib import Path
from typing import Protocol

from aws_pass.core.errors import DomainError
from aws_pass.core.result import Result
from aws_pass.domain.value_objects import IdentityCredentials


class LocalStoreProtocol(Protocol):
    """Protocol for the local store directory.

    Implementations:
        - LocalStoreFiles: files under Settings.store_dir
    """

    def initialize(
        self, identity: IdentityCredentials, mfa_serial: str
    ) -> Result[Path, DomainError]:
        """Create the store directory and persist identity and MFA serial.

        Returns:
            Success(store_dir) when written.
            Failure(ConfigurationError) if the directory exists and is not empty.
        """
        ...

    def read_mfa_serial(self) -> Result[str, DomainError]:
        """Read the MFA serial (first line, trimmed).

        Returns:
            Success(serial).
            Failure(ConfigurationError) naming the file if missing or empty.
        """
        ...

    def read_identity(self) -> Result[IdentityCredentials, DomainError]:
        """Read the long-lived identity credentials.

        Returns:
            Success(IdentityCredentials).
            Failure(ConfigurationError) naming the file if missing or malformed.
        """
        ...
