"""Long-lived identity credentials value object.

The access key pair of an IAM user allowed to call GetSessionToken. Stored in
the local store directory by `init` and only ever sent to the token service.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityCredentials:
    """Long-lived access key pair.

    Attributes:
        access_key_id: IAM access key id.
        secret_access_key: IAM secret access key (excluded from repr).
    """

    access_key_id: str
    secret_access_key: str = field(repr=False)

    def __post_init__(self) -> None:
        """Validate identity credentials.

        Raises:
            ValueError: If either part is empty.
        """
        if not self.access_key_id:
            raise ValueError("access_key_id cannot be empty")
        if not self.secret_access_key:
            raise ValueError("secret_access_key cannot be empty")
