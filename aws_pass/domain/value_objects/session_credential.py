"""Short-lived session credential value object.

Issued by the token service after an MFA-gated exchange and held by the
credential cache until it expires.

Usage:
    from aws_pass.domain.value_objects import SessionCredential

    credential = SessionCredential(
        access_key_id="ASIA...",
        secret_access_key="...",
        session_token="...",
        expires_at=datetime.now(UTC) + timedelta(seconds=900),
    )

    if credential.is_expired(datetime.now(UTC)):
        # Need to prompt for a new MFA code
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta


@dataclass(frozen=True)
class SessionCredential:
    """Time-bounded access key, secret key and session token.

    Attributes:
        access_key_id: Temporary access key id.
        secret_access_key: Temporary secret access key.
        session_token: Session token proving the MFA exchange.
        expires_at: Absolute, timezone-aware expiration instant.

    Immutability:
        Frozen dataclass. A refresh replaces the whole credential, so callers
        holding a reference never observe it change.

    Security:
        repr/str never include the secret access key or the session token.
    """

    access_key_id: str
    secret_access_key: str
    session_token: str
    expires_at: datetime

    def __post_init__(self) -> None:
        """Validate credential after initialization.

        Raises:
            ValueError: If a key is empty or expires_at is naive.
        """
        if not self.access_key_id:
            raise ValueError("access_key_id cannot be empty")

        if not self.secret_access_key:
            raise ValueError("secret_access_key cannot be empty")

        if self.expires_at.tzinfo is None:
            raise ValueError("expires_at must be timezone-aware")

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the credential is no longer usable.

        A credential expiring exactly at ``now`` counts as expired.

        Args:
            now: Reference instant. Defaults to the current UTC time.

        Returns:
            bool: True if ``expires_at <= now``.
        """
        if now is None:
            now = datetime.now(UTC)
        return self.expires_at <= now

    def time_until_expiry(self, now: datetime | None = None) -> timedelta:
        """Get time remaining until the credential expires.

        Returns:
            timedelta: Remaining lifetime, zero if already expired.
        """
        if now is None:
            now = datetime.now(UTC)
        remaining = self.expires_at - now
        if remaining.total_seconds() < 0:
            return timedelta(seconds=0)
        return remaining

    def __repr__(self) -> str:
        """Return repr for debugging without secret material."""
        return (
            f"SessionCredential("
            f"access_key_id={self.access_key_id}, "
            f"expires_at={self.expires_at.isoformat()})"
        )

    def __str__(self) -> str:
        """Return human-readable string without secret material."""
        status = "expired" if self.is_expired() else "valid"
        return f"SessionCredential({self.access_key_id}, {status})"
