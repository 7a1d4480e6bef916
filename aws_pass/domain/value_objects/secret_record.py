"""Secret records returned by the secret backend.

SecretSummary is a listing entry (no value). SecretValue is what a
get-by-id returns. SecretsPage is one bounded batch of a listing.
"""

from dataclasses import dataclass, field

from aws_pass.domain.value_objects.secret_filter import SecretTag


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretSummary:
    """Listing entry for a secret.

    Attributes:
        id: Opaque backend identifier (ARN for Secrets Manager).
        name: Human-assigned name.
        tags: Tags in backend order.
        description: Optional description text.
    """

    id: str
    name: str
    tags: tuple[SecretTag, ...] = ()
    description: str | None = None

    def has_tag(self, key: str, value: str) -> bool:
        """Check whether the secret carries the exact tag."""
        return SecretTag(key, value) in self.tags


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretValue:
    """Secret with its current value.

    Attributes:
        id: Opaque backend identifier.
        name: Human-assigned name.
        value: Current secret string.
    """

    id: str
    name: str
    value: str = field(repr=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretsPage:
    """One page of a listing.

    Attributes:
        items: Summaries on this page, in backend order.
        next_token: Cursor for the next page, None when terminal.
    """

    items: tuple[SecretSummary, ...]
    next_token: str | None = None

    @property
    def is_last(self) -> bool:
        """True when no further page exists."""
        return self.next_token is None
