"""Listing filters and creation tags.

A SecretFilter is one predicate of a listing call: filters are ANDed across
a call and the values of a single filter are ORed. Keys follow the Secrets
Manager ListSecrets vocabulary (name, tag-key, tag-value, description, all).

A SecretTag is stamped on a secret at creation time. The ownership tag is
what scopes every listing to secrets this tool created.
"""

from dataclasses import dataclass

NAME_FILTER_KEY = "name"
TAG_KEY_FILTER_KEY = "tag-key"
TAG_VALUE_FILTER_KEY = "tag-value"
DESCRIPTION_FILTER_KEY = "description"
ALL_FILTER_KEY = "all"


@dataclass(frozen=True, slots=True)
class SecretTag:
    """Key/value pair attached to a secret at creation.

    Attributes:
        key: Tag key.
        value: Tag value.
    """

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class SecretFilter:
    """One listing predicate.

    Attributes:
        key: Filter key (name, tag-key, tag-value, description, all).
        values: Non-empty tuple of accepted values (ORed).
    """

    key: str
    values: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate filter after initialization.

        Raises:
            ValueError: If key is empty or values is empty.
        """
        if not self.key:
            raise ValueError("filter key cannot be empty")

        # Accept any iterable of strings; store as tuple so filters stay hashable
        object.__setattr__(self, "values", tuple(self.values))
        if not self.values:
            raise ValueError("filter values cannot be empty")

    @classmethod
    def name(cls, name: str) -> "SecretFilter":
        """Build the name filter for a single name."""
        return cls(NAME_FILTER_KEY, (name,))


def compose_filters(*groups: tuple[SecretFilter, ...]) -> tuple[SecretFilter, ...]:
    """Concatenate filter groups, dropping exact duplicates, keeping order.

    Args:
        *groups: Filter tuples in priority order.

    Returns:
        tuple[SecretFilter, ...]: Combined filters, first occurrence wins.

    Example:
        >>> compose_filters((SecretFilter.name("x"),), (SecretFilter.name("x"),))
        (SecretFilter(key='name', values=('x',)),)
    """
    seen: set[SecretFilter] = set()
    combined: list[SecretFilter] = []
    for group in groups:
        for secret_filter in group:
            if secret_filter in seen:
                continue
            seen.add(secret_filter)
            combined.append(secret_filter)
    return tuple(combined)
