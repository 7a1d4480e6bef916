"""Runtime environment types.

Used by Settings to pick the log renderer and by tests to opt into the
in-memory adapters.

Environments:
- DEVELOPMENT: Interactive use from a workstation (default)
- TESTING: Automated test execution
- CI: Continuous integration runs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
