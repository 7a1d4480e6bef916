"""Operator prompt protocol (port).

Terminal interaction needed by the application layer: the MFA code during a
credential refresh, the value of an inserted secret and the editor session
behind `edit`.
"""

from typing import Protocol


class OperatorPromptProtocol(Protocol):
    """Protocol for interactive operator input."""

    def prompt_mfa_code(self) -> str:
        """Ask for the current MFA one-time code."""
        ...

    def read_secret_value(self, name: str) -> str:
        """Ask for the value of a new secret.

        Args:
            name: Name of the secret being inserted (shown in the prompt).
        """
        ...

    def edit_secret_value(self, name: str, current: str) -> str | None:
        """Open the current value for modification.

        Args:
            name: Name of the secret being edited.
            current: Current value to pre-fill.

        Returns:
            str | None: Edited text, or None if the edit was aborted or
                left the text unchanged.
        """
        ...
