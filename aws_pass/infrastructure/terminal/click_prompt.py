"""Terminal prompt adapter.

Implements OperatorPromptProtocol with click. Prompts are written to stderr
so stdout carries only command output (secret values, names, ids).

File: click_prompt.py → class ClickPromptAdapter (PEP 8 naming)
"""

import sys

import click


class ClickPromptAdapter:
    """Interactive operator input through click.

    On a terminal, secret values are read with hidden input and must be typed
    twice. When stdin is piped, the first line of stdin is the value.
    """

    def prompt_mfa_code(self) -> str:
        """Ask for the current MFA one-time code."""
        return click.prompt("MFA token code", err=True)

    def read_secret_value(self, name: str) -> str:
        """Read the value of a new secret.

        Hidden input goes through getpass, which reads the controlling
        terminal rather than stdin, so piped input is read directly.
        """
        if not sys.stdin.isatty():
            return click.get_text_stream("stdin").readline()

        return click.prompt(
            f"Value for {name}",
            hide_input=True,
            confirmation_prompt=True,
            err=True,
        )

    def edit_secret_value(self, name: str, current: str) -> str | None:
        """Open ``current`` in the operator's editor ($VISUAL / $EDITOR).

        Returns:
            str | None: Edited text, None when the editor exited without
                saving or the text is unchanged.
        """
        edited = click.edit(current, extension=".txt", require_save=True)
        if edited is None or edited == current:
            return None
        return edited
