"""Logging infrastructure package.

Use aws_pass.core.container.get_logger() for dependency injection.
"""

from aws_pass.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
