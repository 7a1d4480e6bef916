"""Terminal interaction adapters.

Usage:
    from aws_pass.infrastructure.terminal import ClickPromptAdapter
"""

from aws_pass.infrastructure.terminal.click_prompt import ClickPromptAdapter

__all__ = ["ClickPromptAdapter"]
