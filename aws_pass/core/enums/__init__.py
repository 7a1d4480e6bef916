"""Core enums package.

Usage:
    from aws_pass.core.enums import ErrorCode, Environment
"""

from aws_pass.core.enums.environment import Environment
from aws_pass.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
