"""Token service infrastructure package.

Adapters implementing TokenServiceProtocol:
- AWSTokenServiceAdapter: AWS STS GetSessionToken (production)
- InMemoryTokenServiceAdapter: offline issuer paired with the memory backend

Use aws_pass.core.container.get_token_service() for dependency injection.
"""

from aws_pass.infrastructure.sts.aws_adapter import AWSTokenServiceAdapter
from aws_pass.infrastructure.sts.memory_adapter import InMemoryTokenServiceAdapter

__all__ = [
    "AWSTokenServiceAdapter",
    "InMemoryTokenServiceAdapter",
]
