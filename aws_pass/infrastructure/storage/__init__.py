"""Local store infrastructure package."""

from aws_pass.infrastructure.storage.local_store import LocalStoreFiles

__all__ = ["LocalStoreFiles"]
