"""Domain layer - Pure password store concepts.

Structure:
- value_objects/: Credentials, secret records, filters and tags (immutable)
- protocols/: Ports for the secret backend, token service, prompt and logger
- errors/: Domain error types (ambiguity, configuration, backend failures)

The domain layer has NO dependencies on boto3, click or structlog.
"""
