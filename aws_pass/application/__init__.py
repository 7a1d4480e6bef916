"""Application layer - Use cases and orchestration.

Structure:
- services/: CredentialCache, SecretResolver and the PasswordStore orchestrator

The application layer composes domain ports; it never imports infrastructure.
"""
