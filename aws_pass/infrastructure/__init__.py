"""Infrastructure layer - Adapters and external integrations.

Implementations of domain protocols (ports):
- secrets/: AWS Secrets Manager and in-memory secret backends
- sts/: AWS STS and in-memory token services
- logging/: structlog console adapter
- storage/: Local store directory files
- terminal/: click-based operator prompt

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
