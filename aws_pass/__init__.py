"""aws-pass: a password store backed by AWS Secrets Manager with MFA-gated sessions."""

__version__ = "0.1.0"
