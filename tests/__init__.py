"""Test suite for aws-pass.

- unit/: Unit tests for every layer; AWS calls are served by moto or the
  in-memory backend, so no network or real credentials are needed.
"""
