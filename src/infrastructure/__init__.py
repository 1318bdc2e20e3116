"""
Infrastructure layer - External adapters for petition signatures.

This layer contains:
- PostgreSQL repositories (petitions, signatures)
- HTTP email dispatcher and credential verifier
- In-memory stubs for development and tests
- Structured logging and Prometheus metrics

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

__all__: list[str] = []
