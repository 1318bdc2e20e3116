"""
Application layer - Use cases and orchestration for petition signatures.

This layer contains:
- Use case implementations (intake, confirmation, signer listing)
- The confirmation token codec
- Port definitions (abstract interfaces for infrastructure)

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, api
"""
