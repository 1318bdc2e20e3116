"""Configuration module for the petition signatures service.

Available Configurations:
- SignatureConfig: tokens, pagination, catalogue size and collaborator endpoints
"""

from src.config.signature_config import (
    DEFAULT_SIGNATURE_CONFIG,
    TEST_SIGNATURE_CONFIG,
    SignatureConfig,
)

__all__ = [
    "SignatureConfig",
    "DEFAULT_SIGNATURE_CONFIG",
    "TEST_SIGNATURE_CONFIG",
]
