"""Time Authority Protocol - interface for consistent timestamp provisioning.

Services that need the current time inject a TimeAuthorityProtocol
implementation instead of calling datetime.now() directly, so token expiry
and confirmation timestamps are deterministic under test.

For production:
    Use SystemTimeAuthority from src/application/services/time_authority_service.py

For testing:
    Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority."""

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC)."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time.

        Returns:
            Current datetime in UTC timezone.
        """
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Returns:
            Monotonically increasing float value (in seconds). Only
            differences between values are meaningful.
        """
        ...
