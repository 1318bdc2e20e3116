"""System clock implementation of TimeAuthorityProtocol."""

import time
from datetime import datetime, timezone

from src.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Time authority backed by the host clock.

    All timestamps are timezone-aware UTC.
    """

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def utcnow(self) -> datetime:
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        return time.monotonic()
