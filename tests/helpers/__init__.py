"""Test helpers for petition signature tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    make_petition: Petition factory with sensible defaults
    make_signature: Unconfirmed signature factory

Usage:
    from tests.helpers import FakeTimeAuthority, make_petition
"""

from tests.helpers.factories import make_petition, make_signature
from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = ["FakeTimeAuthority", "make_petition", "make_signature"]
