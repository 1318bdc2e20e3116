"""Unit tests for the email dispatcher and credential verifier stubs."""

from uuid import uuid4

import pytest

from src.application.ports.email_dispatcher import EmailDispatchError
from src.infrastructure.stubs import (
    ConfirmationEmailDispatcherStub,
    CredentialVerifierStub,
    SentConfirmationEmail,
)


class TestConfirmationEmailDispatcherStub:
    async def test_captures_messages(self) -> None:
        stub = ConfirmationEmailDispatcherStub()

        await stub.send("jane@example.org", "Protect the river", "tok-1")
        await stub.send("ada@example.org", "Protect the river", "tok-2")

        assert stub.sent[0] == SentConfirmationEmail(
            email="jane@example.org", petition_title="Protect the river", token="tok-1"
        )
        assert stub.last_token == "tok-2"

    async def test_failure_mode(self) -> None:
        stub = ConfirmationEmailDispatcherStub(fail=True)

        with pytest.raises(EmailDispatchError):
            await stub.send("jane@example.org", "Protect the river", "tok")
        assert stub.sent == []
        assert stub.last_token is None


class TestCredentialVerifierStub:
    async def test_known_and_unknown(self) -> None:
        user_id = uuid4()
        stub = CredentialVerifierStub()
        stub.register("good", user_id)

        identity = await stub.verify("good")

        assert identity is not None
        assert identity.user_id == user_id
        assert await stub.verify("bad") is None
