"""Unit tests for first-name extraction and the redacted signer view."""

from dataclasses import fields
from datetime import datetime, timezone

import pytest

from src.domain.models.signer_view import SignerRecord, SignerView, extract_first_name


class TestExtractFirstName:
    """Tests for extract_first_name()."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("John Smith", "John"),
            ("  Madonna  ", "Madonna"),
            ("", ""),
            ("   ", ""),
            ("\t\n", ""),
            ("राज कुमार", "राज"),
            ("李 小龍", "李"),
            ("Zoë　Kravitz", "Zoë"),
        ],
    )
    def test_first_token(self, name: str, expected: str) -> None:
        assert extract_first_name(name) == expected


class TestSignerView:
    """Tests for SignerView.from_record()."""

    def test_from_record_redacts_to_first_token(self) -> None:
        confirmed_at = datetime(2026, 2, 1, 9, 30, tzinfo=timezone.utc)
        view = SignerView.from_record(
            SignerRecord(name="Ada Lovelace", confirmed_at=confirmed_at)
        )

        assert view.first_name == "Ada"
        assert view.verified is True
        assert view.confirmed_at == confirmed_at

    def test_view_has_exactly_three_fields(self) -> None:
        assert [f.name for f in fields(SignerView)] == [
            "first_name",
            "verified",
            "confirmed_at",
        ]
