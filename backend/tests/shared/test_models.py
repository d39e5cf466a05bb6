"""Tests for shared/models.py."""

from datetime import datetime, timezone
from typing import Optional

from shared.models import CamelModel, SuccessResponse


class Sample(CamelModel):
    couple_id: str
    user1_mood: Optional[str] = None
    created_at: datetime


class TestCamelModel:
    def test_accepts_camel_case_keys(self):
        sample = Sample.model_validate(
            {"coupleId": "c1", "user1Mood": "😊", "createdAt": "2026-03-04T12:00:00Z"}
        )
        assert sample.couple_id == "c1"
        assert sample.user1_mood == "😊"

    def test_accepts_snake_case_keys(self):
        sample = Sample(couple_id="c1", created_at=datetime(2026, 3, 4, tzinfo=timezone.utc))
        assert sample.couple_id == "c1"

    def test_to_document_uses_camel_case_and_json_values(self):
        sample = Sample(couple_id="c1", created_at=datetime(2026, 3, 4, tzinfo=timezone.utc))
        document = sample.to_document()

        assert document["coupleId"] == "c1"
        assert document["user1Mood"] is None
        assert isinstance(document["createdAt"], str)

    def test_ignores_unknown_keys(self):
        sample = Sample.model_validate(
            {"coupleId": "c1", "createdAt": "2026-03-04T12:00:00Z", "legacy": True}
        )
        assert not hasattr(sample, "legacy")


def test_success_response_defaults_to_true():
    assert SuccessResponse().to_document() == {"success": True}
