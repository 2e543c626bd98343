from datetime import datetime, timezone

import pytest
from pydantic import ValidationError
from dining_status.halls import DINING_HALLS, build_activity_url, get_hall
from dining_status.schemas import DiningHallStatus, DiningStatus, DiningStatusResponse

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class TestSchemaValidation:
    """Unit tests for Pydantic schema validation"""

    def test_defaults(self):
        record = DiningHallStatus(id="a", name="A", page_url="https://x", last_updated=NOW)
        assert record.status == DiningStatus.UNKNOWN
        assert record.is_open is False
        assert record.status_text is None
        assert record.activity_level is None
        assert record.error is None

    def test_activity_level_range(self):
        with pytest.raises(ValidationError):
            DiningHallStatus(id="a", name="A", page_url="https://x", last_updated=NOW, activity_level=101)
        with pytest.raises(ValidationError):
            DiningHallStatus(id="a", name="A", page_url="https://x", last_updated=NOW, activity_level=-1)

    def test_status_must_be_known(self):
        with pytest.raises(ValidationError):
            DiningHallStatus(id="a", name="A", page_url="https://x", last_updated=NOW, status="packed")

    def test_records_are_immutable(self):
        record = DiningHallStatus(id="a", name="A", page_url="https://x", last_updated=NOW)
        with pytest.raises(ValidationError):
            record.status = DiningStatus.OPEN

    def test_camel_case_serialization_omits_absent_fields(self):
        record = DiningHallStatus(
            id="a",
            name="A",
            page_url="https://x",
            status_text="Open",
            status=DiningStatus.OPEN,
            is_open=True,
            last_updated=NOW,
        )
        response = DiningStatusResponse(halls=[record], fetched_at=NOW)

        data = response.model_dump(mode="json", by_alias=True, exclude_none=True)
        hall = data["halls"][0]
        assert set(hall) == {"id", "name", "pageUrl", "statusText", "status", "isOpen", "lastUpdated"}
        assert hall["status"] == "open"
        assert data["fetchedAt"].startswith("2026-10-19T12:00:00")


class TestHallTable:
    """Unit tests for the static dining hall table"""

    def test_ids_are_unique(self):
        ids = [hall.id for hall in DINING_HALLS]
        assert len(ids) == len(set(ids)) == 4

    def test_activity_url(self):
        hall = get_hall("bruin-cafe")
        assert hall.activity_id == 867
        assert hall.activity_url == build_activity_url(867)
        assert hall.activity_url.endswith("activity_ajax.php?location_id=867")

    def test_unknown_hall(self):
        assert get_hall("covel") is None

    def test_halls_are_immutable(self):
        with pytest.raises(AttributeError):
            DINING_HALLS[0].page_url = "https://elsewhere"
