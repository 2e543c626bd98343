import pytest
from dining_status.core import config
from dining_status.schemas import DiningStatus
from dining_status.services.classifier import derive_status, is_open


class TestDeriveStatus:
    """Unit tests for status classification precedence"""

    def test_open_label_with_low_activity(self):
        assert derive_status("Open - closes at 9pm", 40) == DiningStatus.OPEN

    def test_closed_beats_high_activity(self):
        assert derive_status("CLOSED for winter break", 90) == DiningStatus.CLOSED

    def test_closed_beats_open_text(self):
        assert derive_status("Open soon, currently closed", None) == DiningStatus.CLOSED

    def test_activity_without_label_is_unknown(self):
        assert derive_status(None, 80) == DiningStatus.UNKNOWN
        assert derive_status("", 95) == DiningStatus.UNKNOWN

    def test_high_activity_makes_any_label_busy(self):
        assert derive_status("Hours vary today", 75) == DiningStatus.BUSY
        assert derive_status("Open now", 70) == DiningStatus.BUSY

    def test_just_below_threshold(self):
        assert derive_status("Open now", 69) == DiningStatus.OPEN
        assert derive_status("Hours vary today", 69) == DiningStatus.UNKNOWN

    def test_open_text_case_insensitive(self):
        assert derive_status("OPEN", None) == DiningStatus.OPEN
        assert derive_status("Reopens Monday", None) == DiningStatus.OPEN

    def test_unrecognised_label(self):
        assert derive_status("Brunch service", 10) == DiningStatus.UNKNOWN

    def test_threshold_is_configurable(self):
        config.settings.BUSY_THRESHOLD = 50
        assert derive_status("Open", 55) == DiningStatus.BUSY


class TestIsOpen:
    """Unit tests for the derived open flag"""

    @pytest.mark.parametrize("status,expected", [
        (DiningStatus.OPEN, True),
        (DiningStatus.BUSY, True),
        (DiningStatus.CLOSED, False),
        (DiningStatus.UNKNOWN, False),
    ])
    def test_open_flag(self, status, expected):
        assert is_open(status) is expected
