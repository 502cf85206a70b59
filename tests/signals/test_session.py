"""Tests for the session time filter."""

from datetime import datetime, time, timezone

import pytest

from rsv_app.signals.session import is_in_session

START = time(9, 30)
END = time(13, 30)


class TestIsInSession:
    """Test inclusive time-of-day session bounds."""

    @pytest.mark.parametrize("hms", [(9, 30, 0), (11, 0, 0), (13, 30, 0)])
    def test_inside(self, hms):
        assert is_in_session(datetime(2024, 3, 4, *hms), START, END) is True

    @pytest.mark.parametrize("hms", [(9, 29, 59), (13, 30, 1), (4, 0, 0), (16, 0, 0)])
    def test_outside(self, hms):
        assert is_in_session(datetime(2024, 3, 4, *hms), START, END) is False

    def test_sub_second_at_close(self):
        """Comparison is at whole-second resolution."""
        assert is_in_session(datetime(2024, 3, 4, 13, 30, 0, 500000), START, END) is True

    def test_date_independent(self):
        for day in (datetime(2020, 1, 1, 10, 0), datetime(2031, 7, 15, 10, 0)):
            assert is_in_session(day, START, END) is True

    def test_aware_timestamp_converted(self):
        """14:45 UTC is 09:45 in New York during standard time."""
        ts = datetime(2024, 3, 4, 14, 45, tzinfo=timezone.utc)
        assert is_in_session(ts, START, END, timezone="America/New_York") is True
        assert is_in_session(ts, START, END) is False
