"""
Tests for VTEC timestamp decoding helpers.
"""

import pytest
from datetime import datetime, timedelta, timezone

from weatheralerts.utils.timezone import DEFAULT_CENTURY_PIVOT, TimezoneHelper


class TestVTECTimestampParsing:
    """Tests for VTEC timestamp parsing edge cases."""

    def test_parse_valid_timestamp(self):
        """Test parsing a valid VTEC timestamp."""
        result = TimezoneHelper.parse_vtec_timestamp("250120T1530Z")

        assert result is not None
        assert result.year == 2025
        assert result.month == 1
        assert result.day == 20
        assert result.hour == 15
        assert result.minute == 30
        assert result.tzinfo == timezone.utc

    def test_parse_undefined_timestamp(self):
        """Test that 000000T0000Z returns None."""
        assert TimezoneHelper.parse_vtec_timestamp("000000T0000Z") is None

    def test_parse_year_2000(self):
        """Test that a 00 year with a real date is not treated as undefined."""
        result = TimezoneHelper.parse_vtec_timestamp("000512T0600Z")

        assert result == datetime(2000, 5, 12, 6, 0, tzinfo=timezone.utc)

    def test_parse_timestamp_without_z(self):
        """Test parsing timestamp without trailing Z."""
        result = TimezoneHelper.parse_vtec_timestamp("250120T1530")

        assert result is not None
        assert result.hour == 15

    @pytest.mark.parametrize("value", ["", "invalid", "251320T1530Z", "250230T1530Z", "250120T2460Z"])
    def test_parse_invalid_timestamp(self, value):
        """Test that malformed or impossible timestamps return None."""
        assert TimezoneHelper.parse_vtec_timestamp(value) is None


class TestCenturyPivot:
    """Tests for two-digit year expansion."""

    def test_default_pivot(self):
        """Test the default pivot boundary."""
        assert DEFAULT_CENTURY_PIVOT == 70
        assert TimezoneHelper.expand_two_digit_year(69) == 2069
        assert TimezoneHelper.expand_two_digit_year(70) == 1970
        assert TimezoneHelper.expand_two_digit_year(0) == 2000

    def test_custom_pivot(self):
        """Test an explicit pivot."""
        assert TimezoneHelper.expand_two_digit_year(30, century_pivot=20) == 1930
        assert TimezoneHelper.expand_two_digit_year(99, century_pivot=100) == 2099

    def test_out_of_range_year(self):
        """Test that only two-digit years are accepted."""
        with pytest.raises(ValueError):
            TimezoneHelper.expand_two_digit_year(100)

    def test_timestamp_uses_pivot(self):
        """Test that parse_vtec_timestamp honours the pivot argument."""
        result = TimezoneHelper.parse_vtec_timestamp("150522T2300Z", century_pivot=10)

        assert result.year == 1915


class TestEpochMillis:
    """Tests for epoch millisecond conversion."""

    def test_epoch_is_zero(self):
        """Test the epoch itself."""
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)

        assert TimezoneHelper.to_epoch_millis(epoch) == 0

    def test_known_instant(self):
        """Test a known instant."""
        dt = datetime(2015, 5, 22, 23, 0, tzinfo=timezone.utc)

        assert TimezoneHelper.to_epoch_millis(dt) == 1432335600000

    def test_naive_treated_as_utc(self):
        """Test that naive datetimes are assumed UTC."""
        assert TimezoneHelper.to_epoch_millis(datetime(2015, 5, 22, 23, 0)) == 1432335600000

    def test_offset_converted(self):
        """Test that non-UTC offsets are normalised."""
        cdt = timezone(timedelta(hours=-5))
        dt = datetime(2015, 5, 22, 18, 0, tzinfo=cdt)

        assert TimezoneHelper.to_epoch_millis(dt) == 1432335600000

    def test_before_epoch(self):
        """Test negative values before 1970."""
        dt = datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=timezone.utc)

        assert TimezoneHelper.to_epoch_millis(dt) == -500

    def test_from_epoch_millis(self):
        """Test conversion back to an aware datetime."""
        result = TimezoneHelper.from_epoch_millis(1432335600000)

        assert result == datetime(2015, 5, 22, 23, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc
