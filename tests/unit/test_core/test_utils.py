"""Unit tests for time and code helpers."""
from datetime import datetime, timezone, timedelta

import pytest

from app.core.constants import LECTURE_CODE_MIN, LECTURE_CODE_MAX
from app.core.exceptions import InvalidArgumentError
from app.core.utils import (
    make_lecture_code,
    now_ms,
    to_utc,
    to_epoch_ms,
    parse_iso_to_ms,
    coerce_timestamp_ms,
)


@pytest.mark.unit
class TestLectureCode:
    """Test lecture code draws."""

    def test_code_in_range(self):
        for _ in range(500):
            assert LECTURE_CODE_MIN <= make_lecture_code() <= LECTURE_CODE_MAX


@pytest.mark.unit
class TestTimestamps:
    """Test timestamp conversions."""

    def test_now_ms_is_milliseconds(self):
        before = int(datetime.now(timezone.utc).timestamp() * 1000)
        value = now_ms()
        after = int(datetime.now(timezone.utc).timestamp() * 1000)

        assert before <= value <= after

    def test_to_utc_naive(self):
        naive = datetime(2025, 1, 1, 10, 0)

        assert to_utc(naive).tzinfo == timezone.utc
        assert to_utc(naive).hour == 10

    def test_to_utc_converts_offset(self):
        aware = datetime(2025, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

        assert to_utc(aware).hour == 10

    def test_to_epoch_ms(self):
        assert to_epoch_ms(datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)) == 1000

    @pytest.mark.parametrize("value,expected", [
        ("2025-01-01T10:00:00.000Z", 1735725600000),
        ("2025-01-01T10:00:00Z", 1735725600000),
        ("2025-01-01T12:00:00+02:00", 1735725600000),
        ("2025-01-01T10:00:00", 1735725600000),
        ("2025-01-01T10:00:00.250Z", 1735725600250),
    ])
    def test_parse_iso(self, value, expected):
        assert parse_iso_to_ms(value) == expected

    @pytest.mark.parametrize("value", ["", "tomorrow", "2025-13-01T00:00:00Z", None, 12])
    def test_parse_iso_invalid(self, value):
        with pytest.raises(InvalidArgumentError, match="Invalid start_time"):
            parse_iso_to_ms(value)

    def test_coerce_accepts_epoch_and_iso(self):
        assert coerce_timestamp_ms(1735725600000) == 1735725600000
        assert coerce_timestamp_ms(1735725600000.0) == 1735725600000
        assert coerce_timestamp_ms("2025-01-01T10:00:00Z") == 1735725600000

    @pytest.mark.parametrize("value", [True, 1.5, [], {}])
    def test_coerce_rejects_other_types(self, value):
        with pytest.raises(InvalidArgumentError):
            coerce_timestamp_ms(value)
