"""Tests for wire token conversion."""

from datetime import date, datetime, timedelta, timezone

import pytest

from fred_graph.data import mapping
from fred_graph.data.client import FredClient
from fred_graph.data.mapping import (
    EARLIEST_DATE,
    LATEST_DATE,
    fred_today,
    parse_bool,
    parse_fred_date,
    parse_fred_datetime,
    parse_frequency,
    parse_int,
    parse_value,
    to_fred_date,
    to_wire,
)
from fred_graph.exceptions import ParseError
from fred_graph.models import Frequency, OutputType, SortOrder
from fred_samples import MockDownloader, categories


class TestDates:
    def test_parse_date(self):
        assert parse_fred_date("2013-08-14") == date(2013, 8, 14)

    @pytest.mark.parametrize("token", ["2013-8-14", "20130814", "2013-08-14T00:00:00", "", "2013-02-30"])
    def test_parse_date_rejects_other_shapes(self, token):
        with pytest.raises(ParseError):
            parse_fred_date(token)

    def test_format_date_pads_year(self):
        assert to_fred_date(date(1776, 7, 4)) == "1776-07-04"
        assert to_fred_date(LATEST_DATE) == "9999-12-31"
        assert EARLIEST_DATE == date(1776, 7, 4)

    def test_parse_datetime_keeps_fixed_offset(self):
        parsed = parse_fred_datetime("2012-04-13 08:53:00-05")
        assert parsed == datetime(2012, 4, 13, 8, 53, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert parsed.hour == 8
        assert parsed.minute == 53
        assert parsed.utcoffset() == timedelta(hours=-5)

    def test_parse_datetime_positive_offset(self):
        parsed = parse_fred_datetime("2013-07-31 09:26:16+01")
        assert parsed.utcoffset() == timedelta(hours=1)

    def test_parse_datetime_rejects_missing_offset(self):
        with pytest.raises(ParseError):
            parse_fred_datetime("2012-04-13 08:53:00")


class TestScalars:
    def test_parse_int(self):
        assert parse_int(" 42 ") == 42
        with pytest.raises(ParseError):
            parse_int("4.2", "popularity")

    def test_parse_bool(self):
        assert parse_bool("true") is True
        assert parse_bool("False") is False
        with pytest.raises(ParseError):
            parse_bool("yes")

    @pytest.mark.parametrize(
        "token", [None, "", "  ", ".", "n/a", "nan", "inf", "-Infinity", "1_000", "1e999", "0x10"]
    )
    def test_missing_values_are_none(self, token):
        assert parse_value(token) is None

    def test_numeric_value(self):
        assert parse_value("1.5") == 1.5
        assert parse_value("0") == 0.0
        assert parse_value(" -2.5e3 ") == -2500.0
        assert parse_value(".5") == 0.5


class TestFrequency:
    @pytest.mark.parametrize("frequency", [f for f in Frequency if f is not Frequency.NONE])
    def test_round_trip(self, frequency):
        assert parse_frequency(to_wire(frequency)) is frequency

    def test_fourteen_codes(self):
        assert len([f for f in Frequency if f is not Frequency.NONE]) == 14

    def test_upper_case_code(self):
        assert parse_frequency("A") is Frequency.ANNUAL
        assert parse_frequency("WETH") is Frequency.WEEKLY_THURSDAY

    @pytest.mark.parametrize("token", ["x", "", None, "monthly"])
    def test_unknown_is_none(self, token):
        assert parse_frequency(token) is Frequency.NONE


class TestToWire:
    def test_values(self):
        assert to_wire(None) == ""
        assert to_wire(SortOrder.DESCENDING) == "desc"
        assert to_wire(OutputType.VINTAGE_ALL) == "2"
        assert to_wire(True) == "true"
        assert to_wire(False) == "false"
        assert to_wire(date(2013, 1, 2)) == "2013-01-02"
        assert to_wire(datetime(2013, 1, 2, 15, 0)) == "2013-01-02"
        assert to_wire(1000) == "1000"


class FrozenDatetime(datetime):
    """datetime whose now() is 2013-08-15 03:00 UTC (22:00 the day before in Chicago)."""

    @classmethod
    def now(cls, tz=None):
        instant = datetime(2013, 8, 15, 3, 0, tzinfo=timezone.utc)
        return instant.astimezone(tz) if tz is not None else instant.replace(tzinfo=None)


class TestToday:
    def test_today_is_chicago_date(self, monkeypatch):
        monkeypatch.setattr(mapping, "datetime", FrozenDatetime)
        assert fred_today() == date(2013, 8, 14)

    @pytest.mark.asyncio
    async def test_client_default_window_uses_chicago_date(self, monkeypatch):
        monkeypatch.setattr(mapping, "datetime", FrozenDatetime)
        downloader = MockDownloader({"category/children": categories()})
        client = FredClient("key", downloader=downloader)
        await client.get_category_children(1)
        assert downloader.urls == [
            "https://api.stlouisfed.org/fred/category/children?api_key=key&category_id=1"
            "&realtime_start=2013-08-14&realtime_end=2013-08-14"
        ]
