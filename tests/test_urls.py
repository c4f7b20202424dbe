"""Tests for request URL construction."""

from datetime import date

import pytest

from fred_graph.data.urls import ENDPOINTS, build_url, mask_api_key
from fred_graph.models import (
    ObservationQuery,
    RealtimeWindow,
    ReleaseDatesQuery,
    SeriesListQuery,
    SeriesOrderBy,
    SeriesSearchQuery,
    SortOrder,
    Transformation,
)
from fred_samples import categories, category, observations, release_dates, seriess, vintage_dates


BASE = "https://api.stlouisfed.org/fred/"


def test_all_endpoints_present():
    assert len(ENDPOINTS) == 20
    assert all(params[0] == "api_key" for params in ENDPOINTS.values())


def test_category_url_has_no_realtime_parameters():
    url = build_url("category", {"api_key": "key", "category_id": 1})
    assert url == f"{BASE}category?api_key=key&category_id=1"


def test_missing_parameter():
    with pytest.raises(KeyError):
        build_url("category", {"api_key": "key"})


def test_unexpected_parameter():
    with pytest.raises(ValueError):
        build_url("category", {"api_key": "key", "category_id": 1, "limit": 10})


def test_values_are_percent_encoded():
    url = build_url("series", {
        "api_key": "key",
        "series_id": "A&B",
        "realtime_start": None,
        "realtime_end": None,
    })
    assert url == f"{BASE}series?api_key=key&series_id=A%26B&realtime_start=&realtime_end="


def test_mask_api_key():
    assert mask_api_key(f"{BASE}category?api_key=secret&category_id=1") == (
        f"{BASE}category?api_key=***&category_id=1"
    )
    assert mask_api_key("https://example.com/") == "https://example.com/"


class TestClientUrls:
    @pytest.mark.asyncio
    async def test_get_category(self, client, downloader):
        downloader.responses["category"] = categories(category(1, parent_id=0))
        await client.get_category(1)
        assert downloader.urls == [f"{BASE}category?api_key=key&category_id=1"]

    @pytest.mark.asyncio
    async def test_get_category_children_defaults_to_today(self, client, downloader):
        downloader.responses["category/children"] = categories()
        await client.get_category_children(1)
        assert downloader.urls == [
            f"{BASE}category/children?api_key=key&category_id=1"
            "&realtime_start=2013-08-14&realtime_end=2013-08-14"
        ]

    @pytest.mark.asyncio
    async def test_get_category_series(self, client, downloader):
        downloader.responses["category/series"] = seriess()
        await client.get_category_series(1)
        assert downloader.urls == [
            f"{BASE}category/series?api_key=key&category_id=1"
            "&realtime_start=2013-08-14&realtime_end=2013-08-14&limit=1000&offset=0"
            "&order_by=series_id&sort_order=asc&filter_variable=&filter_value="
        ]

    @pytest.mark.asyncio
    async def test_explicit_window_and_sort(self, client, downloader):
        downloader.responses["release/series"] = seriess()
        query = SeriesListQuery(
            realtime_start=date(2000, 1, 1),
            realtime_end=date(2001, 1, 1),
            limit=50,
            offset=100,
            order_by=SeriesOrderBy.POPULARITY,
            sort_order=SortOrder.DESCENDING,
        )
        await client.get_release_series(51, query)
        assert downloader.urls == [
            f"{BASE}release/series?api_key=key&release_id=51"
            "&realtime_start=2000-01-01&realtime_end=2001-01-01&limit=50&offset=100"
            "&order_by=popularity&sort_order=desc&filter_variable=&filter_value="
        ]

    @pytest.mark.asyncio
    async def test_search_encodes_spaces(self, client, downloader):
        downloader.responses["series/search"] = seriess()
        await client.search_series("money stock", SeriesSearchQuery(limit=20))
        assert downloader.urls == [
            f"{BASE}series/search?api_key=key"
            "&realtime_start=2013-08-14&realtime_end=2013-08-14&limit=20&offset=0"
            "&order_by=search_rank&sort_order=asc&filter_variable=&filter_value="
            "&search_type=full_text&search_text=money%20stock"
        ]

    @pytest.mark.asyncio
    async def test_series_updates(self, client, downloader):
        downloader.responses["series/updates"] = seriess()
        await client.get_series_updates()
        assert downloader.urls == [
            f"{BASE}series/updates?api_key=key"
            "&realtime_start=2013-08-14&realtime_end=2013-08-14&limit=100&offset=0&filter_value=all"
        ]

    @pytest.mark.asyncio
    async def test_release_dates_start_at_earliest(self, client, downloader):
        downloader.responses["release/dates"] = release_dates()
        await client.get_release_dates(82)
        assert downloader.urls == [
            f"{BASE}release/dates?api_key=key&release_id=82"
            "&realtime_start=1776-07-04&realtime_end=2013-08-14&limit=1000&offset=0"
            "&sort_order=asc&include_release_dates_with_no_data=false"
        ]

    @pytest.mark.asyncio
    async def test_releases_dates(self, client, downloader):
        downloader.responses["releases/dates"] = release_dates()
        await client.get_releases_dates(ReleaseDatesQuery(include_release_dates_with_no_data=True))
        assert downloader.urls == [
            f"{BASE}releases/dates?api_key=key"
            "&realtime_start=2013-08-14&realtime_end=2013-08-14&limit=1000&offset=0"
            "&order_by=release_id&sort_order=asc&include_release_dates_with_no_data=true"
        ]

    @pytest.mark.asyncio
    async def test_vintage_dates_cover_all_history(self, client, downloader):
        downloader.responses["series/vintagedates"] = vintage_dates()
        await client.get_series_vintage_dates("GNPCA")
        assert downloader.urls == [
            f"{BASE}series/vintagedates?api_key=key&series_id=GNPCA"
            "&realtime_start=1776-07-04&realtime_end=9999-12-31&limit=10000&offset=0&sort_order=asc"
        ]

    @pytest.mark.asyncio
    async def test_observations_defaults(self, client, downloader):
        downloader.responses["series/observations"] = observations()
        await client.get_series_observations("GNPCA")
        assert downloader.urls == [
            f"{BASE}series/observations?api_key=key&series_id=GNPCA"
            "&realtime_start=2013-08-14&realtime_end=2013-08-14&limit=100000&offset=0"
            "&sort_order=asc&observation_start=1776-07-04&observation_end=9999-12-31"
            "&units=lin&frequency=&aggregation_method=avg&output_type=1&file_type=xml"
            "&vintage_dates="
        ]

    @pytest.mark.asyncio
    async def test_vintage_dates_replace_realtime_window(self, client, downloader):
        downloader.responses["series/observations"] = observations()
        query = ObservationQuery(
            realtime_start=date(2000, 1, 1),
            vintage_dates=(date(2013, 1, 1), date(2013, 2, 1)),
            transformation=Transformation.PERCENT_CHANGE,
        )
        await client.get_series_observations("GNPCA", query)
        assert downloader.urls == [
            f"{BASE}series/observations?api_key=key&series_id=GNPCA"
            "&realtime_start=&realtime_end=&limit=100000&offset=0"
            "&sort_order=asc&observation_start=1776-07-04&observation_end=9999-12-31"
            "&units=pch&frequency=&aggregation_method=avg&output_type=1&file_type=xml"
            "&vintage_dates=2013-01-01,2013-02-01"
        ]

    @pytest.mark.asyncio
    async def test_window_from_realtime_window(self, client, downloader):
        downloader.responses["category/related"] = categories()
        await client.get_category_related(32073, RealtimeWindow(realtime_start=date(2010, 5, 1)))
        assert downloader.urls == [
            f"{BASE}category/related?api_key=key&category_id=32073"
            "&realtime_start=2010-05-01&realtime_end=2013-08-14"
        ]
