"""FRED API client.

FredClient is the async primitive: it builds request URLs, fetches them
through a UrlDownloader, parses the XML and constructs entities. It owns the
Category (by id) and Series (by id and real-time period) identity caches.

Fred is the blocking facade; each method runs the matching FredClient
coroutine to completion on a background event loop.
"""

import logging
import re
import threading
import xml.etree.ElementTree as ET
from collections.abc import Callable, Coroutine
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Any, TypeVar

from fred_graph.config import Settings
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
)
from fred_graph.data.pagination import fetch_all_pages
from fred_graph.data.runner import LoopRunner
from fred_graph.data.transport import HttpxDownloader, UrlDownloader
from fred_graph.data.urls import build_url, mask_api_key
from fred_graph.exceptions import ParseError, ServiceError, TransportError
from fred_graph.models.entities import (
    Category,
    Observation,
    Release,
    ReleaseDate,
    Series,
    Source,
)
from fred_graph.models.enums import FileType
from fred_graph.models.queries import (
    ObservationQuery,
    RealtimeWindow,
    ReleaseDatesQuery,
    ReleaseListQuery,
    SeriesListQuery,
    SeriesSearchQuery,
    SeriesUpdatesQuery,
    SourceListQuery,
    VintageDatesQuery,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

_MESSAGE_RE = re.compile(r"message=", re.IGNORECASE)


def extract_service_message(body: str) -> str | None:
    """
    Pull the message attribute out of a FRED error document.

    Scans for the literal 'message=' and reads up to the next double quote.
    Returns None when the body does not look like an error document.
    """
    if not body:
        return None
    match = _MESSAGE_RE.search(body)
    if match is None:
        return None
    start = match.end()
    if body[start:start + 1] in ('"', "'"):
        quote = body[start]
        start += 1
    else:
        quote = '"'
    end = body.find(quote, start)
    if end < 0:
        return None
    return body[start:end]


def _attr(element: ET.Element, name: str) -> str:
    """Required attribute; absence is a schema violation."""
    value = element.get(name)
    if value is None:
        raise ParseError(f"<{element.tag}> is missing required attribute '{name}'")
    return value


class FredClient:
    """Async client for the FRED web service."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        downloader: UrlDownloader | None = None,
        cache_series: bool | None = None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        settings = settings or Settings()
        if api_key is not None:
            settings = replace(settings, fred_api_key=api_key)
        settings.validate()
        self.settings = settings

        self._key = self.settings.fred_api_key
        self._downloader = downloader or HttpxDownloader(timeout=self.settings.timeout)
        self._cache_series = (
            self.settings.cache_series if cache_series is None else cache_series
        )
        self._clock = clock or fred_today
        self._runner: LoopRunner | None = None
        self._runner_lock = threading.Lock()

        self._cache_lock = threading.Lock()
        self._categories: dict[int, Category] = {}
        self._series: dict[str, Series] = {}

    # -- lifecycle ---------------------------------------------------------

    @property
    def cache_series(self) -> bool:
        return self._cache_series

    def today(self) -> date:
        """Default real-time date: today in America/Chicago."""
        return self._clock()

    def run_sync(self, coro: Coroutine[Any, Any, T]) -> T:
        """Run one of this client's coroutines to completion and return its result."""
        with self._runner_lock:
            if self._runner is None:
                self._runner = LoopRunner()
            runner = self._runner
        return runner.run(coro)

    def close(self) -> None:
        """Stop the background loop used by blocking calls."""
        with self._runner_lock:
            runner, self._runner = self._runner, None
        if runner is not None:
            runner.close()

    def __enter__(self) -> "FredClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    async def __aenter__(self) -> "FredClient":
        return self

    async def __aexit__(self, *args) -> None:
        self.close()

    def clear_cache(self) -> None:
        """
        Empty the Category and Series identity caches.

        Entities obtained earlier keep whatever relationships they already resolved.
        """
        with self._cache_lock:
            self._categories.clear()
            self._series.clear()
        logger.info("Cleared category and series caches")

    # -- request plumbing --------------------------------------------------

    def _window(
        self,
        window: RealtimeWindow,
        default_start: date | None = None,
        default_end: date | None = None,
    ) -> dict[str, date]:
        start, end = window.realtime_start, window.realtime_end
        if start is None:
            start = default_start or self.today()
        if end is None:
            end = default_end or self.today()
        return {"realtime_start": start, "realtime_end": end}

    def _url(self, endpoint: str, **params: object) -> str:
        return build_url(endpoint, {"api_key": self._key, **params})

    def _service_error(self, e: TransportError) -> ServiceError | None:
        message = extract_service_message(e.body)
        if message is None:
            return None
        logger.warning(f"FRED error ({e.status_code}): {message}")
        return ServiceError(message, e)

    async def _get_root(self, url: str, expected_tag: str) -> ET.Element:
        logger.debug(f"GET {mask_api_key(url)}")
        try:
            text = await self._downloader.fetch_text(url)
        except TransportError as e:
            error = self._service_error(e)
            if error is None:
                raise
            raise error from e

        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            raise ParseError(f"Malformed XML from {mask_api_key(url)}: {e}") from e
        if root.tag != expected_tag:
            raise ParseError(
                f"Expected <{expected_tag}> from {mask_api_key(url)}, got <{root.tag}>"
            )
        return root

    @staticmethod
    def _first(root: ET.Element, tag: str) -> ET.Element:
        element = root.find(tag)
        if element is None:
            raise ParseError(f"Response <{root.tag}> contains no <{tag}> element")
        return element

    # -- entity construction -----------------------------------------------

    def _create_category(self, element: ET.Element) -> Category:
        category_id = parse_int(_attr(element, "id"), "category id")
        with self._cache_lock:
            cached = self._categories.get(category_id)
            if cached is not None:
                return cached
            category = Category(
                id=category_id,
                name=_attr(element, "name"),
                parent_id=parse_int(_attr(element, "parent_id"), "parent_id"),
                notes=element.get("notes", ""),
                client=self,
            )
            self._categories[category_id] = category
            return category

    def _create_series(self, element: ET.Element) -> Series:
        series_id = _attr(element, "id")
        realtime_start = parse_fred_date(_attr(element, "realtime_start"))
        realtime_end = parse_fred_date(_attr(element, "realtime_end"))
        key = Series.make_cache_key(series_id, realtime_start, realtime_end)

        if self._cache_series:
            with self._cache_lock:
                cached = self._series.get(key)
            if cached is not None:
                return cached

        popularity = element.get("popularity", "")
        series = Series(
            id=series_id,
            title=_attr(element, "title"),
            realtime_start=realtime_start,
            realtime_end=realtime_end,
            observation_start=parse_fred_date(_attr(element, "observation_start")),
            observation_end=parse_fred_date(_attr(element, "observation_end")),
            frequency=parse_frequency(_attr(element, "frequency_short")),
            units=_attr(element, "units"),
            seasonal_adjusted=_attr(element, "seasonal_adjustment_short") == "SA",
            last_updated=parse_fred_datetime(_attr(element, "last_updated")),
            popularity=parse_int(popularity, "popularity") if popularity.strip() else 0,
            notes=element.get("notes", ""),
            client=self,
        )

        if not self._cache_series:
            return series
        with self._cache_lock:
            # Another caller may have built the same series meanwhile
            return self._series.setdefault(key, series)

    def _create_release(self, element: ET.Element) -> Release:
        return Release(
            id=parse_int(_attr(element, "id"), "release id"),
            name=_attr(element, "name"),
            press_release=parse_bool(_attr(element, "press_release"), "press_release"),
            realtime_start=parse_fred_date(_attr(element, "realtime_start")),
            realtime_end=parse_fred_date(_attr(element, "realtime_end")),
            link=element.get("link", ""),
            notes=element.get("notes", ""),
            client=self,
        )

    def _create_source(self, element: ET.Element) -> Source:
        return Source(
            id=parse_int(_attr(element, "id"), "source id"),
            name=_attr(element, "name"),
            realtime_start=parse_fred_date(_attr(element, "realtime_start")),
            realtime_end=parse_fred_date(_attr(element, "realtime_end")),
            link=element.get("link", ""),
            notes=element.get("notes", ""),
            client=self,
        )

    @staticmethod
    def _create_observation(element: ET.Element) -> Observation:
        return Observation(
            realtime_start=parse_fred_date(_attr(element, "realtime_start")),
            realtime_end=parse_fred_date(_attr(element, "realtime_end")),
            date=parse_fred_date(_attr(element, "date")),
            value=parse_value(element.get("value")),
        )

    @staticmethod
    def _create_release_date(element: ET.Element, with_name: bool) -> ReleaseDate:
        return ReleaseDate(
            release_id=parse_int(_attr(element, "release_id"), "release_id"),
            release_name=_attr(element, "release_name") if with_name else "",
            date=parse_fred_date(element.text or ""),
        )

    async def _categories_from(self, url: str) -> list[Category]:
        root = await self._get_root(url, "categories")
        return [self._create_category(e) for e in root.findall("category")]

    async def _series_from(self, url: str) -> list[Series]:
        root = await self._get_root(url, "seriess")
        return [self._create_series(e) for e in root.findall("series")]

    async def _releases_from(self, url: str) -> list[Release]:
        root = await self._get_root(url, "releases")
        return [self._create_release(e) for e in root.findall("release")]

    async def _sources_from(self, url: str) -> list[Source]:
        root = await self._get_root(url, "sources")
        return [self._create_source(e) for e in root.findall("source")]

    # -- releases ----------------------------------------------------------

    async def get_releases(self, query: ReleaseListQuery = ReleaseListQuery()) -> list[Release]:
        """All releases of economic data (one page)."""
        url = self._url(
            "releases",
            **self._window(query),
            limit=query.limit,
            offset=query.offset,
            order_by=query.order_by,
            sort_order=query.sort_order,
        )
        return await self._releases_from(url)

    async def get_release(
        self, release_id: int, window: RealtimeWindow = RealtimeWindow()
    ) -> Release:
        url = self._url("release", release_id=release_id, **self._window(window))
        root = await self._get_root(url, "releases")
        return self._create_release(self._first(root, "release"))

    async def get_release_series(
        self, release_id: int, query: SeriesListQuery = SeriesListQuery()
    ) -> list[Series]:
        url = self._url(
            "release/series",
            release_id=release_id,
            **self._window(query),
            limit=query.limit,
            offset=query.offset,
            order_by=query.order_by,
            sort_order=query.sort_order,
            filter_variable=query.filter_by,
            filter_value=query.filter_value,
        )
        return await self._series_from(url)

    async def get_releases_dates(
        self, query: ReleaseDatesQuery = ReleaseDatesQuery()
    ) -> list[ReleaseDate]:
        """Release dates for all releases."""
        url = self._url(
            "releases/dates",
            **self._window(query),
            limit=query.limit,
            offset=query.offset,
            order_by=query.order_by,
            sort_order=query.sort_order,
            include_release_dates_with_no_data=query.include_release_dates_with_no_data,
        )
        root = await self._get_root(url, "release_dates")
        return [self._create_release_date(e, True) for e in root.findall("release_date")]

    async def get_release_dates(
        self, release_id: int, query: ReleaseDatesQuery = ReleaseDatesQuery()
    ) -> list[ReleaseDate]:
        """
        Release dates for one release.

        An omitted realtime_start defaults to 1776-07-04, so the full history
        is returned. release_name is empty: this endpoint does not send it.
        """
        url = self._url(
            "release/dates",
            release_id=release_id,
            **self._window(query, default_start=EARLIEST_DATE),
            limit=query.limit,
            offset=query.offset,
            sort_order=query.sort_order,
            include_release_dates_with_no_data=query.include_release_dates_with_no_data,
        )
        root = await self._get_root(url, "release_dates")
        return [self._create_release_date(e, False) for e in root.findall("release_date")]

    async def get_release_sources(
        self, release_id: int, window: RealtimeWindow = RealtimeWindow()
    ) -> list[Source]:
        url = self._url("release/sources", release_id=release_id, **self._window(window))
        return await self._sources_from(url)

    # -- series ------------------------------------------------------------

    async def get_series(
        self, series_id: str, window: RealtimeWindow = RealtimeWindow()
    ) -> Series:
        url = self._url("series", series_id=series_id, **self._window(window))
        root = await self._get_root(url, "seriess")
        return self._create_series(self._first(root, "series"))

    async def get_series_categories(
        self, series_id: str, window: RealtimeWindow = RealtimeWindow()
    ) -> list[Category]:
        url = self._url("series/categories", series_id=series_id, **self._window(window))
        return await self._categories_from(url)

    async def get_series_release(
        self, series_id: str, window: RealtimeWindow = RealtimeWindow()
    ) -> Release:
        url = self._url("series/release", series_id=series_id, **self._window(window))
        root = await self._get_root(url, "releases")
        return self._create_release(self._first(root, "release"))

    async def search_series(
        self, search_text: str, query: SeriesSearchQuery = SeriesSearchQuery()
    ) -> list[Series]:
        """Series matching keywords (full_text) or an id pattern (series_id)."""
        url = self._url(
            "series/search",
            **self._window(query),
            limit=query.limit,
            offset=query.offset,
            order_by=query.order_by,
            sort_order=query.sort_order,
            filter_variable=query.filter_by,
            filter_value=query.filter_value,
            search_type=query.search_type,
            search_text=search_text,
        )
        return await self._series_from(url)

    async def get_series_updates(
        self, query: SeriesUpdatesQuery = SeriesUpdatesQuery()
    ) -> list[Series]:
        """Series ordered by when their data was last updated, newest first."""
        url = self._url(
            "series/updates",
            **self._window(query),
            limit=query.limit,
            offset=query.offset,
            filter_value=query.filter_by,
        )
        return await self._series_from(url)

    async def get_series_vintage_dates(
        self, series_id: str, query: VintageDatesQuery = VintageDatesQuery()
    ) -> list[date]:
        """Vintage dates of a series; the window defaults to all of history."""
        url = self._url(
            "series/vintagedates",
            series_id=series_id,
            **self._window(query, default_start=EARLIEST_DATE, default_end=LATEST_DATE),
            limit=query.limit,
            offset=query.offset,
            sort_order=query.sort_order,
        )
        root = await self._get_root(url, "vintage_dates")
        return [parse_fred_date(e.text or "") for e in root.findall("vintage_date")]

    def _observations_url(
        self, series_id: str, query: ObservationQuery, file_type: FileType
    ) -> str:
        vintage_dates = list(query.vintage_dates)
        if vintage_dates:
            # Vintage dates replace the real-time period on the wire
            window: dict[str, object] = {"realtime_start": "", "realtime_end": ""}
        else:
            window = self._window(query)
        return self._url(
            "series/observations",
            series_id=series_id,
            **window,
            limit=query.limit,
            offset=query.offset,
            sort_order=query.sort_order,
            observation_start=query.observation_start or EARLIEST_DATE,
            observation_end=query.observation_end or LATEST_DATE,
            units=query.transformation,
            frequency=query.frequency,
            aggregation_method=query.aggregation_method,
            output_type=query.output_type,
            file_type=file_type,
            vintage_dates=",".join(d.isoformat() for d in vintage_dates),
        )

    async def get_series_observations(
        self, series_id: str, query: ObservationQuery = ObservationQuery()
    ) -> list[Observation]:
        """One page of observations (always requested as XML)."""
        url = self._observations_url(series_id, query, FileType.XML)
        root = await self._get_root(url, "observations")
        return [self._create_observation(e) for e in root.findall("observation")]

    async def download_series_observations(
        self,
        series_id: str,
        file_type: FileType,
        path: str | Path,
        query: ObservationQuery = ObservationQuery(),
    ) -> Path:
        """
        Save observations to a file in the requested format.

        Text and Excel downloads arrive zipped, so '.zip' is appended to the
        path unless it already ends with it.

        Returns:
            The path actually written.
        """
        path = Path(path)
        if file_type not in (FileType.XML, FileType.JSON) and path.suffix.lower() != ".zip":
            path = path.with_name(path.name + ".zip")

        url = self._observations_url(series_id, query, file_type)
        logger.info(f"Downloading {series_id} observations to {path}")
        try:
            await self._downloader.fetch_to_file(url, path)
        except TransportError as e:
            error = self._service_error(e)
            if error is None:
                raise
            raise error from e
        return path

    # -- categories --------------------------------------------------------

    async def get_category(self, category_id: int) -> Category:
        """A category; served from the identity cache when already known."""
        with self._cache_lock:
            cached = self._categories.get(category_id)
        if cached is not None:
            return cached

        url = self._url("category", category_id=category_id)
        root = await self._get_root(url, "categories")
        return self._create_category(self._first(root, "category"))

    async def get_category_related(
        self, category_id: int, window: RealtimeWindow = RealtimeWindow()
    ) -> list[Category]:
        url = self._url("category/related", category_id=category_id, **self._window(window))
        return await self._categories_from(url)

    async def get_category_children(
        self, category_id: int, window: RealtimeWindow = RealtimeWindow()
    ) -> list[Category]:
        url = self._url("category/children", category_id=category_id, **self._window(window))
        return await self._categories_from(url)

    async def get_category_series(
        self, category_id: int, query: SeriesListQuery = SeriesListQuery()
    ) -> list[Series]:
        url = self._url(
            "category/series",
            category_id=category_id,
            **self._window(query),
            limit=query.limit,
            offset=query.offset,
            order_by=query.order_by,
            sort_order=query.sort_order,
            filter_variable=query.filter_by,
            filter_value=query.filter_value,
        )
        return await self._series_from(url)

    # -- sources -----------------------------------------------------------

    async def get_sources(self, query: SourceListQuery = SourceListQuery()) -> list[Source]:
        url = self._url(
            "sources",
            **self._window(query),
            limit=query.limit,
            offset=query.offset,
            order_by=query.order_by,
            sort_order=query.sort_order,
        )
        return await self._sources_from(url)

    async def get_source(
        self, source_id: int, window: RealtimeWindow = RealtimeWindow()
    ) -> Source:
        url = self._url("source", source_id=source_id, **self._window(window))
        root = await self._get_root(url, "sources")
        return self._create_source(self._first(root, "source"))

    async def get_source_releases(
        self, source_id: int, query: ReleaseListQuery = ReleaseListQuery()
    ) -> list[Release]:
        url = self._url(
            "source/releases",
            source_id=source_id,
            **self._window(query),
            limit=query.limit,
            offset=query.offset,
            order_by=query.order_by,
            sort_order=query.sort_order,
        )
        return await self._releases_from(url)

    # -- complete result sets ----------------------------------------------

    async def get_all_category_series(
        self, category_id: int, query: SeriesListQuery = SeriesListQuery()
    ) -> list[Series]:
        """Every page of category/series, starting at offset 0."""
        return await fetch_all_pages(
            lambda offset: self.get_category_series(category_id, replace(query, offset=offset)),
            query.limit,
            f"series in category {category_id}",
        )

    async def get_all_release_series(
        self, release_id: int, query: SeriesListQuery = SeriesListQuery()
    ) -> list[Series]:
        return await fetch_all_pages(
            lambda offset: self.get_release_series(release_id, replace(query, offset=offset)),
            query.limit,
            f"series in release {release_id}",
        )

    async def get_all_source_releases(
        self, source_id: int, query: ReleaseListQuery = ReleaseListQuery()
    ) -> list[Release]:
        return await fetch_all_pages(
            lambda offset: self.get_source_releases(source_id, replace(query, offset=offset)),
            query.limit,
            f"releases from source {source_id}",
        )

    async def get_all_series_observations(
        self, series_id: str, query: ObservationQuery = ObservationQuery()
    ) -> list[Observation]:
        return await fetch_all_pages(
            lambda offset: self.get_series_observations(series_id, replace(query, offset=offset)),
            query.limit,
            f"{series_id} observations",
        )

    async def get_all_series_vintage_dates(
        self, series_id: str, query: VintageDatesQuery = VintageDatesQuery()
    ) -> list[date]:
        return await fetch_all_pages(
            lambda offset: self.get_series_vintage_dates(series_id, replace(query, offset=offset)),
            query.limit,
            f"{series_id} vintage dates",
        )


class Fred:
    """Blocking FRED client; same operations and results as FredClient."""

    def __init__(self, api_key: str | None = None, **kwargs) -> None:
        self.client = FredClient(api_key, **kwargs)

    def _run(self, coro: Coroutine[Any, Any, T]) -> T:
        return self.client.run_sync(coro)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "Fred":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def clear_cache(self) -> None:
        self.client.clear_cache()

    def get_releases(self, query: ReleaseListQuery = ReleaseListQuery()) -> list[Release]:
        return self._run(self.client.get_releases(query))

    def get_release(self, release_id: int, window: RealtimeWindow = RealtimeWindow()) -> Release:
        return self._run(self.client.get_release(release_id, window))

    def get_release_series(
        self, release_id: int, query: SeriesListQuery = SeriesListQuery()
    ) -> list[Series]:
        return self._run(self.client.get_release_series(release_id, query))

    def get_releases_dates(self, query: ReleaseDatesQuery = ReleaseDatesQuery()) -> list[ReleaseDate]:
        return self._run(self.client.get_releases_dates(query))

    def get_release_dates(
        self, release_id: int, query: ReleaseDatesQuery = ReleaseDatesQuery()
    ) -> list[ReleaseDate]:
        return self._run(self.client.get_release_dates(release_id, query))

    def get_release_sources(
        self, release_id: int, window: RealtimeWindow = RealtimeWindow()
    ) -> list[Source]:
        return self._run(self.client.get_release_sources(release_id, window))

    def get_series(self, series_id: str, window: RealtimeWindow = RealtimeWindow()) -> Series:
        return self._run(self.client.get_series(series_id, window))

    def get_series_categories(
        self, series_id: str, window: RealtimeWindow = RealtimeWindow()
    ) -> list[Category]:
        return self._run(self.client.get_series_categories(series_id, window))

    def get_series_release(self, series_id: str, window: RealtimeWindow = RealtimeWindow()) -> Release:
        return self._run(self.client.get_series_release(series_id, window))

    def search_series(
        self, search_text: str, query: SeriesSearchQuery = SeriesSearchQuery()
    ) -> list[Series]:
        return self._run(self.client.search_series(search_text, query))

    def get_series_updates(self, query: SeriesUpdatesQuery = SeriesUpdatesQuery()) -> list[Series]:
        return self._run(self.client.get_series_updates(query))

    def get_series_vintage_dates(
        self, series_id: str, query: VintageDatesQuery = VintageDatesQuery()
    ) -> list[date]:
        return self._run(self.client.get_series_vintage_dates(series_id, query))

    def get_series_observations(
        self, series_id: str, query: ObservationQuery = ObservationQuery()
    ) -> list[Observation]:
        return self._run(self.client.get_series_observations(series_id, query))

    def download_series_observations(
        self,
        series_id: str,
        file_type: FileType,
        path: str | Path,
        query: ObservationQuery = ObservationQuery(),
    ) -> Path:
        return self._run(
            self.client.download_series_observations(series_id, file_type, path, query)
        )

    def get_category(self, category_id: int) -> Category:
        return self._run(self.client.get_category(category_id))

    def get_category_related(
        self, category_id: int, window: RealtimeWindow = RealtimeWindow()
    ) -> list[Category]:
        return self._run(self.client.get_category_related(category_id, window))

    def get_category_children(
        self, category_id: int, window: RealtimeWindow = RealtimeWindow()
    ) -> list[Category]:
        return self._run(self.client.get_category_children(category_id, window))

    def get_category_series(
        self, category_id: int, query: SeriesListQuery = SeriesListQuery()
    ) -> list[Series]:
        return self._run(self.client.get_category_series(category_id, query))

    def get_sources(self, query: SourceListQuery = SourceListQuery()) -> list[Source]:
        return self._run(self.client.get_sources(query))

    def get_source(self, source_id: int, window: RealtimeWindow = RealtimeWindow()) -> Source:
        return self._run(self.client.get_source(source_id, window))

    def get_source_releases(
        self, source_id: int, query: ReleaseListQuery = ReleaseListQuery()
    ) -> list[Release]:
        return self._run(self.client.get_source_releases(source_id, query))

    def get_all_category_series(
        self, category_id: int, query: SeriesListQuery = SeriesListQuery()
    ) -> list[Series]:
        return self._run(self.client.get_all_category_series(category_id, query))

    def get_all_release_series(
        self, release_id: int, query: SeriesListQuery = SeriesListQuery()
    ) -> list[Series]:
        return self._run(self.client.get_all_release_series(release_id, query))

    def get_all_source_releases(
        self, source_id: int, query: ReleaseListQuery = ReleaseListQuery()
    ) -> list[Release]:
        return self._run(self.client.get_all_source_releases(source_id, query))

    def get_all_series_observations(
        self, series_id: str, query: ObservationQuery = ObservationQuery()
    ) -> list[Observation]:
        return self._run(self.client.get_all_series_observations(series_id, query))

    def get_all_series_vintage_dates(
        self, series_id: str, query: VintageDatesQuery = VintageDatesQuery()
    ) -> list[date]:
        return self._run(self.client.get_all_series_vintage_dates(series_id, query))
