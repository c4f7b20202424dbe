"""FRED entities and the lazily loaded relationships between them.

Category, Series, Release and Source keep a reference to the FredClient
that created them and resolve related entities through it on first access.
Each relationship has an async getter and a blocking ``*_sync`` twin.

Category and Series instances are shared through the client's identity
caches. Release and Source are not cached: every response produces new
instances.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING

import pandas as pd

from fred_graph.data.frames import observations_to_frame
from fred_graph.models.enums import Frequency
from fred_graph.models.lazy import LazyRelation
from fred_graph.models.queries import (
    ObservationQuery,
    RealtimeWindow,
    ReleaseListQuery,
    SeriesListQuery,
    VintageDatesQuery,
)

if TYPE_CHECKING:
    from fred_graph.data.client import FredClient


ROOT_CATEGORY_ID = 0


@dataclass(frozen=True)
class Observation:
    """A single dated data point; value is None when the service has no value."""

    realtime_start: date
    realtime_end: date
    date: date
    value: float | None


@dataclass(frozen=True)
class ReleaseDate:
    """A date on which a release was published."""

    release_id: int
    release_name: str  # Empty for release/dates responses
    date: date


@dataclass(eq=False)
class Category:
    """A node in the category tree. The root has id 0 and is its own parent."""

    id: int
    name: str
    parent_id: int
    notes: str = ""
    client: "FredClient" = field(kw_only=True, repr=False)

    _parent: LazyRelation["Category"] = field(init=False, repr=False)
    _children: LazyRelation[list["Category"]] = field(init=False, repr=False)
    _related: LazyRelation[frozenset["Category"]] = field(init=False, repr=False)
    _series: LazyRelation[list["Series"]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._parent = LazyRelation(self._load_parent)
        self._children = LazyRelation(lambda: self.client.get_category_children(self.id))
        self._related = LazyRelation(self._load_related)
        self._series = LazyRelation(
            lambda: self.client.get_all_category_series(self.id, SeriesListQuery())
        )

    @property
    def is_root(self) -> bool:
        return self.id == ROOT_CATEGORY_ID

    async def _load_parent(self) -> "Category":
        if self.is_root:
            return self
        return await self.client.get_category(self.parent_id)

    async def _load_related(self) -> frozenset["Category"]:
        return frozenset(await self.client.get_category_related(self.id))

    async def get_parent(self) -> "Category":
        return await self._parent.get()

    async def get_children(self) -> list["Category"]:
        return await self._children.get()

    async def get_related(self) -> frozenset["Category"]:
        """Categories related outside the parent/child hierarchy."""
        return await self._related.get()

    async def get_series(self) -> list["Series"]:
        """Every series in the category, across all pages."""
        return await self._series.get()

    def get_parent_sync(self) -> "Category":
        return self.client.run_sync(self.get_parent())

    def get_children_sync(self) -> list["Category"]:
        return self.client.run_sync(self.get_children())

    def get_related_sync(self) -> frozenset["Category"]:
        return self.client.run_sync(self.get_related())

    def get_series_sync(self) -> list["Series"]:
        return self.client.run_sync(self.get_series())


@dataclass(eq=False)
class Series:
    """
    An economic data series as of a real-time period.

    When use_realtime_fields is True, relationship lookups are made for this
    series' own realtime_start/realtime_end; otherwise they use today.
    """

    id: str
    title: str
    realtime_start: date
    realtime_end: date
    observation_start: date
    observation_end: date
    frequency: Frequency
    units: str
    seasonal_adjusted: bool
    last_updated: datetime
    popularity: int = 0
    notes: str = ""
    use_realtime_fields: bool = False
    client: "FredClient" = field(kw_only=True, repr=False)

    _release: LazyRelation["Release"] = field(init=False, repr=False)
    _categories: LazyRelation[list[Category]] = field(init=False, repr=False)
    _observations: LazyRelation[list[Observation]] = field(init=False, repr=False)
    _vintage_dates: LazyRelation[list[date]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._release = LazyRelation(
            lambda: self.client.get_series_release(self.id, self._window())
        )
        self._categories = LazyRelation(
            lambda: self.client.get_series_categories(self.id, self._window())
        )
        self._observations = LazyRelation(self._load_observations)
        self._vintage_dates = LazyRelation(self._load_vintage_dates)

    @staticmethod
    def make_cache_key(series_id: str, realtime_start: date, realtime_end: date) -> str:
        return f"{series_id}:{realtime_start.isoformat()}:{realtime_end.isoformat()}"

    @property
    def cache_key(self) -> str:
        """Identity of this series in the client's cache."""
        return self.make_cache_key(self.id, self.realtime_start, self.realtime_end)

    def _window(self) -> RealtimeWindow:
        if self.use_realtime_fields:
            return RealtimeWindow(self.realtime_start, self.realtime_end)
        return RealtimeWindow()

    async def _load_observations(self) -> list[Observation]:
        window = self._window()
        query = ObservationQuery(
            realtime_start=window.realtime_start,
            realtime_end=window.realtime_end,
            observation_start=self.observation_start,
            observation_end=self.observation_end,
        )
        return await self.client.get_all_series_observations(self.id, query)

    async def _load_vintage_dates(self) -> list[date]:
        window = self._window()
        query = VintageDatesQuery(
            realtime_start=window.realtime_start, realtime_end=window.realtime_end
        )
        return await self.client.get_all_series_vintage_dates(self.id, query)

    async def get_release(self) -> "Release":
        return await self._release.get()

    async def get_categories(self) -> list[Category]:
        return await self._categories.get()

    async def get_observations(self) -> list[Observation]:
        """All observations over the series' observation period, across all pages."""
        return await self._observations.get()

    async def get_vintage_dates(self) -> list[date]:
        """
        Dates on which this series' values were revised or released.

        Covers all of history unless use_realtime_fields limits it to the
        series' own real-time period.
        """
        return await self._vintage_dates.get()

    async def get_observations_frame(self) -> pd.DataFrame:
        return observations_to_frame(await self.get_observations())

    def get_release_sync(self) -> "Release":
        return self.client.run_sync(self.get_release())

    def get_categories_sync(self) -> list[Category]:
        return self.client.run_sync(self.get_categories())

    def get_observations_sync(self) -> list[Observation]:
        return self.client.run_sync(self.get_observations())

    def get_vintage_dates_sync(self) -> list[date]:
        return self.client.run_sync(self.get_vintage_dates())

    def get_observations_frame_sync(self) -> pd.DataFrame:
        return observations_to_frame(self.get_observations_sync())


@dataclass(eq=False)
class Release:
    """A release of economic data."""

    id: int
    name: str
    press_release: bool
    realtime_start: date
    realtime_end: date
    link: str = ""
    notes: str = ""
    client: "FredClient" = field(kw_only=True, repr=False)

    _series: LazyRelation[list[Series]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # Every page is requested for the release's own real-time period
        self._series = LazyRelation(
            lambda: self.client.get_all_release_series(
                self.id,
                SeriesListQuery(
                    realtime_start=self.realtime_start, realtime_end=self.realtime_end
                ),
            )
        )

    async def get_series(self) -> list[Series]:
        return await self._series.get()

    def get_series_sync(self) -> list[Series]:
        return self.client.run_sync(self.get_series())


@dataclass(eq=False)
class Source:
    """The organization a release comes from."""

    id: int
    name: str
    realtime_start: date
    realtime_end: date
    link: str = ""
    notes: str = ""
    client: "FredClient" = field(kw_only=True, repr=False)

    _releases: LazyRelation[list[Release]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._releases = LazyRelation(
            lambda: self.client.get_all_source_releases(self.id, ReleaseListQuery())
        )

    async def get_releases(self) -> list[Release]:
        return await self._releases.get()

    def get_releases_sync(self) -> list[Release]:
        return self.client.run_sync(self.get_releases())
