"""Per-operation request parameters.

Every field has a default; None for a realtime bound means "use the
operation's default", which is today in America/Chicago unless the
operation documents otherwise.
"""

from dataclasses import dataclass, field
from datetime import date

from fred_graph.models.enums import (
    AggregationMethod,
    Frequency,
    OutputType,
    ReleaseOrderBy,
    SearchType,
    SeriesFilterBy,
    SeriesOrderBy,
    SeriesUpdateFilterBy,
    SortOrder,
    SourceOrderBy,
    Transformation,
)


# Page sizes the API allows per request
LIST_LIMIT = 1000
UPDATES_LIMIT = 100
VINTAGE_DATES_LIMIT = 10000
OBSERVATIONS_LIMIT = 100000


@dataclass(frozen=True)
class RealtimeWindow:
    """Real-time period; see https://fred.stlouisfed.org/docs/api/fred/realtime_period.html"""

    realtime_start: date | None = None
    realtime_end: date | None = None


@dataclass(frozen=True)
class ReleaseListQuery(RealtimeWindow):
    """Parameters for releases and source/releases."""

    limit: int = LIST_LIMIT
    offset: int = 0
    order_by: ReleaseOrderBy = ReleaseOrderBy.RELEASE_ID
    sort_order: SortOrder = SortOrder.ASCENDING


@dataclass(frozen=True)
class SourceListQuery(RealtimeWindow):
    """Parameters for sources."""

    limit: int = LIST_LIMIT
    offset: int = 0
    order_by: SourceOrderBy = SourceOrderBy.SOURCE_ID
    sort_order: SortOrder = SortOrder.ASCENDING


@dataclass(frozen=True)
class SeriesListQuery(RealtimeWindow):
    """Parameters for category/series and release/series."""

    limit: int = LIST_LIMIT
    offset: int = 0
    order_by: SeriesOrderBy = SeriesOrderBy.SERIES_ID
    sort_order: SortOrder = SortOrder.ASCENDING
    filter_by: SeriesFilterBy = SeriesFilterBy.NONE
    filter_value: str = ""


@dataclass(frozen=True)
class SeriesSearchQuery(SeriesListQuery):
    """Parameters for series/search; results default to search rank order."""

    order_by: SeriesOrderBy = SeriesOrderBy.SEARCH_RANK
    search_type: SearchType = SearchType.FULL_TEXT


@dataclass(frozen=True)
class SeriesUpdatesQuery(RealtimeWindow):
    limit: int = UPDATES_LIMIT
    offset: int = 0
    filter_by: SeriesUpdateFilterBy = SeriesUpdateFilterBy.ALL


@dataclass(frozen=True)
class ReleaseDatesQuery(RealtimeWindow):
    """
    Parameters for releases/dates and release/dates.

    order_by is only sent by releases/dates. For release/dates an omitted
    realtime_start defaults to 1776-07-04 instead of today.
    """

    limit: int = LIST_LIMIT
    offset: int = 0
    order_by: ReleaseOrderBy = ReleaseOrderBy.RELEASE_ID
    sort_order: SortOrder = SortOrder.ASCENDING
    include_release_dates_with_no_data: bool = False


@dataclass(frozen=True)
class VintageDatesQuery(RealtimeWindow):
    """Parameters for series/vintagedates; the window defaults to all of history."""

    limit: int = VINTAGE_DATES_LIMIT
    offset: int = 0
    sort_order: SortOrder = SortOrder.ASCENDING


@dataclass(frozen=True)
class ObservationQuery(RealtimeWindow):
    """
    Parameters for series/observations.

    Non-empty vintage_dates replace the realtime window on the wire: the
    realtime parameters are then sent empty.
    """

    limit: int = OBSERVATIONS_LIMIT
    offset: int = 0
    sort_order: SortOrder = SortOrder.ASCENDING
    observation_start: date | None = None  # None = 1776-07-04
    observation_end: date | None = None  # None = 9999-12-31
    transformation: Transformation = Transformation.NONE
    frequency: Frequency = Frequency.NONE
    aggregation_method: AggregationMethod = AggregationMethod.AVERAGE
    output_type: OutputType = OutputType.REAL_TIME
    vintage_dates: tuple[date, ...] = field(default_factory=tuple)
