"""FRED entities, enumerations and request parameters."""

from fred_graph.models.enums import (
    AggregationMethod,
    FileType,
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
from fred_graph.models.lazy import LazyRelation, RelationState
from fred_graph.models.entities import (
    Category,
    Observation,
    Release,
    ReleaseDate,
    Series,
    Source,
)

__all__ = [
    "AggregationMethod",
    "Category",
    "FileType",
    "Frequency",
    "LazyRelation",
    "Observation",
    "ObservationQuery",
    "OutputType",
    "RealtimeWindow",
    "RelationState",
    "Release",
    "ReleaseDate",
    "ReleaseDatesQuery",
    "ReleaseListQuery",
    "ReleaseOrderBy",
    "SearchType",
    "Series",
    "SeriesFilterBy",
    "SeriesListQuery",
    "SeriesOrderBy",
    "SeriesSearchQuery",
    "SeriesUpdateFilterBy",
    "SeriesUpdatesQuery",
    "SortOrder",
    "Source",
    "SourceListQuery",
    "SourceOrderBy",
    "Transformation",
    "VintageDatesQuery",
]
