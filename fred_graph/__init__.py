"""Typed client for the FRED economic data web service."""

from fred_graph.config import Settings
from fred_graph.data.client import Fred, FredClient
from fred_graph.exceptions import (
    ConfigurationError,
    FredError,
    ParseError,
    ServiceError,
    TransportError,
)
from fred_graph.models import (
    Category,
    FileType,
    Frequency,
    Observation,
    ObservationQuery,
    RealtimeWindow,
    Release,
    ReleaseDate,
    Series,
    SeriesSearchQuery,
    Source,
)

__version__ = "0.1.0"

__all__ = [
    "Category",
    "ConfigurationError",
    "FileType",
    "Fred",
    "FredClient",
    "FredError",
    "Frequency",
    "Observation",
    "ObservationQuery",
    "ParseError",
    "RealtimeWindow",
    "Release",
    "ReleaseDate",
    "Series",
    "SeriesSearchQuery",
    "ServiceError",
    "Settings",
    "Source",
    "TransportError",
]
