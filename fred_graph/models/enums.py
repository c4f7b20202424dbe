"""Wire enumerations for FRED request parameters and series attributes.

Each member's value is the exact token sent to (or received from) the API.
"""

from enum import Enum


class SortOrder(Enum):
    """Sort direction for attributes named by order_by."""
    ASCENDING = "asc"
    DESCENDING = "desc"


class Frequency(Enum):
    """Series frequency, also used to request frequency aggregation."""
    NONE = ""  # No aggregation / unrecognized code
    DAILY = "d"
    WEEKLY = "w"
    BIWEEKLY = "bw"
    MONTHLY = "m"
    QUARTERLY = "q"
    SEMIANNUAL = "sa"
    ANNUAL = "a"
    WEEKLY_FRIDAY = "wef"
    WEEKLY_THURSDAY = "weth"
    WEEKLY_WEDNESDAY = "wew"
    WEEKLY_TUESDAY = "wetu"
    WEEKLY_MONDAY = "wem"
    BIWEEKLY_WEDNESDAY = "bwew"
    BIWEEKLY_MONDAY = "bwem"


class Transformation(Enum):
    """Data value transformation, sent as the units parameter."""
    NONE = "lin"  # Levels, no transformation
    CHANGE = "chg"  # x(t) - x(t-1)
    CHANGE_YEAR = "ch1"  # x(t) - x(t-n_obs_per_yr)
    PERCENT_CHANGE = "pch"
    PERCENT_CHANGE_YEAR = "pc1"
    COMPOUNDED_ANNUAL_RATE_CHANGE = "pca"
    CONTINUOUSLY_COMPOUNDED_RATE_CHANGE = "cch"
    CONTINUOUSLY_COMPOUNDED_ANNUAL_RATE_CHANGE = "cca"
    LOG = "log"


class AggregationMethod(Enum):
    """How values are combined when aggregating to a lower frequency."""
    AVERAGE = "avg"
    SUM = "sum"
    END_OF_PERIOD = "eop"


class OutputType(Enum):
    """Observation output type."""
    REAL_TIME = "1"  # Observations by real-time period
    VINTAGE_ALL = "2"  # By vintage date, all observations
    VINTAGE_NEW_REVISED = "3"  # By vintage date, new and revised only
    INITIAL_RELEASE_ONLY = "4"


class FileType(Enum):
    """Format of a downloaded observations file."""
    TEXT = "txt"  # Tab delimited, zipped by the service
    XML = "xml"
    JSON = "json"
    XLS = "xls"  # Excel, zipped by the service


class SearchType(Enum):
    """Kind of series search."""
    FULL_TEXT = "full_text"
    SERIES_ID = "series_id"


class SeriesFilterBy(Enum):
    """Attribute used to filter series listings."""
    NONE = ""
    FREQUENCY = "frequency"
    UNITS = "units"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"


class SeriesUpdateFilterBy(Enum):
    """Geographic filter for series updates."""
    ALL = "all"
    MACRO = "macro"
    REGIONAL = "regional"


class SeriesOrderBy(Enum):
    """Attribute used to order series listings."""
    SERIES_ID = "series_id"
    TITLE = "title"
    UNITS = "units"
    FREQUENCY = "frequency"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"
    LAST_UPDATED = "last_updated"
    OBSERVATION_START = "observation_start"
    OBSERVATION_END = "observation_end"
    POPULARITY = "popularity"
    SEARCH_RANK = "search_rank"


class ReleaseOrderBy(Enum):
    """Attribute used to order release listings."""
    RELEASE_ID = "release_id"
    NAME = "name"
    PRESS_RELEASE = "press_release"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"


class SourceOrderBy(Enum):
    """Attribute used to order source listings."""
    SOURCE_ID = "source_id"
    NAME = "name"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"
