"""FRED endpoint templates and URL construction."""

from collections.abc import Mapping
from urllib.parse import quote

from fred_graph.data.mapping import to_wire


BASE_URL = "https://api.stlouisfed.org/fred/"

_WINDOW = ("realtime_start", "realtime_end")
_PAGE = ("limit", "offset")
_SERIES_FILTER = ("order_by", "sort_order", "filter_variable", "filter_value")

# Parameter order is part of the wire contract
ENDPOINTS: dict[str, tuple[str, ...]] = {
    "releases": ("api_key", *_WINDOW, *_PAGE, "order_by", "sort_order"),
    "release": ("api_key", "release_id", *_WINDOW),
    "release/series": ("api_key", "release_id", *_WINDOW, *_PAGE, *_SERIES_FILTER),
    "releases/dates": (
        "api_key",
        *_WINDOW,
        *_PAGE,
        "order_by",
        "sort_order",
        "include_release_dates_with_no_data",
    ),
    "release/dates": (
        "api_key",
        "release_id",
        *_WINDOW,
        *_PAGE,
        "sort_order",
        "include_release_dates_with_no_data",
    ),
    "release/sources": ("api_key", "release_id", *_WINDOW),
    "series": ("api_key", "series_id", *_WINDOW),
    "series/categories": ("api_key", "series_id", *_WINDOW),
    "series/release": ("api_key", "series_id", *_WINDOW),
    "series/search": (
        "api_key",
        *_WINDOW,
        *_PAGE,
        *_SERIES_FILTER,
        "search_type",
        "search_text",
    ),
    "series/updates": ("api_key", *_WINDOW, *_PAGE, "filter_value"),
    "series/vintagedates": ("api_key", "series_id", *_WINDOW, *_PAGE, "sort_order"),
    "series/observations": (
        "api_key",
        "series_id",
        *_WINDOW,
        *_PAGE,
        "sort_order",
        "observation_start",
        "observation_end",
        "units",
        "frequency",
        "aggregation_method",
        "output_type",
        "file_type",
        "vintage_dates",
    ),
    "category": ("api_key", "category_id"),
    "category/related": ("api_key", "category_id", *_WINDOW),
    "category/children": ("api_key", "category_id", *_WINDOW),
    "category/series": ("api_key", "category_id", *_WINDOW, *_PAGE, *_SERIES_FILTER),
    "sources": ("api_key", *_WINDOW, *_PAGE, "order_by", "sort_order"),
    "source": ("api_key", "source_id", *_WINDOW),
    "source/releases": ("api_key", "source_id", *_WINDOW, *_PAGE, "order_by", "sort_order"),
}


def build_url(endpoint: str, params: Mapping[str, object]) -> str:
    """
    Build the request URL for an endpoint.

    Args:
        endpoint: Key into ENDPOINTS, e.g. "category/series".
        params: Values for every parameter of the endpoint's template.
            None renders as an empty value.

    Returns:
        Fully-qualified URL with parameters in template order.

    Raises:
        KeyError: Unknown endpoint, or a template parameter is missing.
        ValueError: A parameter was given that the template does not have.
    """
    names = ENDPOINTS[endpoint]
    unexpected = set(params) - set(names)
    if unexpected:
        raise ValueError(f"Unexpected parameters for {endpoint}: {sorted(unexpected)}")

    query = "&".join(
        f"{name}={quote(to_wire(params[name]), safe=',')}" for name in names
    )
    return f"{BASE_URL}{endpoint}?{query}"


def mask_api_key(url: str) -> str:
    """Hide the api_key value for logging."""
    head, sep, rest = url.partition("api_key=")
    if not sep:
        return url
    _, amp, tail = rest.partition("&")
    return f"{head}api_key=***{amp}{tail}"
