"""pandas views of observation data."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from fred_graph.models.entities import Observation


def observations_to_frame(observations: Iterable["Observation"]) -> pd.DataFrame:
    """
    Build a DataFrame from observations.

    Returns:
        DataFrame with a DatetimeIndex named 'date' and columns 'value'
        (float, NaN where the value is missing), 'realtime_start' and
        'realtime_end'.
    """
    records = [
        {
            "date": obs.date,
            "value": obs.value,
            "realtime_start": obs.realtime_start,
            "realtime_end": obs.realtime_end,
        }
        for obs in observations
    ]
    if not records:
        return pd.DataFrame(
            columns=["value", "realtime_start", "realtime_end"],
            index=pd.DatetimeIndex([], name="date"),
        )

    df = pd.DataFrame(records)
    df["date"] = pd.to_datetime(df["date"])
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    df.set_index("date", inplace=True)
    return df
