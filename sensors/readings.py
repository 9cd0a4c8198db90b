"""
Sensor readings and their tabular form.

Readings arrive one at a time as event payloads; analysis works on a
DataFrame with a DatetimeIndex named 'timestamp'.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

import pandas as pd

COLUMNS = ("sensor_id", "value")


@dataclass(frozen=True)
class SensorReading:
    """One measurement from one sensor."""

    sensor_id: str
    value: float
    timestamp: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.timestamp, datetime):
            object.__setattr__(self, "timestamp", datetime.fromisoformat(str(self.timestamp)))
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return f"{self.sensor_id}:{self.value}@{self.timestamp.isoformat()}"


def to_frame(readings: Iterable[SensorReading]) -> pd.DataFrame:
    """
    Build a time-sorted DataFrame from readings.

    Columns: sensor_id, value. Index: DatetimeIndex named 'timestamp'.
    An empty input gives an empty frame with the same columns.
    """
    rows = [{"timestamp": r.timestamp, "sensor_id": r.sensor_id, "value": r.value} for r in readings]
    if not rows:
        empty = pd.DataFrame(columns=list(COLUMNS))
        empty.index = pd.DatetimeIndex([], name="timestamp")
        return empty.astype({"sensor_id": "object", "value": "float64"})
    df = pd.DataFrame(rows)
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    return df.set_index("timestamp").sort_index(kind="stable")
