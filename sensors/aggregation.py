"""
Aggregations over a readings DataFrame: per-sensor averages, anomalies,
rolling means and an overall summary.

All functions expect the frame produced by sensors.readings.to_frame.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

DEFAULT_THRESHOLD = 30.0


@dataclass
class SensorSummary:
    """Overall statistics across every reading."""

    count: int
    mean: float
    minimum: float
    maximum: float
    std: float
    sensors: int


def average_by_sensor(df: pd.DataFrame) -> dict[str, float]:
    """Mean value per sensor_id, keyed in sorted sensor order."""
    if df.empty:
        return {}
    means = df.groupby("sensor_id")["value"].mean()
    return {str(k): float(v) for k, v in means.items()}


def find_anomalies(df: pd.DataFrame, threshold: float = DEFAULT_THRESHOLD) -> pd.DataFrame:
    """Rows whose value is strictly greater than threshold."""
    return df[df["value"] > threshold]


def rolling_mean(df: pd.DataFrame, window: int = 3) -> pd.Series:
    """
    Per-sensor rolling mean of value, aligned with df's rows.

    Uses min_periods=1 so the first readings of each sensor average over
    what is available.
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")
    if df.empty:
        return pd.Series([], index=df.index, dtype=float, name="rolling_mean")
    out = (
        df.reset_index(drop=True)
        .groupby("sensor_id")["value"]
        .transform(lambda s: s.rolling(window, min_periods=1).mean())
    )
    out.index = df.index
    return out.rename("rolling_mean")


def summarize(df: pd.DataFrame) -> SensorSummary:
    """Count, mean, min, max and population std of all values."""
    if df.empty:
        return SensorSummary(count=0, mean=0.0, minimum=0.0, maximum=0.0, std=0.0, sensors=0)
    values = df["value"].to_numpy(dtype=float)
    return SensorSummary(
        count=int(values.size),
        mean=float(np.mean(values)),
        minimum=float(np.min(values)),
        maximum=float(np.max(values)),
        std=float(np.std(values)),
        sensors=int(df["sensor_id"].nunique()),
    )
