"""
Sensor report: print a summary of a readings DataFrame.
"""

from __future__ import annotations

import pandas as pd

from sensors.aggregation import (
    DEFAULT_THRESHOLD,
    SensorSummary,
    average_by_sensor,
    find_anomalies,
    summarize,
)


def print_report(df: pd.DataFrame, *, threshold: float = DEFAULT_THRESHOLD) -> SensorSummary:
    """
    Print per-sensor averages, anomalies and overall statistics.

    Parameters
    ----------
    df : pd.DataFrame
        Readings frame from sensors.readings.to_frame.
    threshold : float
        Values strictly above this are listed as anomalies (default 30.0).

    Returns
    -------
    SensorSummary
        The computed summary (e.g. for programmatic use).
    """
    summary = summarize(df)
    anomalies = find_anomalies(df, threshold)
    print("--- Sensor Summary ---")
    print(f"Readings:        {summary.count}")
    print(f"Sensors:         {summary.sensors}")
    print(f"Mean value:      {summary.mean:.2f}")
    print(f"Range:           {summary.minimum:.2f} .. {summary.maximum:.2f}")
    print(f"Std dev:         {summary.std:.2f}")
    for sensor_id, mean in average_by_sensor(df).items():
        print(f"  {sensor_id:<12}  avg {mean:.2f}")
    print(f"Anomalies (> {threshold:g}): {len(anomalies)}")
    for ts, row in anomalies.iterrows():
        print(f"  {row['sensor_id']} {row['value']:.2f} at {ts}")
    print("----------------------")
    return summary
