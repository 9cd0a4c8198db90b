"""
Sensor stream processing on top of flowcore.

Readings are published through a Dispatcher; a monitor collects them and
flags anomalies; pandas does the aggregation.
"""

from sensors.readings import SensorReading, to_frame
from sensors.aggregation import (
    SensorSummary,
    average_by_sensor,
    find_anomalies,
    rolling_mean,
    summarize,
)
from sensors.monitor import ANOMALY, READING, SensorMonitor
from sensors.report import print_report

__all__ = [
    "ANOMALY",
    "READING",
    "SensorMonitor",
    "SensorReading",
    "SensorSummary",
    "average_by_sensor",
    "find_anomalies",
    "print_report",
    "rolling_mean",
    "summarize",
    "to_frame",
]
