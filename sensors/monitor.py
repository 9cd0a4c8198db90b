"""
Sensor monitor: collects readings published on a dispatcher and raises
anomaly events for values above a threshold.
"""

from __future__ import annotations

import logging

import pandas as pd

from flowcore.dispatcher import Dispatcher
from flowcore.events import Event
from sensors.aggregation import DEFAULT_THRESHOLD
from sensors.readings import SensorReading, to_frame

logger = logging.getLogger(__name__)

READING = "sensor.reading"
ANOMALY = "sensor.anomaly"


class SensorMonitor:
    """
    Subscribes to sensor.reading. Every reading is recorded; readings with
    value > threshold are also emitted as sensor.anomaly (re-entrant, so
    anomaly handlers finish before the reading's emit returns).
    """

    def __init__(self, dispatcher: Dispatcher, *, threshold: float = DEFAULT_THRESHOLD) -> None:
        self.dispatcher = dispatcher
        self.threshold = threshold
        self.readings: list[SensorReading] = []
        self.anomalies: list[SensorReading] = []
        dispatcher.on(READING, self._on_reading)

    def _on_reading(self, event: Event) -> None:
        reading = event.payload
        if not isinstance(reading, SensorReading):
            raise TypeError(f"{READING} payload must be a SensorReading, got {type(reading).__name__}")
        self.readings.append(reading)
        if reading.value > self.threshold:
            self.anomalies.append(reading)
            logger.warning("Anomaly on %s: %s > %s", reading.sensor_id, reading.value, self.threshold)
            self.dispatcher.emit(ANOMALY, reading)

    def publish(self, reading: SensorReading) -> None:
        """Convenience: emit one reading on the monitored dispatcher."""
        self.dispatcher.emit(READING, reading)

    def frame(self) -> pd.DataFrame:
        """Readings recorded so far, as a DataFrame."""
        return to_frame(self.readings)
