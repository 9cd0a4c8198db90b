"""
Sensor monitoring example: readings published as events, anomalies flagged
by the monitor, summary computed with pandas.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from flowcore import Dispatcher, Event
from sensors import ANOMALY, SensorMonitor, SensorReading, print_report, rolling_mean


def main() -> None:
    start = datetime.now()
    stream = [
        SensorReading("sensor1", 25.5, start),
        SensorReading("sensor2", 30.2, start + timedelta(milliseconds=100)),
        SensorReading("sensor1", 26.1, start + timedelta(milliseconds=200)),
        SensorReading("sensor3", 22.8, start + timedelta(milliseconds=300)),
        SensorReading("sensor2", 31.0, start + timedelta(milliseconds=400)),
    ]

    dispatcher = Dispatcher()
    monitor = SensorMonitor(dispatcher, threshold=30.0)

    def alert(event: Event) -> None:
        print(f"  [Alert] {event.payload}")

    dispatcher.on(ANOMALY, alert)

    print("--- Real-time processing ---")
    for reading in stream:
        monitor.publish(reading)

    df = monitor.frame()
    print(f"  Values: {df['value'].tolist()}")
    print(f"  Rolling mean: {[round(v, 2) for v in rolling_mean(df, window=2)]}")
    print()
    print_report(df, threshold=monitor.threshold)


if __name__ == "__main__":
    main()
