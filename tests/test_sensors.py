"""
Tests for sensors: readings frame, aggregation, monitor, report.
"""

from datetime import datetime, timedelta

import pandas as pd
import pytest

from flowcore import Dispatcher
from sensors import (
    ANOMALY,
    READING,
    SensorMonitor,
    SensorReading,
    average_by_sensor,
    find_anomalies,
    print_report,
    rolling_mean,
    summarize,
    to_frame,
)

START = datetime(2024, 1, 15, 10, 0, 0)


def _stream():
    return [
        SensorReading("sensor1", 25.5, START),
        SensorReading("sensor2", 30.2, START + timedelta(milliseconds=100)),
        SensorReading("sensor1", 26.1, START + timedelta(milliseconds=200)),
        SensorReading("sensor3", 22.8, START + timedelta(milliseconds=300)),
        SensorReading("sensor2", 31.0, START + timedelta(milliseconds=400)),
    ]


# --- Readings ---


def test_reading_parses_iso_timestamp():
    r = SensorReading("s", 1, "2024-01-15T10:00:00")
    assert r.timestamp == START
    assert r.value == 1.0
    assert str(r) == "s:1.0@2024-01-15T10:00:00"


def test_to_frame_sorted_with_datetime_index():
    df = to_frame(reversed(_stream()))
    assert list(df.columns) == ["sensor_id", "value"]
    assert isinstance(df.index, pd.DatetimeIndex)
    assert df.index.name == "timestamp"
    assert df["value"].tolist() == [25.5, 30.2, 26.1, 22.8, 31.0]


def test_to_frame_empty():
    df = to_frame([])
    assert df.empty
    assert list(df.columns) == ["sensor_id", "value"]
    assert isinstance(df.index, pd.DatetimeIndex)


# --- Aggregation ---


def test_average_by_sensor():
    avg = average_by_sensor(to_frame(_stream()))
    assert list(avg) == ["sensor1", "sensor2", "sensor3"]
    assert avg["sensor1"] == pytest.approx(25.8)
    assert avg["sensor2"] == pytest.approx(30.6)
    assert avg["sensor3"] == pytest.approx(22.8)
    assert average_by_sensor(to_frame([])) == {}


def test_find_anomalies_strictly_above():
    df = to_frame(_stream())
    assert find_anomalies(df)["value"].tolist() == [30.2, 31.0]
    assert find_anomalies(df, threshold=31.0).empty


def test_rolling_mean_per_sensor():
    df = to_frame(_stream())
    out = rolling_mean(df, window=2)
    assert out.tolist() == pytest.approx([25.5, 30.2, 25.8, 22.8, 30.6])
    assert out.index.equals(df.index)
    with pytest.raises(ValueError):
        rolling_mean(df, window=0)


def test_summarize():
    s = summarize(to_frame(_stream()))
    assert s.count == 5
    assert s.sensors == 3
    assert s.minimum == 22.8
    assert s.maximum == 31.0
    assert s.mean == pytest.approx(27.12)
    empty = summarize(to_frame([]))
    assert empty.count == 0 and empty.mean == 0.0


# --- Monitor ---


def test_monitor_records_and_flags():
    d = Dispatcher()
    monitor = SensorMonitor(d, threshold=30.0)
    alerts = []
    d.on(ANOMALY, lambda ev: alerts.append(ev.payload.sensor_id))
    for r in _stream():
        d.emit(READING, r)
    assert len(monitor.readings) == 5
    assert [r.value for r in monitor.anomalies] == [30.2, 31.0]
    assert alerts == ["sensor2", "sensor2"]
    assert len(monitor.frame()) == 5


def test_monitor_anomaly_handlers_run_before_next_reading_handler():
    d = Dispatcher()
    order = []
    monitor = SensorMonitor(d, threshold=0.0)
    d.on(READING, lambda ev: order.append("reading"))
    d.on(ANOMALY, lambda ev: order.append("anomaly"))
    monitor.publish(SensorReading("s", 1.0, START))
    assert order == ["anomaly", "reading"]


def test_monitor_rejects_bad_payload():
    d = Dispatcher()
    SensorMonitor(d)
    with pytest.raises(TypeError):
        d.emit(READING, 42.0)


# --- Report ---


def test_print_report(capsys):
    summary = print_report(to_frame(_stream()), threshold=30.0)
    out = capsys.readouterr().out
    assert summary.count == 5
    assert "--- Sensor Summary ---" in out
    assert "sensor2" in out
    assert "Anomalies (> 30): 2" in out
