from __future__ import annotations

import asyncio
import json
from pathlib import Path

from seedbed.telemetry import JsonlTelemetry, LoggingTelemetry, NullTelemetry, Telemetry, TelemetryEvent


def test_event_defaults():
    event = TelemetryEvent(name="seedbed:start", payload={"verbose": False})
    assert event.event_id
    assert event.timestamp.tzinfo is not None


def test_sinks_satisfy_protocol(tmp_path: Path):
    for sink in (NullTelemetry(), LoggingTelemetry(), JsonlTelemetry(tmp_path / "events.jsonl")):
        assert isinstance(sink, Telemetry)


def test_jsonl_telemetry_appends_events(tmp_path: Path):
    sink = JsonlTelemetry(tmp_path / "logs" / "events.jsonl")
    asyncio.run(sink.init())
    sink.event("seedbed:start", {"version": "0.1.0", "skipInstall": True})
    sink.event("seedbed:success", {"version": "0.1.0"})

    records = [json.loads(line) for line in sink.path.read_text(encoding="utf-8").splitlines()]
    assert [record["name"] for record in records] == ["seedbed:start", "seedbed:success"]
    assert records[0]["payload"] == {"version": "0.1.0", "skipInstall": True}


def test_logging_telemetry_logs_at_debug(caplog):
    caplog.set_level("DEBUG", logger="seedbed.telemetry")
    LoggingTelemetry().event("seedbed:success", {"version": "0.1.0"})
    assert "seedbed:success" in caplog.text
