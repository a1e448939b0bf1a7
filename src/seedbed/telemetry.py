"""Analytics events emitted while bootstrapping projects."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Protocol, Union, runtime_checkable
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeAliasType

__all__ = [
    "JSONValue",
    "JsonlTelemetry",
    "LoggingTelemetry",
    "NullTelemetry",
    "Telemetry",
    "TelemetryEvent",
]


LOGGER = logging.getLogger(__name__)

JSONPrimitive = Union[str, int, float, bool, None]
JSONValue = TypeAliasType("JSONValue", Union[JSONPrimitive, Dict[str, "JSONValue"], List["JSONValue"]])


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TelemetryEvent(BaseModel):
    """Single analytics event."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    event_id: str = Field(default_factory=lambda: uuid4().hex, description="Unique identifier for the event.")
    name: str = Field(..., description="Event name such as ``seedbed:start``.")
    timestamp: datetime = Field(default_factory=_utcnow, description="Timestamp for the event in UTC.")
    payload: Dict[str, JSONValue] = Field(default_factory=dict, description="Structured data describing the run.")


@runtime_checkable
class Telemetry(Protocol):
    """Sink for bootstrap analytics."""

    async def init(self) -> None:
        """Prepare the sink before any event is sent."""

    def event(self, name: str, payload: Dict[str, JSONValue]) -> None:
        """Send an event without waiting for delivery."""


class NullTelemetry:
    """Discard every event."""

    async def init(self) -> None:
        return None

    def event(self, name: str, payload: Dict[str, JSONValue]) -> None:
        return None


class LoggingTelemetry:
    """Report events through :mod:`logging` at debug level."""

    async def init(self) -> None:
        return None

    def event(self, name: str, payload: Dict[str, JSONValue]) -> None:
        event = TelemetryEvent(name=name, payload=payload)
        LOGGER.debug("telemetry %s %s", event.name, event.model_dump_json())


class JsonlTelemetry:
    """Append events as JSON lines to a file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def init(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def event(self, name: str, payload: Dict[str, JSONValue]) -> None:
        event = TelemetryEvent(name=name, payload=payload)
        record = event.model_dump(mode="json")
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False, sort_keys=True))
            handle.write("\n")
