"""Structured log records emitted as single-line JSON."""

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone


def rfc3339_now() -> str:
    """Current UTC time as RFC3339 with seconds precision, e.g. 2024-01-15T10:30:00Z."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def to_json_line(record: dict) -> str:
    """Serialize to compact single-line JSON with sorted keys."""
    return json.dumps(record, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class WarningRecord:
    message: str
    time: str = field(default_factory=rfc3339_now)
    severity: str = "WARNING"

    def to_json(self) -> str:
        return to_json_line(asdict(self))


@dataclass(frozen=True)
class ErrorRecord:
    errorType: str
    description: str
    retryable: bool = False
    timestamp: str = field(default_factory=rfc3339_now)
    severity: str = "ERROR"

    def to_json(self) -> str:
        return to_json_line(asdict(self))
