"""Typed domain models shared across runtime layers.

This module provides simple data contracts for the liveness surface and the
process-scoped clock used to report uptime.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass(frozen=True)
class ProcessClock:
    """Process-scoped start instant used to compute uptime.

    The start instant is captured once and never written afterwards, so the
    clock can be shared by concurrent request handlers without locking.

    Attributes:
        started_monotonic: Monotonic clock reading captured at initialization.
        monotonic: Monotonic time source, replaceable in tests.
    """

    started_monotonic: float
    monotonic: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    @classmethod
    def started(cls, monotonic: Callable[[], float] = time.monotonic) -> ProcessClock:
        """Capture the current monotonic instant as the process start.

        Args:
            monotonic: Monotonic time source.

        Returns:
            ProcessClock: Clock anchored at the current instant.
        """

        return cls(started_monotonic=monotonic(), monotonic=monotonic)

    def uptime_seconds(self) -> float:
        """Return elapsed seconds since the captured start instant.

        Returns:
            float: Non-negative elapsed seconds, non-decreasing across calls.
        """

        return max(0.0, float(self.monotonic() - self.started_monotonic))


@dataclass(frozen=True)
class HealthReport:
    """Health response contract used by the liveness endpoint.

    Attributes:
        status: Overall status text for service health.
        timestamp: ISO-8601 UTC time at which the report was built.
        uptime: Seconds elapsed since process start.
        environment: Runtime environment label.
    """

    status: str
    timestamp: str
    uptime: float
    environment: str

    def as_payload(self) -> dict[str, object]:
        """Return the JSON-ready representation of the report.

        Returns:
            dict[str, object]: Payload with `status`, `timestamp`, `uptime` and `environment` keys.
        """

        return {
            "status": self.status,
            "timestamp": self.timestamp,
            "uptime": self.uptime,
            "environment": self.environment,
        }
