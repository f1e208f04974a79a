"""Health report helper utilities."""

from __future__ import annotations

from datetime import datetime, timezone

from .models import HealthReport, ProcessClock

HEALTHY_STATUS = "healthy"


def domain_format_timestamp(moment: datetime) -> str:
    """Serialize a moment as ISO-8601 UTC with millisecond precision.

    Args:
        moment: Timezone-aware or naive-UTC datetime.

    Returns:
        str: Timestamp such as `2026-10-19T12:00:00.123Z`.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def domain_build_health_report(
    process_clock: ProcessClock,
    environment_name: str,
    now: datetime | None = None,
) -> HealthReport:
    """Build one freshly computed health report.

    Args:
        process_clock: Process-scoped clock used for uptime.
        environment_name: Runtime environment label.
        now: Optional current time override.

    Returns:
        HealthReport: Report with `healthy` status.
    """

    current_time = now or datetime.now(timezone.utc)
    return HealthReport(
        status=HEALTHY_STATUS,
        timestamp=domain_format_timestamp(current_time),
        uptime=process_clock.uptime_seconds(),
        environment=environment_name,
    )
