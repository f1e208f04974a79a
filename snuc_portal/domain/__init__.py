"""Domain models used across application layer boundaries."""

from .health import HEALTHY_STATUS, domain_build_health_report, domain_format_timestamp
from .models import HealthReport, ProcessClock

__all__ = [
    "HEALTHY_STATUS",
    "HealthReport",
    "ProcessClock",
    "domain_build_health_report",
    "domain_format_timestamp",
]
