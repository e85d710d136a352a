"""Fleet status data models."""

from fleet_status.models.config import ServiceConfig
from fleet_status.models.events import NO_DATA, Event, Interval

__all__ = [
    "Event",
    "Interval",
    "NO_DATA",
    "ServiceConfig",
]
