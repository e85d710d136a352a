"""Status query orchestration."""

from fleet_status.service.status import StatusService

__all__ = ["StatusService"]
