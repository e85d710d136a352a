"""
Status Service — answers "what state was vehicle X in across [start, end]?"

Reads the anchor event and the in-window events from the event store
concurrently, then hands both to the interval builder. Store failures
propagate unchanged; the builder is not run on a failed read.
"""

import asyncio
import logging
from typing import List

from fleet_status.event_store.store import EventStore
from fleet_status.models.events import Interval
from fleet_status.timeline.builder import build_intervals

logger = logging.getLogger(__name__)


class StatusService:
    """Stateless per-request orchestration over an injected event store."""

    def __init__(self, event_store: EventStore):
        self.event_store = event_store

    async def get_status(self, vehicle_id: str, start: int, end: int) -> List[Interval]:
        """Build the interval sequence for a vehicle over the window [start, end]."""
        logger.debug("Status query for %s over [%d, %d]", vehicle_id, start, end)

        anchor_event, window_events = await asyncio.gather(
            asyncio.to_thread(self.event_store.find_last_before, vehicle_id, start),
            asyncio.to_thread(self.event_store.find_in_range, vehicle_id, start, end),
        )

        return build_intervals(vehicle_id, start, end, anchor_event, window_events)
