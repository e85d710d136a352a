"""
Fleet Status API — FastAPI endpoints.

Exposes:
- Vehicle status timelines over a time window
- Event ingestion into the append-only status log
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from fleet_status.event_store.store import EventStore, StoreError
from fleet_status.models.config import ServiceConfig
from fleet_status.models.events import Event
from fleet_status.service.status import StatusService
from fleet_status.validation.params import MAX_EPOCH_MS, check_params, parse_window

logger = logging.getLogger(__name__)


# --- Request/Response Models ---

class EventIngestRequest(BaseModel):
    timestamp: int = Field(ge=-MAX_EPOCH_MS, le=MAX_EPOCH_MS)
    event: str


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


# --- Application Factory ---

def create_app(
    event_store: Optional[EventStore] = None,
    config: Optional[ServiceConfig] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Fleet Status API",
        description="Vehicle state timelines from sparse status events",
        version="0.1.0",
    )

    cfg = config or ServiceConfig()
    store = event_store or EventStore(db_path=cfg.db_path)
    service = StatusService(store)

    # Store components on app state for access in endpoints
    app.state.config = cfg
    app.state.event_store = store
    app.state.status_service = service

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.info("Store failure for %s: %s", request.url.path, exc)
        return _error(str(exc))

    # === STATUS ===

    @app.get("/status/vehicles/")
    def missing_vehicle_id():
        """Reject status requests that name no vehicle."""
        return _error("Vehicle id is required.")

    @app.get("/status/vehicles/{vehicle_id}")
    async def get_vehicle_status(
        vehicle_id: str,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ):
        """Gap-free status intervals for a vehicle across [start, end]."""
        message = check_params(start, end)
        if message:
            logger.info("Rejected status request for %s: %s", vehicle_id, message)
            return _error(message)

        start_ms, end_ms = parse_window(start, end)
        intervals = await service.get_status(vehicle_id, start_ms, end_ms)
        return [i.to_wire() for i in intervals]

    # === EVENTS ===

    @app.post("/status/vehicles/{vehicle_id}/events")
    def ingest_event(vehicle_id: str, req: EventIngestRequest):
        """Append a status change to the vehicle's log."""
        event = store.append(vehicle_id, Event(timestamp=req.timestamp, state_label=req.event))
        return {
            "status": "appended",
            "vehicle_id": vehicle_id,
            "event": {"timestamp": event.timestamp, "event": event.state_label},
        }

    return app


# Default application instance
app = create_app()
