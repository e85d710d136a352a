"""Append-only storage for vehicle status events."""

from fleet_status.event_store.store import EventStore, StoreError

__all__ = ["EventStore", "StoreError"]
