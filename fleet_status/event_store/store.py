"""
Event Store — append-only log of vehicle state changes.

Behavioral Contract:
- Append-only. No event is ever modified or deleted.
- Per vehicle, events are ordered by timestamp; ties keep insertion order.
- Reads answer two questions for a query window [start, end]:
  the last event strictly before start, and every event inside the window.
- Driver failures surface as StoreError carrying the driver's message.
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

from fleet_status.models.events import Event

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the backing store cannot complete a read or write."""
    pass


class EventStore:
    """
    Vehicle status event log.
    Prototype: SQLite. Production: a hosted relational database.
    """

    def __init__(self, db_path: str = ":memory:"):
        self.db_path = db_path
        self._lock = threading.Lock()
        try:
            self._conn = sqlite3.connect(db_path, check_same_thread=False)
        except sqlite3.Error as e:
            logger.error("Cannot open event store at %s: %s", db_path, e)
            raise StoreError(str(e)) from e
        self._conn.row_factory = sqlite3.Row
        self._init_schema()

    def _init_schema(self) -> None:
        """Create the events table if it doesn't exist."""
        with self._guard():
            self._conn.execute("""
                CREATE TABLE IF NOT EXISTS events (
                    vehicle_id TEXT NOT NULL,
                    timestamp INTEGER NOT NULL,
                    event TEXT NOT NULL,
                    created_at TEXT NOT NULL DEFAULT (datetime('now'))
                )
            """)
            self._conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_events_vehicle_timestamp
                ON events(vehicle_id, timestamp)
            """)
            self._conn.commit()

    @contextmanager
    def _guard(self) -> Iterator[None]:
        """Serialize access to the connection and map driver errors.

        OverflowError covers integers wider than SQLite's 64-bit INTEGER.
        """
        with self._lock:
            try:
                yield
            except (sqlite3.Error, OverflowError) as e:
                logger.error("Event store failure: %s", e)
                raise StoreError(str(e)) from e

    def append(self, vehicle_id: str, event: Event) -> Event:
        """Append a single event to a vehicle's log."""
        self.append_many(vehicle_id, [event])
        return event

    def append_many(self, vehicle_id: str, events: Iterable[Event]) -> int:
        """Append several events in one transaction. Returns the number written."""
        rows = [(vehicle_id, e.timestamp, e.state_label) for e in events]
        with self._guard():
            self._conn.executemany(
                "INSERT INTO events (vehicle_id, timestamp, event) VALUES (?, ?, ?)",
                rows,
            )
            self._conn.commit()
        return len(rows)

    def _to_event(self, row: sqlite3.Row) -> Event:
        return Event(timestamp=row["timestamp"], state_label=row["event"])

    def find_last_before(self, vehicle_id: str, start: int) -> Optional[Event]:
        """Most recent event strictly before start, or None."""
        with self._guard():
            row = self._conn.execute(
                "SELECT timestamp, event FROM events "
                "WHERE vehicle_id = ? AND timestamp < ? "
                "ORDER BY timestamp DESC, rowid DESC LIMIT 1",
                (vehicle_id, start),
            ).fetchone()
        return self._to_event(row) if row else None

    def find_in_range(self, vehicle_id: str, start: int, end: int) -> List[Event]:
        """All events with start <= timestamp <= end, oldest first."""
        with self._guard():
            rows = self._conn.execute(
                "SELECT timestamp, event FROM events "
                "WHERE vehicle_id = ? AND timestamp >= ? AND timestamp <= ? "
                "ORDER BY timestamp, rowid",
                (vehicle_id, start, end),
            ).fetchall()
        return [self._to_event(r) for r in rows]

    def count(self, vehicle_id: Optional[str] = None) -> int:
        """Number of stored events, optionally for one vehicle."""
        with self._guard():
            if vehicle_id is None:
                row = self._conn.execute("SELECT COUNT(*) as cnt FROM events").fetchone()
            else:
                row = self._conn.execute(
                    "SELECT COUNT(*) as cnt FROM events WHERE vehicle_id = ?",
                    (vehicle_id,),
                ).fetchone()
        return row["cnt"]

    def close(self) -> None:
        """Close the database connection."""
        with self._lock:
            self._conn.close()

