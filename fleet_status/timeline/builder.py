"""
Interval Builder — turns a sparse status log into a gap-free timeline.

Given a query window, the last event before the window (the anchor) and the
events inside the window, produces an ordered sequence of intervals that
covers the window exactly.

Behavioral Contract:
- First interval starts at the window start, last interval ends at the window end.
- Adjacent intervals touch: interval[i].to_ms == interval[i + 1].from_ms.
- Consecutive in-window events with the same state collapse into one interval.
- The anchor interval is never merged into the first in-window interval.
- An empty window yields a single NO_DATA interval, anchor or not.
- Pure: no I/O, no shared state, never raises on well-formed input.
"""

import logging
from functools import reduce
from typing import List, NamedTuple, Optional, Sequence, Tuple

from fleet_status.models.events import NO_DATA, Event, Interval

logger = logging.getLogger(__name__)


class _MergeState(NamedTuple):
    """Accumulator threaded through the merge fold."""

    intervals: Tuple[Interval, ...]
    previous_timestamp: int
    previous_label: str


def _merge_step(state: _MergeState, event: Event) -> _MergeState:
    """Extend the current run or open a new interval for one event."""
    t = event.timestamp

    if event.state_label == state.previous_label:
        if state.intervals:
            last = state.intervals[-1]
            intervals = state.intervals[:-1] + (last.model_copy(update={"to_ms": t}),)
        else:
            # Same state as the anchor: open the first run at the first event
            intervals = (Interval(
                state_label=event.state_label,
                from_ms=state.previous_timestamp,
                to_ms=t,
            ),)
        return _MergeState(intervals, t, state.previous_label)

    opened = Interval(
        state_label=event.state_label,
        from_ms=state.previous_timestamp,
        to_ms=t,
    )
    return _MergeState(state.intervals + (opened,), t, event.state_label)


def build_intervals(
    entity_id: str,
    start: int,
    end: int,
    anchor_event: Optional[Event],
    window_events: Sequence[Event],
) -> List[Interval]:
    """
    Build the interval sequence for one entity over [start, end].

    window_events must be ascending by timestamp with start <= t <= end;
    anchor_event, when given, must lie strictly before start.
    """
    if not window_events:
        logger.debug("No events for %s in [%d, %d]", entity_id, start, end)
        return [Interval(state_label=NO_DATA, from_ms=start, to_ms=end)]

    first_timestamp = window_events[0].timestamp
    anchor = Interval(
        state_label=anchor_event.state_label if anchor_event else NO_DATA,
        from_ms=start,
        to_ms=first_timestamp,
    )

    merged = reduce(
        _merge_step,
        window_events,
        _MergeState((), first_timestamp, anchor.state_label),
    ).intervals

    # Clamp the final run to the window end
    closing = merged[-1].model_copy(update={"to_ms": end})
    intervals = [anchor, *merged[:-1], closing]

    logger.debug(
        "Built %d intervals for %s from %d events",
        len(intervals), entity_id, len(window_events),
    )
    return intervals
