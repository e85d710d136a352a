"""Interval construction over status event logs."""

from fleet_status.timeline.builder import build_intervals

__all__ = ["build_intervals"]
