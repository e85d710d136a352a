"""Query window parameter checks for status requests."""

import re
from typing import Optional, Tuple

# Largest magnitude accepted as an epoch-millisecond timestamp
MAX_EPOCH_MS = 8_640_000_000_000_000

_EPOCH_MS_PATTERN = re.compile(r"-?\d+", re.ASCII)


def _parse_epoch_ms(value: str) -> Optional[int]:
    """Parse an epoch-millisecond string, or return None if it isn't one."""
    value = value.strip()
    if not _EPOCH_MS_PATTERN.fullmatch(value):
        return None
    parsed = int(value)
    if abs(parsed) > MAX_EPOCH_MS:
        return None
    return parsed


def check_params(start: Optional[str], end: Optional[str]) -> Optional[str]:
    """
    Validate the start/end query parameters of a status request.

    Returns None when both are present, well-formed and start < end;
    otherwise the client-facing rejection message.
    """
    errors = []
    if not start:
        errors.append("Start date is required.")
    if not end:
        errors.append("End date is required.")
    if errors:
        return " ".join(errors)

    start_ms = _parse_epoch_ms(start)
    end_ms = _parse_epoch_ms(end)

    if start_ms is None:
        errors.append("Invalid start date format. Please use a valid date format.")
    if end_ms is None:
        errors.append("Invalid end date format. Please use a valid date format.")

    if start_ms is not None and end_ms is not None and start_ms >= end_ms:
        return "Start date must be less than end date."

    return " ".join(errors) if errors else None


def parse_window(start: str, end: str) -> Tuple[int, int]:
    """Convert parameters that already passed check_params."""
    return int(start.strip()), int(end.strip())
