"""Request parameter validation."""

from fleet_status.validation.params import check_params, parse_window

__all__ = ["check_params", "parse_window"]
