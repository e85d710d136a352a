"""Fleet Status — vehicle state timelines from sparse status events."""

__version__ = "0.1.0"
