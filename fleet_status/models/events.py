"""Vehicle status events and the intervals derived from them."""

from pydantic import BaseModel, ConfigDict, model_validator


# Reserved state label for spans with no recorded state
NO_DATA = "no_data"


class Event(BaseModel):
    """A single state change recorded for a vehicle."""

    model_config = ConfigDict(frozen=True)

    timestamp: int                          # Epoch milliseconds
    state_label: str                        # e.g., "drive", "idle"


class Interval(BaseModel):
    """A contiguous span of time during which a vehicle held one state."""

    model_config = ConfigDict(frozen=True)

    state_label: str
    from_ms: int
    to_ms: int

    @model_validator(mode="after")
    def _check_bounds(self) -> "Interval":
        if self.from_ms > self.to_ms:
            raise ValueError(
                f"Interval starts after it ends: {self.from_ms} > {self.to_ms}"
            )
        return self

    def to_wire(self) -> dict:
        return {
            "event": self.state_label,
            "from": self.from_ms,
            "to": self.to_ms,
        }
