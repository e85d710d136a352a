"""Service configuration."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field


class ServiceConfig(BaseModel):
    """Configuration for the status service and its HTTP server."""

    db_path: str = ":memory:"
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        """Build a config from FLEET_STATUS_* environment variables."""
        env = os.environ if environ is None else environ
        overrides = {}
        for field in ("db_path", "host", "port", "log_level"):
            value = env.get(f"FLEET_STATUS_{field.upper()}")
            if value:
                overrides[field] = value
        return cls(**overrides)
