"""Run the Fleet Status API server."""

import logging

import uvicorn

from fleet_status.api.app import create_app
from fleet_status.models.config import ServiceConfig


def main() -> None:
    config = ServiceConfig.from_env()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(
        "Starting Fleet Status API on http://%s:%d", config.host, config.port
    )
    uvicorn.run(create_app(config=config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
