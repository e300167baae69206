from __future__ import annotations

import logging

from . import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging() -> None:
    # basicConfig is a no-op once the root logger has handlers (uvicorn, pytest).
    logging.basicConfig(level=config.log_level(), format=LOG_FORMAT)
    logging.getLogger("httpx").setLevel(logging.WARNING)
