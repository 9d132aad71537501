# cookbook/core/config.py
from __future__ import annotations

import logging
import os

APP_TITLE: str = os.getenv("APP_TITLE", "Cookbook")
HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "8080"))

# "this string is cooked" is what clients of /parse expect on a blank name
PARSE_FAILURE_DETAIL: str = os.getenv("PARSE_FAILURE_DETAIL", "this string is cooked")

# Global logging (module-level loggers inherit this)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
LOGGER = logging.getLogger("cookbook")
