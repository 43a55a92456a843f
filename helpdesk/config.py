"""Environment configuration loaded once at import time."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

APP_TITLE = os.getenv("HELPDESK_APP_TITLE", "Blog Help Center")
LOG_LEVEL = os.getenv("HELPDESK_LOG_LEVEL", "INFO").upper()


def log_level() -> int:
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO
