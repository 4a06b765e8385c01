"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; this configures the
root handler once at application start.
"""

import logging
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging from ``settings.LOG_LEVEL`` (or *level*)."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
    # SQL echo is driven by settings.DEBUG on the engine, keep it out of INFO noise otherwise
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
