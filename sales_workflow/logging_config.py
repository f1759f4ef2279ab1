"""Logging setup for entry points. Library modules only call getLogger()."""
import logging
from typing import Optional

from sales_workflow.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging.

    Args:
        level: Level name (defaults to settings.log_level)
    """
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format=LOG_FORMAT,
    )
