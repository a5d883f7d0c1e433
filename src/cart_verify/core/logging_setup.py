import logging
import os
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None):
    """Configure root logging for a verification run (no-op if already configured)"""
    level_name = (level or os.getenv('LOG_LEVEL', 'INFO')).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)

    # Playwright's asyncio internals are noisy at DEBUG
    logging.getLogger('asyncio').setLevel(logging.WARNING)
