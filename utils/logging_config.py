"""
Logging Configuration

Sets up the root logger once for the whole application. Other modules
only call logging.getLogger(__name__).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Libraries that log too much at INFO
NOISY_LOGGERS = ['sqlalchemy.engine', 'alembic', 'werkzeug']


def setup_logging(level='INFO'):
    """Configure the root logger. Safe to call more than once."""
    root = logging.getLogger()

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        root.addHandler(handler)

    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
