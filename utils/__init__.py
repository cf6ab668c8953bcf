# Utility modules for the blog options app
from .logging_config import setup_logging
