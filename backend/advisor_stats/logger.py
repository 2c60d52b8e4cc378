"""
Logging configuration.
"""
import logging
import sys

from advisor_stats.config import settings

# Create logger
logger = logging.getLogger("advisor_stats")
logger.setLevel(settings.LOG_LEVEL)

# Console handler (stderr, stdout carries the report)
console_handler = logging.StreamHandler(sys.stderr)
console_handler.setLevel(settings.LOG_LEVEL)

# Formatter
formatter = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
console_handler.setFormatter(formatter)

# Add handler
if not logger.handlers:
    logger.addHandler(console_handler)
