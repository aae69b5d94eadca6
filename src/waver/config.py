import logging
import os

DEFAULT_SAMPLE_RATE = 44100
DEFAULT_BIT_DEPTH = 'int16'
DEFAULT_SAMPLE_COUNT = 16

LOG_FORMAT = "[%(asctime)s] %(levelname)s:%(name)s: %(message)s"


def configure_logging(level=None):
    """Set up root logging, the level falls back to $LOG_LEVEL and then INFO."""
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format=LOG_FORMAT,
    )
