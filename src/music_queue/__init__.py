"""Music-Queue. Queue video URLs and download them as tagged audio files."""

from loguru import logger

__version__ = "0.3.0"

logger.disable("music_queue")
