from os import PathLike
from typing import Literal

LOGGING_LEVELS = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# TOOLS
TOOL = Literal["yt-dlp", "ffmpeg"]
AUDIO_FORMAT = "mp3"
OUTPUT_TEMPLATE = "%(title)s.%(ext)s"
SOCKET_TIMEOUT = 15
"""Seconds passed to `--socket-timeout` when fetching info."""

# Extra
APPNAME = "music-queue"
UNKNOWN = "Unknown"
StrPath = str | PathLike[str]
