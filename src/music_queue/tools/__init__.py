"""Platform specific discovery and installation of `yt-dlp` and `ffmpeg`."""

import sys

from music_queue.tools.base import ToolProvider
from music_queue.tools.linux import LinuxProvider
from music_queue.tools.macos import MacProvider
from music_queue.tools.windows import WindowsProvider


def select_provider(platform: str = sys.platform) -> ToolProvider:
    if platform.startswith("win"):
        return WindowsProvider()
    elif platform == "darwin":
        return MacProvider()
    else:
        return LinuxProvider()


__all__ = [
    "LinuxProvider",
    "MacProvider",
    "ToolProvider",
    "WindowsProvider",
    "select_provider",
]
