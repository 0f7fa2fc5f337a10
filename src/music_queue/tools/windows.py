import os
from pathlib import Path

from loguru import logger

from music_queue.exceptions import InstallError
from music_queue.tools.base import (
    YT_DLP_RELEASE,
    ToolProvider,
    download_file,
    run_command,
)
from music_queue.types import TOOL

WINGET_IDS: dict[TOOL, str] = {"yt-dlp": "yt-dlp.yt-dlp", "ffmpeg": "Gyan.FFmpeg"}


def local_appdata() -> Path:
    if path := os.environ.get("LOCALAPPDATA"):
        return Path(path)
    return Path.home() / "AppData" / "Local"


class WindowsProvider(ToolProvider):
    name = "windows"
    suffix = ".exe"

    @property
    def search_paths(self) -> list[Path]:
        return [local_appdata() / "yt-dlp"]

    def install(self, tool: TOOL) -> None:
        logger.info("Installing {tool} via winget...", tool=tool)
        if run_command("winget", "install", "--exact", "--id", WINGET_IDS[tool]):
            return

        if tool != "yt-dlp":
            raise InstallError(f"Failed to install {tool} with winget.")

        logger.info("Installing yt-dlp directly...")
        download_file(
            YT_DLP_RELEASE + "yt-dlp.exe",
            local_appdata() / "yt-dlp" / "yt-dlp.exe",
        )
