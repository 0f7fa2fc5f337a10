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


class MacProvider(ToolProvider):
    name = "macos"

    @property
    def search_paths(self) -> list[Path]:
        return [
            Path("/opt/homebrew/bin"),
            Path("/usr/local/bin"),
            Path.home() / ".local" / "bin",
        ]

    def install(self, tool: TOOL) -> None:
        logger.info("Installing {tool} via Homebrew...", tool=tool)
        if run_command("brew", "install", tool):
            return

        if tool != "yt-dlp":
            raise InstallError(f"Failed to install {tool} with Homebrew.")

        logger.info("Installing yt-dlp directly...")
        download_file(
            YT_DLP_RELEASE + "yt-dlp_macos",
            Path.home() / ".local" / "bin" / "yt-dlp",
        )
