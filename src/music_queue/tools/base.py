import importlib.util
import os
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path

import requests
from loguru import logger

from music_queue.exceptions import InstallError, ToolNotFoundError
from music_queue.types import TOOL

YT_DLP_RELEASE = "https://github.com/yt-dlp/yt-dlp/releases/latest/download/"


def check_executable_exists(file: Path) -> bool:
    if file.is_file() and os.access(file, os.X_OK):
        return True
    else:
        return False


def run_command(*args: str) -> bool:
    """Run an installer command, attached to the terminal."""

    logger.debug("Running: {command}", command=" ".join(args))

    try:
        return subprocess.run(args, check=False).returncode == 0
    except OSError as err:
        logger.debug("{command} failed: {error}", command=args[0], error=err)
        return False


def download_file(url: str, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)

    try:
        with requests.get(url, stream=True, timeout=30) as response:
            response.raise_for_status()
            with target.open("wb") as file:
                for chunk in response.iter_content(chunk_size=1 << 16):
                    file.write(chunk)
    except (requests.RequestException, OSError) as err:
        raise InstallError(f"Unable to download {url}: {err}")

    target.chmod(target.stat().st_mode | 0o111)
    logger.info('Installed to "{path}".', path=target)


class ToolProvider(ABC):
    """Locate external tools and install them if needed."""

    name: str = "generic"
    suffix: str = ""

    def __init__(self):
        self._found: dict[TOOL, list[str]] = {}

    @property
    def search_paths(self) -> list[Path]:
        """Directories checked when a tool isn't in `PATH`."""

        return []

    def executable(self, tool: TOOL) -> str:
        return tool + self.suffix

    def locate(self, tool: TOOL) -> list[str] | None:
        """Command prefix to invoke `tool`, or `None` if unavailable."""

        if tool in self._found:
            return self._found[tool]

        command = None

        if path := shutil.which(self.executable(tool)):
            command = [path]
        else:
            for directory in self.search_paths:
                file = directory / self.executable(tool)
                if check_executable_exists(file):
                    command = [str(file)]
                    break

        if not command and tool == "yt-dlp" and importlib.util.find_spec("yt_dlp"):
            command = [sys.executable, "-m", "yt_dlp"]

        if command:
            self._found[tool] = command

        return command

    def ensure(self, tool: TOOL) -> list[str]:
        """Get a command prefix for `tool`, installing it first if needed.

        Raises:
            ToolNotFoundError: Installation failed or tool still missing afterwards.
        """

        if command := self.locate(tool):
            return command

        logger.warning(
            "{tool} is not installed or not found. Attempting to install...",
            tool=tool,
        )

        try:
            self.install(tool)
        except InstallError as err:
            raise ToolNotFoundError(f"Failed to install {tool}: {err}")

        if command := self.locate(tool):
            logger.info("{tool} installed successfully.", tool=tool)
            return command

        raise ToolNotFoundError(
            f"{tool} was not found after installation. Please install it manually."
        )

    @abstractmethod
    def install(self, tool: TOOL) -> None:
        """Install `tool` with the platform's package manager.

        Raises:
            InstallError: No installation method succeeded.
        """
