"""Info extraction through `yt-dlp --dump-single-json`."""

import subprocess

from loguru import logger
from pydantic import ValidationError

from music_queue.exceptions import ExtractError
from music_queue.messages import format_error_message
from music_queue.models.info import ExtractInfo
from music_queue.models.job import DownloadJob
from music_queue.types import SOCKET_TIMEOUT


class MediaExtractor:
    def __init__(self, command: list[str], socket_timeout: int = SOCKET_TIMEOUT):
        """Fetch titles and playlist entries without downloading.

        Args:
            command: Command prefix invoking `yt-dlp`.
            socket_timeout: Seconds to wait on network sockets.
        """

        self.command = command
        self.socket_timeout = socket_timeout

    def fetch_info(self, url: str) -> DownloadJob:
        """Job for a single video, with its title resolved."""

        logger.debug("Fetching video info: {url}", url=url)
        info = self._dump(url)
        return DownloadJob(url=url, title=info.title)

    def fetch_playlist(self, url: str) -> list[DownloadJob]:
        """Jobs for every playlist entry, or a single job if `url` is a video."""

        logger.debug("Extract URL: {url}", url=url)
        info = self._dump(url, "--flat-playlist")

        if not info.is_playlist:
            return [DownloadJob(url=url, title=info.title)]

        entries = [entry.to_job() for entry in info.entries or [] if entry]
        jobs = [job for job in entries if job]

        if not jobs:
            raise ExtractError("No videos found in playlist.")

        logger.info(
            'Found playlist: "{title}" ({count} videos).',
            title=info.title or "Unknown",
            count=len(jobs),
        )
        return jobs

    def _dump(self, url: str, *flags: str) -> ExtractInfo:
        args = [
            *self.command,
            "--dump-single-json",
            "--no-warnings",
            *flags,
            "--socket-timeout",
            str(self.socket_timeout),
            url,
        ]

        try:
            process = subprocess.run(
                args,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as err:
            raise ExtractError(f"Unable to run {self.command[0]}: {err}")

        if process.returncode != 0:
            raise ExtractError(format_error_message(process.stderr))

        try:
            return ExtractInfo.model_validate_json(process.stdout)
        except ValidationError:
            raise ExtractError(f"{url} return nothing.")
