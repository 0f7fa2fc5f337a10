import subprocess
from pathlib import Path

from loguru import logger

from music_queue.exceptions import DownloadError
from music_queue.messages import format_error_message
from music_queue.models.job import DownloadJob
from music_queue.types import AUDIO_FORMAT, OUTPUT_TEMPLATE, StrPath


def build_arguments(
    command: list[str],
    job: DownloadJob,
    output: StrPath,
    audio_format: str = AUDIO_FORMAT,
) -> list[str]:
    """Full `yt-dlp` command line that fetches `job` as tagged audio."""

    return [
        *command,
        "--extract-audio",
        "--audio-format",
        audio_format,
        "--embed-metadata",
        "--embed-thumbnail",
        "--output",
        OUTPUT_TEMPLATE,
        "--paths",
        str(output),
        "--no-progress",
        job.url,
    ]


def download_job(
    command: list[str],
    job: DownloadJob,
    output: StrPath,
    audio_format: str = AUDIO_FORMAT,
) -> None:
    """Fetch and transcode `job` into `output`. Blocks until the tool exits.

    Raises:
        DownloadError: Tool couldn't be spawned or exited with an error.
    """

    args = build_arguments(command, job, Path(output), audio_format)
    logger.debug("Running: {args}", args=" ".join(args))

    try:
        process = subprocess.run(
            args,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as err:
        raise DownloadError(f"Unable to run {command[0]}: {err}")

    if process.returncode != 0:
        raise DownloadError(
            format_error_message(
                process.stderr,
                fallback=f"Exit status {process.returncode}.",
            )
        )
