import concurrent.futures as cf
import os
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from music_queue.downloader.media import download_job
from music_queue.exceptions import DownloadError
from music_queue.models.job import DownloadJob
from music_queue.types import AUDIO_FORMAT, StrPath

StartCallback = Callable[[DownloadJob], None]
SuccessCallback = Callable[[DownloadJob, float], None]
ErrorCallback = Callable[[DownloadJob, DownloadError], None]


@dataclass(slots=True)
class BatchResult:
    succeeded: list[DownloadJob] = field(default_factory=list)
    failed_count: int = 0
    total: int = 0

    @property
    def success_count(self) -> int:
        return len(self.succeeded)


class BatchDownloader:
    def __init__(
        self,
        command: list[str],
        threads: int | None = None,
        audio_format: str = AUDIO_FORMAT,
        on_start: StartCallback | None = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ):
        """Multi-thread audio downloader.

        Args:
            command: Command prefix invoking `yt-dlp`.
            threads: Maximum simultaneous downloads. Defaults to the CPU count.
            audio_format: Target audio format.
            on_start: Called from a worker before a job starts.
            on_success: Called with the job and elapsed seconds.
            on_error: Called with the job and the failure.
        """

        self.command = command
        self.threads = threads or os.cpu_count() or 1
        self.audio_format = audio_format

        # Callbacks
        self.on_start = on_start or (lambda job: None)
        self.on_success = on_success or (lambda job, elapsed: None)
        self.on_error = on_error or (lambda job, error: None)

    def run_batch(self, jobs: list[DownloadJob], target_dir: StrPath) -> BatchResult:
        """Download every job concurrently and wait for all of them.

        A failed job never cancels the others.

        Returns:
            Succeeded jobs stamped with their completion time and failures count.
        """

        output = Path(target_dir)
        result = BatchResult(total=len(jobs))

        if not jobs:
            return result

        done: dict[int, DownloadJob] = {}

        with cf.ThreadPoolExecutor(max_workers=self.threads) as executor:
            futures = {
                executor.submit(self._run_job, job, output): index
                for index, job in enumerate(jobs)
            }

            try:
                for future in cf.as_completed(futures):
                    index = futures[future]
                    try:
                        done[index] = future.result()
                    except DownloadError as err:
                        logger.error(
                            'Failed to download "{url}": {error}',
                            url=jobs[index].url,
                            error=err,
                        )
                        result.failed_count += 1
            except KeyboardInterrupt:
                logger.warning(
                    "❗ Canceling downloads... (press Ctrl+C again to force)"
                )
                executor.shutdown(wait=False, cancel_futures=True)
                raise

        # Keep submission order.
        result.succeeded = [done[index] for index in sorted(done)]

        logger.debug(
            "{current} of {total} downloads completed. {errors} errors.",
            current=result.success_count,
            total=result.total,
            errors=result.failed_count,
        )

        return result

    def _run_job(self, job: DownloadJob, output: Path) -> DownloadJob:
        self.on_start(job)
        start = time.monotonic()

        try:
            download_job(self.command, job, output, self.audio_format)
        except DownloadError as err:
            self.on_error(job, err)
            raise

        self.on_success(job, time.monotonic() - start)
        return job.stamped()
