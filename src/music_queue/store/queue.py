import threading
from collections import deque

from loguru import logger

from music_queue.models.job import DownloadJob


class JobQueue:
    """Live buffer of jobs waiting for the next batch."""

    def __init__(self):
        self._jobs: deque[DownloadJob] = deque()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    def __contains__(self, job: DownloadJob) -> bool:
        with self._lock:
            return any(item.same_source(job) for item in self._jobs)

    def add(self, job: DownloadJob) -> bool:
        """Append `job` unless a job with the same URL is already queued.

        Returns:
            `False` if rejected as a duplicate.
        """

        with self._lock:
            if any(item.same_source(job) for item in self._jobs):
                logger.debug("Already queued: {url}", url=job.url)
                return False

            self._jobs.append(job)
            return True

    def snapshot(self) -> list[DownloadJob]:
        with self._lock:
            return list(self._jobs)

    def drain(self) -> list[DownloadJob]:
        """Remove and return every queued job, oldest first."""

        with self._lock:
            jobs = list(self._jobs)
            self._jobs.clear()
            return jobs

    def clear(self) -> int:
        with self._lock:
            count = len(self._jobs)
            self._jobs.clear()
            return count
