import threading
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from music_queue.models.job import DownloadJob, History
from music_queue.path import HISTORY_FILE, write_text
from music_queue.types import StrPath


class HistoryLog:
    """Completed downloads, rewritten to disk on every append."""

    def __init__(self, file: StrPath = HISTORY_FILE):
        self.file = Path(file)
        self._history = self._read()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._history.downloads)

    @property
    def downloads(self) -> list[DownloadJob]:
        with self._lock:
            return list(self._history.downloads)

    def recent(self, limit: int = 10) -> list[tuple[int, DownloadJob]]:
        """Newest entries first, paired with their 1-based position."""

        with self._lock:
            numbered = list(enumerate(self._history.downloads, start=1))

        return numbered[::-1][:limit]

    def add(self, job: DownloadJob) -> DownloadJob:
        """Append `job` stamped with the current time and persist the log."""

        return self.extend([job])[0]

    def extend(self, jobs: list[DownloadJob]) -> list[DownloadJob]:
        entries = [job.stamped() for job in jobs]

        with self._lock:
            self._history.downloads.extend(entries)
            try:
                self._write()
            except OSError as err:
                logger.error("Failed to save download history: {error}", error=err)

        return entries

    def reload(self) -> None:
        history = self._read()
        with self._lock:
            self._history = history

    def _read(self) -> History:
        if not self.file.is_file():
            return History()

        try:
            return History.from_json(self.file.read_bytes())
        except (OSError, ValidationError) as err:
            logger.warning(
                'Error parsing history file "{file}": {error}',
                file=self.file,
                error=err,
            )
            return History()

    def _write(self) -> None:
        write_text(self.file, self._history.to_json())
