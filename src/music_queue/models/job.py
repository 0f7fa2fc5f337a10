from datetime import datetime

from typing_extensions import Self

from music_queue.models.base import Serializable
from music_queue.types import UNKNOWN


def timestamp() -> str:
    """Current local time in the locale's date and time representation."""

    return datetime.now().astimezone().strftime("%c")


class DownloadJob(Serializable):
    """A queued or completed download, identified by its URL."""

    url: str
    title: str | None = None
    downloaded_at: str | None = None

    @property
    def display_title(self) -> str:
        return self.title or UNKNOWN

    def same_source(self, other: "DownloadJob") -> bool:
        return self.url == other.url

    def stamped(self) -> Self:
        """Copy marked as completed now."""

        return self.model_copy(update={"downloaded_at": timestamp()})


class History(Serializable):
    downloads: list[DownloadJob] = []
