from music_queue.store.history import HistoryLog
from music_queue.store.queue import JobQueue

__all__ = ["HistoryLog", "JobQueue"]
