from music_queue.models.info import EntryInfo, ExtractInfo
from music_queue.models.job import DownloadJob, History

__all__ = ["DownloadJob", "EntryInfo", "ExtractInfo", "History"]
