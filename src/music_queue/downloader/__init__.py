from music_queue.downloader.bulk import BatchDownloader, BatchResult
from music_queue.downloader.media import build_arguments, download_job

__all__ = ["BatchDownloader", "BatchResult", "build_arguments", "download_job"]
