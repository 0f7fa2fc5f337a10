"""Music-Queue exceptions."""


class MusicQueueError(Exception):
    """Base exception."""


class CatalogError(MusicQueueError):
    """Language table missing or malformed."""


class ExtractError(MusicQueueError, ConnectionError):
    """Extraction error."""


class DownloadError(MusicQueueError, ConnectionError):
    """Download error."""


class ToolNotFoundError(MusicQueueError, FileNotFoundError):
    """External tool not available."""


class InstallError(MusicQueueError):
    """Tool installation failed."""
