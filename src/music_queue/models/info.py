"""Subset of the `yt-dlp --dump-single-json` output."""

from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from music_queue.models.job import DownloadJob

URL_CHOICES = ["webpage_url", "original_url", "url"]
PLAYLISTS_EXTRACTORS = ["YoutubeTab"]


class _Info(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: Annotated[str, Field(alias="_type")] = "video"
    title: str | None = None


class EntryInfo(_Info):
    url: Annotated[str | None, Field(validation_alias=AliasChoices(*URL_CHOICES))] = (
        None
    )

    def to_job(self) -> DownloadJob | None:
        if not self.url:
            return None
        return DownloadJob(url=self.url, title=self.title)


class ExtractInfo(_Info):
    extractor_key: Annotated[
        str | None,
        Field(validation_alias=AliasChoices("extractor_key", "ie_key")),
    ] = None
    entries: list[EntryInfo | None] | None = None

    @property
    def is_playlist(self) -> bool:
        return (
            self.type in ("playlist", "multi_video")
            or self.extractor_key in PLAYLISTS_EXTRACTORS
            or self.entries is not None
        )
