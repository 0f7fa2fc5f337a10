"""Persistent user preferences."""

from pathlib import Path

from loguru import logger
from pydantic import Field, PrivateAttr, ValidationError
from typing_extensions import Self

from music_queue.i18n.language import DEFAULT_LANGUAGE, Language
from music_queue.models.base import Serializable
from music_queue.path import CONFIG_FILE, default_music_dir, write_text
from music_queue.types import StrPath


class Settings(Serializable):
    """User settings. Every setter writes the file immediately."""

    language: Language = DEFAULT_LANGUAGE
    download_dir: str = Field(default_factory=lambda: str(default_music_dir()))
    coloring: bool = False

    _file: Path = PrivateAttr(default=CONFIG_FILE)

    @classmethod
    def load(cls, file: StrPath = CONFIG_FILE) -> Self:
        """Read settings from `file`, or use defaults if it's absent or invalid."""

        file = Path(file)
        settings = cls()

        if file.is_file():
            try:
                settings = cls.from_json(file.read_bytes())
            except (OSError, ValidationError) as err:
                logger.warning(
                    'Error parsing config file "{file}": {error}',
                    file=file,
                    error=err,
                )

        settings._file = file
        return settings

    @property
    def file(self) -> Path:
        return self._file

    @property
    def download_path(self) -> Path:
        return Path(self.download_dir).expanduser()

    def save(self) -> bool:
        """Write settings to disk. The in-memory values are kept on failure."""

        try:
            write_text(self._file, self.to_json())
        except OSError as err:
            logger.error(
                'Failed to save settings to "{file}": {error}',
                file=self._file,
                error=err,
            )
            return False

        logger.debug('Settings saved to "{file}".', file=self._file)
        return True

    def set_language(self, language: Language) -> None:
        self.language = language
        self.save()

    def set_download_dir(self, directory: StrPath) -> None:
        self.download_dir = str(directory)
        self.save()

    def set_coloring(self, coloring: bool) -> None:
        self.coloring = coloring
        self.save()
