"""Per-language message tables loaded from TOML files."""

import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path

from loguru import logger

from music_queue.exceptions import CatalogError
from music_queue.i18n.language import DEFAULT_LANGUAGE, Language
from music_queue.path import LANGUAGES_DIR
from music_queue.types import StrPath

CatalogTable = dict[str, str]


def load_table(file: Path) -> CatalogTable:
    """Parse a flat `key = "template"` table.

    Raises:
        CatalogError: File is missing, isn't valid TOML or holds non-string values.
    """

    if not file.is_file():
        raise CatalogError(
            f"Language file '{file.name}' not found in the languages directory ({file.parent})."
        )

    try:
        data = tomllib.loads(file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as err:
        raise CatalogError(f"Unable to parse language file '{file.name}': {err}")

    for key, value in data.items():
        if not isinstance(value, str):
            raise CatalogError(
                f"Language file '{file.name}': '{key}' should be a string, not {type(value).__name__}."
            )

    return data


class MessageCatalog:
    def __init__(
        self,
        tables: Mapping[Language, CatalogTable],
        directory: StrPath = LANGUAGES_DIR,
        default: Language = DEFAULT_LANGUAGE,
    ):
        self._tables = {language: dict(table) for language, table in tables.items()}
        self.directory = Path(directory)
        self.default = default

    @classmethod
    def load(
        cls,
        languages: Iterable[Language] = Language,
        directory: StrPath = LANGUAGES_DIR,
        default: Language = DEFAULT_LANGUAGE,
    ) -> "MessageCatalog":
        """Read a table for every language in `languages`.

        Raises:
            CatalogError: Any table can't be loaded. Callers should treat it as fatal.
        """

        directory = Path(directory)
        tables = {}

        for language in languages:
            tables[language] = load_table(directory / language.filename)
            logger.debug(
                'Loaded {count} messages for "{language}".',
                count=len(tables[language]),
                language=language,
            )

        return cls(tables, directory, default)

    @property
    def languages(self) -> list[Language]:
        return list(self._tables)

    def resolve(self, language: Language, key: str) -> str:
        """Raw template for `key`, falling back to the default language, then to the key."""

        if (template := self._tables.get(language, {}).get(key)) is not None:
            return template

        if language != self.default:
            if (template := self._tables.get(self.default, {}).get(key)) is not None:
                return template

        return key

    def missing_keys(self, language: Language) -> list[str]:
        default = self._tables.get(self.default, {})
        table = self._tables.get(language, {})
        return [key for key in default if key not in table]

    def extend(self, language: Language, entries: Mapping[str, str]) -> None:
        self._tables.setdefault(language, {}).update(entries)

    def reload(self) -> None:
        """Read every loaded table from disk again.

        Tables are swapped only when all of them parse.
        """

        self._tables = {
            language: load_table(self.directory / language.filename)
            for language in self._tables
        }
