import threading

from music_queue.i18n import markup
from music_queue.i18n.catalog import MessageCatalog
from music_queue.i18n.language import DEFAULT_LANGUAGE, Language


class Translator:
    def __init__(
        self,
        catalog: MessageCatalog,
        language: Language = DEFAULT_LANGUAGE,
        coloring: bool = False,
    ):
        """Localized and formatted text for the whole application.

        Build one at startup and pass it to every component that prints text.
        All state access is serialized through a single lock.

        Args:
            catalog: Loaded message tables.
            language: Initial language.
            coloring: Render color tags as ANSI escape codes.
        """

        self.catalog = catalog
        self._language = language
        self._coloring = coloring
        self._lock = threading.Lock()

    @property
    def language(self) -> Language:
        with self._lock:
            return self._language

    @property
    def coloring(self) -> bool:
        with self._lock:
            return self._coloring

    def initialize(self, language: Language) -> None:
        self.switch_language(language)

    def switch_language(self, language: Language) -> None:
        with self._lock:
            self._language = language

    def set_coloring(self, enabled: bool) -> None:
        with self._lock:
            self._coloring = enabled

    def get(self, key: str) -> str:
        return self.get_with_args(key)

    def get_with_args(self, key: str, *args: object) -> str:
        with self._lock:
            template = self.catalog.resolve(self._language, key)
            coloring = self._coloring

        return markup.format(template, [str(arg) for arg in args], coloring)

    t = get_with_args
