"""Message tables and terminal markup."""

from music_queue.i18n.catalog import CatalogTable, MessageCatalog
from music_queue.i18n.language import DEFAULT_LANGUAGE, Language
from music_queue.i18n.translator import Translator

__all__ = [
    "CatalogTable",
    "DEFAULT_LANGUAGE",
    "Language",
    "MessageCatalog",
    "Translator",
]
