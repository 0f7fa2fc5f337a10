"""Menu options and their catalog keys."""

from enum import IntEnum

from typing_extensions import Self

from music_queue.i18n.language import Language


class _Option(IntEnum):
    @classmethod
    def parse(cls, value: str) -> Self | None:
        try:
            return cls(int(value))
        except ValueError:
            return None


class MainMenuOption(_Option):
    ADD_URL = 1
    LIST_QUEUE = 2
    DOWNLOAD = 3
    VIEW_HISTORY = 4
    CLEAR_QUEUE = 5
    SETTINGS = 6
    EXIT = 7

    @property
    def key(self) -> str:
        match self:
            case MainMenuOption.ADD_URL:
                return "menu_add_url"
            case MainMenuOption.LIST_QUEUE:
                return "menu_list_queue"
            case MainMenuOption.DOWNLOAD:
                return "menu_start_downloads"
            case MainMenuOption.VIEW_HISTORY:
                return "menu_view_history"
            case MainMenuOption.CLEAR_QUEUE:
                return "menu_clear_queue"
            case MainMenuOption.SETTINGS:
                return "menu_settings"
            case MainMenuOption.EXIT:
                return "menu_exit"


class SettingsMenuOption(_Option):
    LANGUAGE = 1
    DIRECTORY = 2
    COLORING = 3
    BACK = 4

    @property
    def key(self) -> str:
        match self:
            case SettingsMenuOption.LANGUAGE:
                return "settings_language"
            case SettingsMenuOption.DIRECTORY:
                return "settings_set_directory"
            case SettingsMenuOption.COLORING:
                return "settings_coloring"
            case SettingsMenuOption.BACK:
                return "settings_back"


def parse_language_choice(value: str) -> Language | None:
    """Language picked in the language menu.

    Raises:
        ValueError: Not a listed number. The entry after the last language means "back".
    """

    languages = list(Language)
    index = int(value)

    if 1 <= index <= len(languages):
        return languages[index - 1]
    elif index == len(languages) + 1:
        return None
    else:
        raise ValueError(f"{value} is out of range.")
