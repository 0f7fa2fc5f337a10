from enum import StrEnum


class Language(StrEnum):
    """Languages with a shipped message table."""

    ENGLISH = "english"
    HUNGARIAN = "hungarian"

    @property
    def filename(self) -> str:
        return f"{self.value}.toml"

    @property
    def display_key(self) -> str:
        """Catalog key holding the language's own display name."""

        return f"language_{self.value}"

    @property
    def confirm_key(self) -> str:
        """Catalog key printed after switching to this language."""

        return f"language_set_{self.value}"


DEFAULT_LANGUAGE = Language.ENGLISH
