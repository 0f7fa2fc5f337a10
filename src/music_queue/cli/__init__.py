try:
    from typer import Option, Typer
except ImportError:
    print("Error: The CLI dependencies are not installed.")
    raise SystemExit(1)

from pathlib import Path
from typing import Annotated

from loguru import logger

from music_queue.cli.config import CONFIG
from music_queue.path import CONFIG_FILE, HISTORY_FILE, LANGUAGES_DIR
from music_queue.types import APPNAME

app = Typer(rich_markup_mode="rich", add_completion=False)
PANEL_FILES = "Files"
PANEL_DISPLAY = "Display"


def show_version(show: bool) -> None:
    if show:
        from importlib.metadata import version

        print(version(APPNAME))

        raise SystemExit()


@app.command()
def main(
    languages_dir: Annotated[
        Path,
        Option(
            "--languages-dir",
            help="Directory with the language tables.",
            rich_help_panel=PANEL_FILES,
            file_okay=False,
            dir_okay=True,
        ),
    ] = LANGUAGES_DIR,
    config: Annotated[
        Path,
        Option(
            "--config",
            help="Settings file.",
            rich_help_panel=PANEL_FILES,
            dir_okay=False,
        ),
    ] = CONFIG_FILE,
    history: Annotated[
        Path,
        Option(
            "--history",
            help="Download history file.",
            rich_help_panel=PANEL_FILES,
            dir_okay=False,
        ),
    ] = HISTORY_FILE,
    log_file: Annotated[
        Path | None,
        Option(
            "--log-file",
            help="Also write a debug log to this file.",
            rich_help_panel=PANEL_FILES,
            dir_okay=False,
            show_default=False,
        ),
    ] = None,
    quiet: Annotated[
        bool,
        Option(
            "--quiet",
            help="Supress log information.",
            rich_help_panel=PANEL_DISPLAY,
        ),
    ] = CONFIG.quiet,
    verbose: Annotated[
        bool,
        Option(
            "--verbose",
            help="Display more information on screen.",
            rich_help_panel=PANEL_DISPLAY,
        ),
    ] = CONFIG.verbose,
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show current version and exit.",
            rich_help_panel=PANEL_DISPLAY,
            callback=show_version,
            is_eager=True,
        ),
    ] = False,
):
    """Queue videos and download them as tagged MP3 files 🎵"""

    CONFIG.update(verbose, quiet, log_file)

    from music_queue.logging import init_logging

    init_logging(CONFIG.log_level, CONFIG.log_file)

    # Lazy Import
    from music_queue.cli.app import InteractiveApp
    from music_queue.exceptions import CatalogError
    from music_queue.i18n import Language, MessageCatalog, Translator
    from music_queue.settings import Settings
    from music_queue.store import HistoryLog
    from music_queue.tools import select_provider

    try:
        catalog = MessageCatalog.load(Language, languages_dir)
    except CatalogError as err:
        logger.critical("❌ {error}", error=str(err))
        logger.critical(
            "Make sure every language file exists in the languages directory."
        )
        raise SystemExit(1)

    for language in catalog.languages:
        if missing := catalog.missing_keys(language):
            logger.debug(
                "{language} misses {count} messages: {keys}",
                language=language,
                count=len(missing),
                keys=", ".join(missing),
            )

    settings = Settings.load(config)
    translator = Translator(catalog, settings.language, settings.coloring)

    application = InteractiveApp(
        translator,
        settings,
        HistoryLog(history),
        select_provider(),
    )
    application.startup()
    application.run()


def run():
    app(prog_name=APPNAME)
