from pathlib import Path
from typing import TextIO, assert_never

from loguru import logger
from rich.console import Console
from rich.text import Text

from music_queue import __version__
from music_queue.cli.menu import (
    MainMenuOption,
    SettingsMenuOption,
    parse_language_choice,
)
from music_queue.downloader import BatchDownloader
from music_queue.exceptions import DownloadError, ExtractError, ToolNotFoundError
from music_queue.extractor import MediaExtractor
from music_queue.i18n import Language, Translator
from music_queue.models.job import DownloadJob
from music_queue.rich import OUTPUT, Status
from music_queue.settings import Settings
from music_queue.store import HistoryLog, JobQueue
from music_queue.tools import ToolProvider
from music_queue.types import APPNAME, TOOL, UNKNOWN

HISTORY_LIMIT = 10
STARTUP_TOOLS: list[TOOL] = ["ffmpeg", "yt-dlp"]


class InteractiveApp:
    def __init__(
        self,
        translator: Translator,
        settings: Settings,
        history: HistoryLog,
        provider: ToolProvider,
        console: Console = OUTPUT,
        stream: TextIO | None = None,
    ):
        """Menu driven download queue.

        Args:
            translator: Renders every user visible message.
            settings: Persistent preferences.
            history: Completed downloads log.
            provider: Locates `yt-dlp` and `ffmpeg`.
            console: Where menus are printed.
            stream: Read answers from here instead of the terminal.
        """

        self.translator = translator
        self.settings = settings
        self.history = history
        self.provider = provider
        self.console = console
        self.stream = stream
        self.queue = JobQueue()

    # Output
    def say(self, key: str, *args: object) -> None:
        self.console.print(Text.from_ansi(self.translator.t(key, *args)))

    def ask(self, key: str, *args: object) -> str:
        prompt = Text.from_ansi(self.translator.t(key, *args), end="")
        line = self.console.input(prompt, stream=self.stream)

        if self.stream is not None and not line:
            raise EOFError()

        return line.strip()

    # Lifecycle
    def startup(self) -> None:
        self.say("app_banner", APPNAME, __version__)

        for tool in STARTUP_TOOLS:
            if self.provider.locate(tool):
                continue

            self.say("tool_missing", tool)
            try:
                self.provider.ensure(tool)
            except ToolNotFoundError as err:
                self.say("tool_install_failed", err)

        self.say(
            "current_language",
            self.translator.get(self.translator.language.display_key),
        )
        self.say("download_directory", self.settings.download_path)

    def run(self) -> None:
        try:
            while self.handle(self.main_menu()):
                pass
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            self.say("exiting")

        self.say("app_stopped")

    def main_menu(self) -> MainMenuOption | None:
        self.console.print()
        self.say("menu_title")
        for option in MainMenuOption:
            self.say(option.key)

        self.console.print()
        choice = MainMenuOption.parse(self.ask("menu_enter_choice"))

        if choice is None:
            self.say("invalid_choice", 1, len(MainMenuOption))

        return choice

    def handle(self, option: MainMenuOption | None) -> bool:
        """Run a main menu action. Returns `False` when the app should stop."""

        match option:
            case None:
                pass
            case MainMenuOption.ADD_URL:
                self.add_url()
            case MainMenuOption.LIST_QUEUE:
                self.list_queue()
            case MainMenuOption.DOWNLOAD:
                self.start_downloads()
            case MainMenuOption.VIEW_HISTORY:
                self.view_history()
            case MainMenuOption.CLEAR_QUEUE:
                self.clear_queue()
            case MainMenuOption.SETTINGS:
                self.settings_menu()
            case MainMenuOption.EXIT:
                self.say("exiting")
                return False
            case _:
                assert_never(option)

        return True

    # Queue
    def add_url(self) -> None:
        try:
            command = self.provider.ensure("yt-dlp")
        except ToolNotFoundError as err:
            self.say("tool_install_failed", err)
            return

        url = self.ask("enter_url")
        if not url:
            return

        self.say("fetching_info")
        try:
            status = Text.from_ansi(self.translator.t("fetching_video_info", url))
            with Status(status):
                jobs = MediaExtractor(command).fetch_playlist(url)
        except ExtractError as err:
            self.say("error_fetching", err)
            return

        self.enqueue(jobs)

    def enqueue(self, jobs: list[DownloadJob]) -> int:
        added = 0

        for job in jobs:
            if self.queue.add(job):
                self.say("added_to_queue", job.display_title)
                added += 1
            else:
                self.say("already_added")

        return added

    def list_queue(self) -> None:
        jobs = self.queue.snapshot()

        if not jobs:
            self.say("download_queue_empty")
            return

        self.console.print()
        self.say("download_queue_title")
        for index, job in enumerate(jobs, start=1):
            self.say("queue_entry", index, job.display_title)

    def clear_queue(self) -> None:
        self.say("queue_cleared", self.queue.clear())

    # Downloads
    def start_downloads(self) -> None:
        jobs = self.queue.drain()

        if not jobs:
            self.say("no_urls_to_download")
            return

        try:
            command = self.provider.ensure("yt-dlp")
        except ToolNotFoundError as err:
            self.say("tool_install_failed", err)
            self._requeue(jobs)
            return

        output = self.settings.download_path
        try:
            output.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            self.say("dir_invalid", output, err.strerror or err)
            self._requeue(jobs)
            return

        self.say("starting_download", len(jobs))
        downloader = BatchDownloader(
            command,
            on_start=self._on_start,
            on_success=self._on_success,
            on_error=self._on_error,
        )
        result = downloader.run_batch(jobs, output)

        self.console.print()
        self.say("download_summary")
        self.say("download_success", result.success_count, result.total)
        self.say("download_fail", result.failed_count)

        if result.succeeded:
            self.history.extend(result.succeeded)

    def _requeue(self, jobs: list[DownloadJob]) -> None:
        for job in jobs:
            self.queue.add(job)

    def _on_start(self, job: DownloadJob) -> None:
        self.say("video_downloading", job.display_title)

    def _on_success(self, job: DownloadJob, elapsed: float) -> None:
        self.say("video_downloaded", job.display_title, int(elapsed))

    def _on_error(self, job: DownloadJob, error: DownloadError) -> None:
        self.say("video_download_failed", job.display_title, error)

    def view_history(self) -> None:
        total = len(self.history)

        if not total:
            self.say("no_history")
            return

        self.console.print()
        self.say("history_title")
        for index, job in self.history.recent(HISTORY_LIMIT):
            self.say(
                "history_entry",
                index,
                job.display_title,
                job.downloaded_at or UNKNOWN,
            )

        if total > HISTORY_LIMIT:
            self.say("history_more", total - HISTORY_LIMIT)

    # Settings
    def settings_menu(self) -> None:
        self.console.print()
        self.say("settings_title")
        for option in SettingsMenuOption:
            self.say(option.key)

        self.console.print()
        choice = SettingsMenuOption.parse(self.ask("settings_enter_choice"))

        match choice:
            case None:
                self.say("invalid_choice", 1, len(SettingsMenuOption))
            case SettingsMenuOption.LANGUAGE:
                self.language_menu()
            case SettingsMenuOption.DIRECTORY:
                self.set_directory()
            case SettingsMenuOption.COLORING:
                self.toggle_coloring()
            case SettingsMenuOption.BACK:
                self.say("return_to_menu")
            case _:
                assert_never(choice)

    def language_menu(self) -> None:
        languages = list(Language)
        back = len(languages) + 1

        self.console.print()
        self.say("language_select")
        for index, language in enumerate(languages, start=1):
            self.console.print(f"{index}. ", end="")
            self.say(language.display_key)
        self.console.print(f"{back}. ", end="")
        self.say("language_back")

        self.console.print()
        answer = self.ask("language_enter_choice", 1, back)

        try:
            language = parse_language_choice(answer)
        except ValueError:
            self.say("invalid_choice", 1, back)
            return

        if language is None:
            self.say("return_to_menu")
            return

        self.settings.set_language(language)
        self.translator.switch_language(language)
        logger.debug("Language changed to {language}.", language=language)
        self.say(language.confirm_key)

    def set_directory(self) -> None:
        answer = self.ask("enter_directory")

        if not answer:
            self.say("no_dir_selected")
            return

        directory = Path(answer).expanduser()

        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            self.say("dir_invalid", directory, err.strerror or err)
            return

        self.settings.set_download_dir(directory)
        self.say("dir_set", directory)

    def toggle_coloring(self) -> None:
        coloring = not self.settings.coloring

        self.settings.set_coloring(coloring)
        self.translator.set_coloring(coloring)
        self.say("coloring_enabled" if coloring else "coloring_disabled")
