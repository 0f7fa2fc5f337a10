"""Custom `Rich` classes."""

from rich.console import Console, RenderableType
from rich.status import Status as _Status

CONSOLE = Console(stderr=True)
"""Logging and status output."""

OUTPUT = Console(highlight=False, markup=False, emoji=False)
"""Menu output. Text is printed as-is, colors come from the markup formatter."""


class Status(_Status):
    """Spinner shown on `CONSOLE` while a slow call runs.

    Without an explicit `disable`, the spinner only runs on a terminal.
    """

    def __init__(self, status: RenderableType, *, disable: bool | None = None):
        if disable is None:
            disable = not CONSOLE.is_terminal

        self.disable = disable
        super().__init__(status, console=CONSOLE, spinner="dots")

    def __enter__(self) -> "Status":
        if not self.disable:
            self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        if not self.disable:
            self.stop()
