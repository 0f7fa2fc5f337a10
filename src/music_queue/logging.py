import logging
from pathlib import Path

from loguru import logger
from rich.logging import RichHandler

from music_queue.rich import CONSOLE
from music_queue.types import LOGGING_LEVELS

LEVEL_STYLES = {
    logging.DEBUG: "[blue]",
    logging.INFO: "[khaki1]",
    logging.WARNING: "[yellow][italic]",
    logging.ERROR: "[red]",
    logging.CRITICAL: "[bold red]",
}


class LevelStyleFormatter(logging.Formatter):
    """Prefix each record with the Rich style of its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        return LEVEL_STYLES.get(record.levelno, "") + message


def init_logging(level: LOGGING_LEVELS, log_file: Path | None = None):
    verbose = level != "INFO"

    rich_handler = RichHandler(
        level=level,
        show_level=verbose,
        show_time=verbose,
        show_path=verbose,
        markup=True,
        console=CONSOLE,
    )
    rich_handler.setFormatter(LevelStyleFormatter())

    logger.remove()
    logger.add(
        rich_handler,
        level=level,
        format="{message}",
        backtrace=False,
    )

    # Plain text copy, useful to inspect failed batches afterwards.
    if log_file:
        logger.add(
            log_file,
            level="DEBUG",
            rotation="1 MB",
            retention=3,
            encoding="utf-8",
        )

    logger.enable("music_queue")
