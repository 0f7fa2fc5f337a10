from dataclasses import dataclass
from pathlib import Path

from music_queue.types import LOGGING_LEVELS


@dataclass(slots=True)
class RunConfig:
    """Logging options shared by the whole run."""

    verbose: bool = False
    quiet: bool = False
    log_file: Path | None = None

    @property
    def log_level(self) -> LOGGING_LEVELS:
        # Quiet wins over verbose.
        if self.quiet:
            return "CRITICAL"
        return "DEBUG" if self.verbose else "INFO"

    def update(self, verbose: bool, quiet: bool, log_file: Path | None) -> None:
        self.verbose = verbose
        self.quiet = quiet
        self.log_file = log_file


CONFIG = RunConfig()
