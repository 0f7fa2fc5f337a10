from pathlib import Path

import platformdirs

from music_queue.types import APPNAME

# Constants
CONFIG_DIR = platformdirs.user_config_path(appname=APPNAME)
DATA_DIR = platformdirs.user_data_path(appname=APPNAME)
LANGUAGES_DIR = Path(__file__).parent / "languages"

CONFIG_FILE = CONFIG_DIR / "config.json"
HISTORY_FILE = DATA_DIR / "download_history.json"


# Functions
def default_music_dir() -> Path:
    """User's music folder, the default download target."""

    return platformdirs.user_music_path()


def write_text(file: Path, content: str) -> None:
    """Rewrite `file` wholesale, creating parent directories."""

    file.parent.mkdir(parents=True, exist_ok=True)
    file.write_text(content, encoding="utf-8")
