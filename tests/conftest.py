import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

from music_queue.i18n import Language, MessageCatalog, Translator
from music_queue.tools import ToolProvider
from music_queue.types import TOOL

FAKE_YTDLP = r'''
import json
import sys
from pathlib import Path

args = sys.argv[1:]
url = args[-1]

if "invalid" in url:
    print("WARNING: something odd", file=sys.stderr)
    print("ERROR: Unsupported URL: " + url, file=sys.stderr)
    sys.exit(1)

if "--dump-single-json" in args:
    if "--socket-timeout" not in args:
        sys.exit(2)

    if "playlist" in url and "--flat-playlist" in args:
        entries = [
            {"_type": "url", "url": f"https://example.com/watch?v={i}", "title": f"Song {i}"}
            for i in range(1, 4)
        ]
        print(json.dumps({"_type": "playlist", "title": "Mix", "entries": entries}))
    elif "empty" in url:
        print(json.dumps({"_type": "playlist", "title": "Nothing", "entries": []}))
    else:
        print(json.dumps({"id": "abc", "title": "Single song", "formats": []}))
    sys.exit(0)

output = Path(args[args.index("--paths") + 1])
name = url.rsplit("=", 1)[-1]
(output / f"{name}.mp3").write_text(" ".join(args))
'''


class FakeProvider(ToolProvider):
    name = "fake"

    def __init__(self, command: list[str] | None):
        super().__init__()
        self.command = command
        self.installed: list[TOOL] = []

    def locate(self, tool: TOOL) -> list[str] | None:
        return self.command

    def install(self, tool: TOOL) -> None:
        self.installed.append(tool)


@pytest.fixture
def ytdlp(tmp_path: Path) -> list[str]:
    script = tmp_path / "fake_ytdlp.py"
    script.write_text(FAKE_YTDLP)
    return [sys.executable, str(script)]


@pytest.fixture
def provider(ytdlp: list[str]) -> FakeProvider:
    return FakeProvider(ytdlp)


@pytest.fixture
def catalog() -> MessageCatalog:
    return MessageCatalog(
        {
            Language.ENGLISH: {
                "greeting": "Hello {}!",
                "only_english": "<b>English only</b>",
                "pair": "{} and {}",
            },
            Language.HUNGARIAN: {
                "greeting": "Szia {}!",
            },
        }
    )


@pytest.fixture
def translator(catalog: MessageCatalog) -> Translator:
    return Translator(catalog)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)
