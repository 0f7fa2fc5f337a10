from collections.abc import Callable
from typing import NamedTuple


class ErrorMessage(NamedTuple):
    matches: list[str]
    text: str | Callable[[str], str]


MESSAGES: list[ErrorMessage] = [
    ErrorMessage(
        matches=["HTTP Error 429"],
        text="Too many requests. Please try again later.",
    ),
    ErrorMessage(
        matches=["Read timed out", "timed out"],
        text="Read timed out.",
    ),
    ErrorMessage(
        matches=["is not a valid URL"],
        text=lambda v: v.split()[1] + " is not a valid URL.",
    ),
    ErrorMessage(
        matches=["Unsupported URL"],
        text="Unsupported URL.",
    ),
    ErrorMessage(
        matches=["Private video"],
        text="Private video, unable to download.",
    ),
    ErrorMessage(
        matches=["Video unavailable"],
        text="Video unavailable.",
    ),
    ErrorMessage(
        matches=["ffmpeg not found", "ffprobe and ffmpeg not found"],
        text="Postprocessing failed. FFmpeg executable not found.",
    ),
    ErrorMessage(
        matches=["Unable to download webpage"],
        text="Unable to download webpage.",
    ),
]


def last_error_line(stderr: str) -> str:
    """Most relevant line of a tool's error output."""

    lines = [line.strip() for line in stderr.splitlines() if line.strip()]

    for line in reversed(lines):
        if line.startswith("ERROR:"):
            return line

    return lines[-1] if lines else ""


def format_error_message(stderr: str, fallback: str = "Unknown error.") -> str:
    """Get a user friendly message from `yt-dlp` error output."""

    message = last_error_line(stderr)

    if message.startswith("ERROR: "):
        message = message.removeprefix("ERROR: ")

    if not message:
        return fallback

    for item in MESSAGES:
        if any(s in message for s in item.matches):
            if callable(item.text):
                message = item.text(message)
            else:
                message = item.text
            break

    return message
