import sys

import pytest

from music_queue.exceptions import ExtractError
from music_queue.extractor import MediaExtractor
from music_queue.messages import format_error_message


class TestExtractor:
    def test_single_video(self, ytdlp: list[str]):
        jobs = MediaExtractor(ytdlp).fetch_playlist("https://example.com/watch?v=1")

        assert len(jobs) == 1
        assert jobs[0].url == "https://example.com/watch?v=1"
        assert jobs[0].title == "Single song"

    def test_playlist(self, ytdlp: list[str]):
        jobs = MediaExtractor(ytdlp).fetch_playlist("https://example.com/playlist")

        assert [job.title for job in jobs] == ["Song 1", "Song 2", "Song 3"]
        assert jobs[0].url == "https://example.com/watch?v=1"
        assert all(job.downloaded_at is None for job in jobs)

    def test_fetch_info(self, ytdlp: list[str]):
        job = MediaExtractor(ytdlp).fetch_info("https://example.com/watch?v=1")
        assert job.title == "Single song"

    def test_empty_playlist(self, ytdlp: list[str]):
        with pytest.raises(ExtractError, match="No videos"):
            MediaExtractor(ytdlp).fetch_playlist("https://example.com/empty")

    def test_invalid_url(self, ytdlp: list[str]):
        with pytest.raises(ExtractError, match="Unsupported URL"):
            MediaExtractor(ytdlp).fetch_playlist("https://invalid.example")

    def test_bad_output(self):
        command = [sys.executable, "-c", "print('not json')"]

        with pytest.raises(ExtractError, match="return nothing"):
            MediaExtractor(command).fetch_info("https://example.com")

    def test_undecodable_stderr(self):
        script = (
            "import sys; "
            "sys.stderr.buffer.write(b'ERROR: bad \\xff byte\\n'); "
            "sys.exit(1)"
        )
        command = [sys.executable, "-c", script]

        with pytest.raises(ExtractError, match="bad"):
            MediaExtractor(command).fetch_info("https://example.com")

    def test_missing_tool(self, tmp_path):
        with pytest.raises(ExtractError):
            MediaExtractor([str(tmp_path / "nope")]).fetch_info("https://example.com")


class TestMessages:
    def test_known_message(self):
        stderr = "WARNING: retrying\nERROR: [youtube] abc: Private video. Sign in"
        assert format_error_message(stderr) == "Private video, unable to download."

    def test_unknown_message_kept(self):
        assert format_error_message("ERROR: Something broke") == "Something broke"

    def test_last_line_without_error_prefix(self):
        assert format_error_message("first\nTraceback: boom\n") == "Traceback: boom"

    def test_empty(self):
        assert format_error_message("", fallback="Exit status 1.") == "Exit status 1."
