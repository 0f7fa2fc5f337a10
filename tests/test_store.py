import json
from pathlib import Path

from music_queue.models.job import DownloadJob
from music_queue.store import HistoryLog, JobQueue


class TestQueue:
    def test_add(self):
        queue = JobQueue()

        assert queue.add(DownloadJob(url="https://a", title="A"))
        assert queue.add(DownloadJob(url="https://b"))
        assert len(queue) == 2

    def test_duplicate_url_rejected(self):
        queue = JobQueue()
        queue.add(DownloadJob(url="https://a", title="A"))

        assert not queue.add(DownloadJob(url="https://a", title="Other title"))
        assert not queue.add(DownloadJob(url="https://a"))
        assert len(queue) == 1
        assert queue.snapshot()[0].title == "A"

    def test_contains(self):
        queue = JobQueue()
        queue.add(DownloadJob(url="https://a"))

        assert DownloadJob(url="https://a", title="A") in queue
        assert DownloadJob(url="https://b") not in queue

    def test_drain_keeps_order(self):
        queue = JobQueue()
        for url in ("https://1", "https://2", "https://3"):
            queue.add(DownloadJob(url=url))

        jobs = queue.drain()

        assert [job.url for job in jobs] == ["https://1", "https://2", "https://3"]
        assert len(queue) == 0
        assert queue.add(DownloadJob(url="https://1"))

    def test_clear(self):
        queue = JobQueue()
        queue.add(DownloadJob(url="https://a"))
        queue.add(DownloadJob(url="https://b"))

        assert queue.clear() == 2
        assert queue.clear() == 0


class TestHistory:
    def test_missing_file(self, tmp_path: Path):
        history = HistoryLog(tmp_path / "history.json")
        assert len(history) == 0

    def test_add_is_persisted(self, tmp_path: Path):
        file = tmp_path / "data" / "history.json"
        history = HistoryLog(file)

        entry = history.add(DownloadJob(url="https://a", title="A"))
        reloaded = HistoryLog(file).downloads

        assert entry.downloaded_at
        assert reloaded[-1].url == "https://a"
        assert reloaded[-1].title == "A"
        assert reloaded[-1].downloaded_at is not None

    def test_file_format(self, tmp_path: Path):
        file = tmp_path / "history.json"
        HistoryLog(file).add(DownloadJob(url="https://a"))

        data = json.loads(file.read_text())

        assert list(data) == ["downloads"]
        assert data["downloads"][0]["url"] == "https://a"
        assert data["downloads"][0]["title"] is None

    def test_append_order(self, tmp_path: Path):
        file = tmp_path / "history.json"
        history = HistoryLog(file)
        history.add(DownloadJob(url="https://1"))
        history.extend([DownloadJob(url="https://2"), DownloadJob(url="https://3")])

        urls = [job.url for job in HistoryLog(file).downloads]
        assert urls == ["https://1", "https://2", "https://3"]

    def test_corrupt_file_is_empty(self, tmp_path: Path):
        file = tmp_path / "history.json"
        file.write_text("{not json")

        history = HistoryLog(file)

        assert len(history) == 0
        history.add(DownloadJob(url="https://a"))
        assert len(HistoryLog(file)) == 1

    def test_recent(self, tmp_path: Path):
        history = HistoryLog(tmp_path / "history.json")
        history.extend([DownloadJob(url=f"https://{i}") for i in range(1, 13)])

        recent = history.recent(10)

        assert len(recent) == 10
        assert recent[0][0] == 12
        assert recent[0][1].url == "https://12"
        assert recent[-1][0] == 3

    def test_reload(self, tmp_path: Path):
        file = tmp_path / "history.json"
        first = HistoryLog(file)
        HistoryLog(file).add(DownloadJob(url="https://a"))

        assert len(first) == 0
        first.reload()
        assert len(first) == 1
