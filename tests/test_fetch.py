"""Tests for existence-cached downloads."""
from pathlib import Path

import pytest

from cursorpack.download import fetch as fetch_mod
from cursorpack.download.fetch import FetchStatus, fetch
from cursorpack.download.urls import DownloadSpec
from cursorpack.errors import MissingToolError, TransportError
from cursorpack.utils.fs import FilesystemError
from cursorpack.utils.subprocess import SubprocessError

URL = "https://example.invalid/cursor.AppImage"


@pytest.fixture
def downloader(monkeypatch, completed):
    """Fake curl that writes the output file and records each call."""
    calls = []

    def fake_run_command(command, **kwargs):
        calls.append(command)
        output = Path(command[command.index("-o") + 1])
        output.write_bytes(b"payload")
        return completed(command)

    monkeypatch.setattr(fetch_mod, "which", lambda tool: Path(f"/usr/bin/{tool}"))
    monkeypatch.setattr(fetch_mod, "run_command", fake_run_command)
    return calls


class TestFetch:

    def test_downloads_when_missing(self, tmp_path: Path, downloader):
        spec = DownloadSpec(url=URL, destination=tmp_path / "downloads" / "cursor.AppImage")
        result = fetch(spec)
        assert result.status is FetchStatus.DOWNLOADED
        assert result.downloaded
        assert spec.destination.read_bytes() == b"payload"
        assert not spec.destination.with_name("cursor.AppImage.part").exists()

    def test_second_fetch_is_cache_hit(self, tmp_path: Path, downloader):
        spec = DownloadSpec(url=URL, destination=tmp_path / "cursor.AppImage")
        first = fetch(spec)
        second = fetch(spec)
        assert first.status is FetchStatus.DOWNLOADED
        assert second.status is FetchStatus.CACHE_HIT
        assert len(downloader) == 1

    def test_existing_file_is_trusted(self, tmp_path: Path, downloader):
        """Stale content is not detected: existence is the only check."""
        destination = tmp_path / "cursor.AppImage"
        destination.write_bytes(b"stale")
        result = fetch(DownloadSpec(url=URL, destination=destination))
        assert result.status is FetchStatus.CACHE_HIT
        assert destination.read_bytes() == b"stale"
        assert downloader == []

    def test_prefers_curl(self, tmp_path: Path, downloader):
        fetch(DownloadSpec(url=URL, destination=tmp_path / "x.AppImage"))
        assert downloader[0][0] == "/usr/bin/curl"
        assert URL in downloader[0]


class TestFetchFailures:

    def test_transport_failure(self, tmp_path: Path, monkeypatch):
        def failing(command, **kwargs):
            Path(command[command.index("-o") + 1]).write_bytes(b"partial")
            raise SubprocessError("Command failed: curl")

        monkeypatch.setattr(fetch_mod, "which", lambda tool: Path(f"/usr/bin/{tool}"))
        monkeypatch.setattr(fetch_mod, "run_command", failing)

        destination = tmp_path / "cursor.AppImage"
        with pytest.raises(TransportError, match="Failed to download"):
            fetch(DownloadSpec(url=URL, destination=destination))
        assert not destination.exists()
        assert list(tmp_path.iterdir()) == []

    def test_falls_back_to_wget(self, tmp_path: Path, monkeypatch, completed):
        calls = []

        def fake_run_command(command, **kwargs):
            calls.append(command)
            Path(command[command.index("-O") + 1]).write_bytes(b"payload")
            return completed(command)

        monkeypatch.setattr(
            fetch_mod, "which", lambda tool: Path("/bin/wget") if tool == "wget" else None
        )
        monkeypatch.setattr(fetch_mod, "run_command", fake_run_command)

        fetch(DownloadSpec(url=URL, destination=tmp_path / "a.AppImage"))
        assert calls[0][0] == "/bin/wget"

    def test_no_download_tool(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(fetch_mod, "which", lambda tool: None)
        with pytest.raises(MissingToolError):
            fetch(DownloadSpec(url=URL, destination=tmp_path / "a.AppImage"))

    def test_failed_move_is_reported(self, tmp_path: Path, downloader, monkeypatch):
        def refuse(self, target):
            raise PermissionError("read-only")

        monkeypatch.setattr(Path, "replace", refuse)
        with pytest.raises(FilesystemError, match="move download into place"):
            fetch(DownloadSpec(url=URL, destination=tmp_path / "cursor.AppImage"))
