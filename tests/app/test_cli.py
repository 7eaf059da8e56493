from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from nmlgraph.app import load_collection
from nmlgraph.domain.model import AlbumKeyMode
from nmlgraph.ui import cli

if TYPE_CHECKING:
    from pathlib import Path

    from nmlgraph.domain.ingest_pipeline import IngestResult


@pytest.fixture(autouse=True)
def keep_test_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_configure_logging(**_: object) -> None:
        return None

    monkeypatch.setattr(cli, "configure_logging", fake_configure_logging)


def test_cli_load_defaults(monkeypatch: pytest.MonkeyPatch, collection_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_load(path: str | None, **kwargs: object) -> IngestResult:
        captured["path"] = path
        captured.update(kwargs)
        return load_collection(collection_path)

    monkeypatch.setattr(cli, "load_collection", fake_load)

    cli.main(["load"])

    assert captured["path"] is None
    assert captured["album_key_mode"] is None


def test_cli_load_with_flags(monkeypatch: pytest.MonkeyPatch, collection_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_load(path: str | None, **kwargs: object) -> IngestResult:
        captured["path"] = path
        captured.update(kwargs)
        return load_collection(collection_path)

    monkeypatch.setattr(cli, "load_collection", fake_load)

    cli.main(["load", "library.nml", "--album-key", "artist-title"])

    assert captured["path"] == "library.nml"
    assert captured["album_key_mode"] is AlbumKeyMode.ARTIST_TITLE


def test_cli_logs_counts(collection_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="nmlgraph"):
        cli.main(["load", str(collection_path), "--show-skipped"])

    assert "tracks:    3" in caplog.text
    assert "playlists: 2" in caplog.text
    assert "unresolved playlist entries: 1" in caplog.text
    assert "skipped (missing-title): 1" in caplog.text
    assert "skipped track record #2: missing-title" in caplog.text


def test_cli_missing_file_exits_with_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["load", str(tmp_path / "missing.nml")])

    assert excinfo.value.code == 1


def test_cli_invalid_album_key() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["load", "--album-key", "by-genre"])

    assert excinfo.value.code == 2


def test_cli_requires_command() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2
