from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from nmlgraph.adapters.nml import CollectionSourceError
from nmlgraph.app import load_collection
from nmlgraph.config import ALBUM_KEY_VAR, COLLECTION_PATH_VAR, CollectionConfig
from nmlgraph.domain.ingest_pipeline import SkipReason
from nmlgraph.domain.model import AlbumKeyMode, CollectionSummary

if TYPE_CHECKING:
    from pathlib import Path


def test_load_collection_builds_fixture_graph(collection_path: Path) -> None:
    result = load_collection(collection_path)
    collection = result.collection

    assert collection.summary() == CollectionSummary(tracks=3, artists=2, albums=1, playlists=2)
    assert [track.title for track in collection.tracks] == ["Song A", "Song B", "Song D"]
    assert result.report.records == 6
    assert result.report.skipped_by_reason() == {SkipReason.MISSING_TITLE: 1}
    assert result.report.skipped[0].index == 2
    assert result.report.unresolved_playlist_entries == 1

    song_a, song_b, song_d = collection.tracks
    assert song_a.album_track_number == 1
    assert song_a.duration_seconds == pytest.approx(311.815)
    assert song_a.bpm == pytest.approx(128.000061)
    assert song_b.duration_seconds == pytest.approx(254.0)
    assert song_b.bpm is None
    assert collection.track_album(song_d) is None
    assert song_d.location.key == "C:/:e/:d.mp3"

    warmup = collection.find_playlist("Warmup")
    old = collection.find_playlist("Old")
    assert warmup is not None
    assert old is not None
    assert warmup.uuid == "f1e2d3c4"
    assert collection.playlist_tracks(warmup) == (song_b, song_a)
    assert collection.playlist_tracks(old) == (song_d,)


def test_load_collection_uses_environment(
    monkeypatch: pytest.MonkeyPatch, collection_path: Path
) -> None:
    monkeypatch.setenv(COLLECTION_PATH_VAR, str(collection_path))
    monkeypatch.setenv(ALBUM_KEY_VAR, "artist-title")

    collection = load_collection().collection

    assert len(collection.tracks) == 3
    assert collection.find_album("Y", "X") is not None
    assert collection.find_album("Y") is None


def test_explicit_arguments_override_config(collection_path: Path, tmp_path: Path) -> None:
    config = CollectionConfig(path=tmp_path / "elsewhere.nml", album_key_mode=AlbumKeyMode.TITLE)

    result = load_collection(
        collection_path, config=config, album_key_mode=AlbumKeyMode.ARTIST_TITLE
    )

    assert [album.key for album in result.collection.albums] == [("X", "Y")]


def test_load_collection_logs_summary(
    collection_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="nmlgraph"):
        load_collection(collection_path)

    assert "Loading collection" in caplog.text
    assert "tracks=3, artists=2, albums=1, playlists=2, skipped=1" in caplog.text


def test_missing_collection_raises_source_error(tmp_path: Path) -> None:
    with pytest.raises(CollectionSourceError):
        load_collection(tmp_path / "missing.nml")


def test_malformed_collection_raises_source_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.nml"
    path.write_bytes(b'<NML><COLLECTION><ENTRY TITLE="A"></COLLECTION>')

    with pytest.raises(CollectionSourceError, match="broken.nml"):
        load_collection(path)
