from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from nmlgraph.domain.ports.nodes import NodeElement, PlaylistNode, TrackNode

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

DATA_DIR = Path(__file__).resolve().parent / "data"

DEFAULT_VOLUME = "C:"
DEFAULT_DIRECTORY = "/:d/:"


def location_key(
    filename: str, *, volume: str = DEFAULT_VOLUME, directory: str = DEFAULT_DIRECTORY
) -> str:
    return f"{volume}{directory}{filename}"


def make_track_node(  # noqa: PLR0913
    *,
    title: str | None = "Song A",
    artist: str | None = "X",
    album: str | None = "Y",
    filename: str | None = "a.mp3",
    volume: str = DEFAULT_VOLUME,
    directory: str = DEFAULT_DIRECTORY,
    track_number: str | None = None,
    playtime: str | None = None,
    bpm: str | None = None,
) -> TrackNode:
    attributes: list[tuple[str, str]] = []
    if title is not None:
        attributes.append(("TITLE", title))
    if artist is not None:
        attributes.append(("ARTIST", artist))

    children: list[NodeElement] = []
    if filename is not None:
        children.append(
            NodeElement(
                tag="LOCATION",
                attributes=(("DIR", directory), ("FILE", filename), ("VOLUME", volume)),
            )
        )
    album_attributes: list[tuple[str, str]] = []
    if track_number is not None:
        album_attributes.append(("TRACK", track_number))
    if album is not None:
        album_attributes.append(("TITLE", album))
    if album_attributes:
        children.append(NodeElement(tag="ALBUM", attributes=tuple(album_attributes)))
    if playtime is not None:
        children.append(NodeElement(tag="INFO", attributes=(("PLAYTIME_FLOAT", playtime),)))
    if bpm is not None:
        children.append(NodeElement(tag="TEMPO", attributes=(("BPM", bpm),)))

    return TrackNode(tag="ENTRY", attributes=tuple(attributes), children=tuple(children))


def make_playlist_node(
    name: str | None,
    keys: Sequence[str] = (),
    *,
    uuid: str | None = None,
) -> PlaylistNode:
    attributes: list[tuple[str, str]] = [("TYPE", "PLAYLIST")]
    if name is not None:
        attributes.append(("NAME", name))

    playlist_attributes: list[tuple[str, str]] = [("ENTRIES", str(len(keys))), ("TYPE", "LIST")]
    if uuid is not None:
        playlist_attributes.append(("UUID", uuid))
    children: list[NodeElement] = [
        NodeElement(tag="PLAYLIST", attributes=tuple(playlist_attributes))
    ]
    for key in keys:
        children.append(NodeElement(tag="ENTRY"))
        children.append(NodeElement(tag="PRIMARYKEY", attributes=(("TYPE", "TRACK"), ("KEY", key))))

    return PlaylistNode(tag="NODE", attributes=tuple(attributes), children=tuple(children))


@pytest.fixture(scope="session")
def collection_path() -> Path:
    return DATA_DIR / "collection.nml"


@pytest.fixture
def track_node() -> Callable[..., TrackNode]:
    return make_track_node


@pytest.fixture
def playlist_node() -> Callable[..., PlaylistNode]:
    return make_playlist_node


@pytest.fixture
def key_for() -> Callable[..., str]:
    return location_key
