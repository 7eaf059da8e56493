"""Private helpers for mutating collection state.

Only the graph builder and domain model code should import this module. Every
helper appends; nothing here removes an entity or a link.
"""

# ruff: noqa: SLF001

from __future__ import annotations

from typing import TYPE_CHECKING

from nmlgraph.domain.model.music import Album, Artist, Playlist, Track

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nmlgraph.domain.model.collection import CollectionData
    from nmlgraph.domain.model.primitives import AlbumId, ArtistId, LocationKey, TrackId


def get_or_create_artist(collection: CollectionData, name: str) -> Artist:
    existing = collection.find_artist(name)
    if existing is not None:
        return existing
    artist = Artist(id=len(collection._artists), name=name)
    collection._artists.append(artist)
    collection._artist_ids_by_name[name] = artist.id
    return artist


def get_or_create_album(
    collection: CollectionData,
    title: str,
    *,
    artist_name: str | None = None,
) -> Album:
    existing = collection.find_album(title, artist_name)
    if existing is not None:
        return existing
    album = Album(id=len(collection._albums), title=title, artist_name=artist_name)
    collection._albums.append(album)
    collection._album_ids_by_key[album.key] = album.id
    return album


def add_track(  # noqa: PLR0913
    collection: CollectionData,
    *,
    location: LocationKey,
    title: str,
    album_track_number: int | None = None,
    duration_seconds: float | None = None,
    bpm: float | None = None,
    artist_id: ArtistId | None = None,
    album_id: AlbumId | None = None,
) -> Track:
    if location.key in collection._track_ids_by_location:
        raise ValueError(f"track already ingested for location {location.key!r}")
    track = Track(
        id=len(collection._tracks),
        location=location,
        title=title,
        album_track_number=album_track_number,
        duration_seconds=duration_seconds,
        bpm=bpm,
        artist_id=artist_id,
        album_id=album_id,
    )
    collection._tracks.append(track)
    collection._track_ids_by_location[location.key] = track.id
    return track


def add_playlist(
    collection: CollectionData,
    *,
    name: str,
    track_ids: Iterable[TrackId],
    uuid: str | None = None,
) -> Playlist:
    playlist = Playlist(
        id=len(collection._playlists),
        name=name,
        uuid=uuid,
        _track_ids=list(track_ids),
    )
    collection._playlists.append(playlist)
    return playlist


def link_artist_track(artist: Artist, track: Track) -> None:
    artist._attach_track(track.id)


def link_artist_album(artist: Artist, album: Album) -> None:
    artist._attach_album(album.id)


def link_album_track(album: Album, track: Track) -> None:
    album._attach_track(track.id)
