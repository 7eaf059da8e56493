"""The ingested collection: aggregate root owning every entity.

All cross references are ids into the lists held here. Readers resolve them
through the lookup helpers, which filter out ids that do not resolve.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nmlgraph.domain.model.music import Album, Artist, Playlist, Track

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from nmlgraph.domain.model.primitives import (
        AlbumId,
        AlbumKey,
        ArtistId,
        EntityId,
        LocationKey,
        PlaylistId,
        TrackId,
    )


@dataclass(frozen=True, slots=True)
class CollectionSummary:
    tracks: int
    artists: int
    albums: int
    playlists: int


def _lookup[TEntity](entities: list[TEntity], entity_id: EntityId | None) -> TEntity | None:
    if entity_id is None or not 0 <= entity_id < len(entities):
        return None
    return entities[entity_id]


def _resolve_all[TEntity](
    entities: list[TEntity], entity_ids: Iterable[EntityId]
) -> tuple[TEntity, ...]:
    resolved: list[TEntity] = []
    for entity_id in entity_ids:
        entity = _lookup(entities, entity_id)
        if entity is not None:
            resolved.append(entity)
    return tuple(resolved)


@dataclass(slots=True)
class CollectionData:
    """Owns tracks, artists, albums and playlists in insertion order.

    The lists only ever grow during ingestion, so an entity's id is its index.
    Mutation goes through ``nmlgraph.domain.model._internal`` and is reserved for
    the graph builder; everything public here is read-only.
    """

    _tracks: list[Track] = field(default_factory=list[Track])
    _artists: list[Artist] = field(default_factory=list[Artist])
    _albums: list[Album] = field(default_factory=list[Album])
    _playlists: list[Playlist] = field(default_factory=list[Playlist])

    # Identity indexes
    _track_ids_by_location: dict[str, TrackId] = field(default_factory=dict["str", "TrackId"])
    _artist_ids_by_name: dict[str, ArtistId] = field(default_factory=dict["str", "ArtistId"])
    _album_ids_by_key: dict[AlbumKey, AlbumId] = field(default_factory=dict["AlbumKey", "AlbumId"])

    # --- enumeration ---------------------------------------------------------

    @property
    def tracks(self) -> tuple[Track, ...]:
        return tuple(self._tracks)

    @property
    def artists(self) -> tuple[Artist, ...]:
        return tuple(self._artists)

    @property
    def albums(self) -> tuple[Album, ...]:
        return tuple(self._albums)

    @property
    def playlists(self) -> tuple[Playlist, ...]:
        return tuple(self._playlists)

    def summary(self) -> CollectionSummary:
        return CollectionSummary(
            tracks=len(self._tracks),
            artists=len(self._artists),
            albums=len(self._albums),
            playlists=len(self._playlists),
        )

    # --- lookups by id -------------------------------------------------------

    def track(self, track_id: TrackId | None) -> Track | None:
        return _lookup(self._tracks, track_id)

    def artist(self, artist_id: ArtistId | None) -> Artist | None:
        return _lookup(self._artists, artist_id)

    def album(self, album_id: AlbumId | None) -> Album | None:
        return _lookup(self._albums, album_id)

    def playlist(self, playlist_id: PlaylistId | None) -> Playlist | None:
        return _lookup(self._playlists, playlist_id)

    # --- lookups by identity key ---------------------------------------------

    def find_track(self, location: LocationKey | str) -> Track | None:
        key = location if isinstance(location, str) else location.key
        return self.track(self._track_ids_by_location.get(key))

    def find_artist(self, name: str) -> Artist | None:
        return self.artist(self._artist_ids_by_name.get(name))

    def find_album(self, title: str, artist_name: str | None = None) -> Album | None:
        return self.album(self._album_ids_by_key.get((artist_name, title)))

    def find_playlist(self, name: str) -> Playlist | None:
        for playlist in self._playlists:
            if playlist.name == name:
                return playlist
        return None

    def track_index(self) -> Mapping[str, TrackId]:
        """Snapshot of location key -> track id for every track ingested so far."""
        return dict(self._track_ids_by_location)

    # --- back-reference resolution -------------------------------------------

    def artist_tracks(self, artist: Artist) -> tuple[Track, ...]:
        return _resolve_all(self._tracks, artist.track_ids)

    def artist_albums(self, artist: Artist) -> tuple[Album, ...]:
        return _resolve_all(self._albums, artist.album_ids)

    def album_tracks(self, album: Album) -> tuple[Track, ...]:
        return _resolve_all(self._tracks, album.track_ids)

    def playlist_tracks(self, playlist: Playlist) -> tuple[Track, ...]:
        return _resolve_all(self._tracks, playlist.track_ids)

    def track_artist(self, track: Track) -> Artist | None:
        return self.artist(track.artist_id)

    def track_album(self, track: Track) -> Album | None:
        return self.album(track.album_id)
