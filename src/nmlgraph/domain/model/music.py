"""Music domain entities. Ownership lives on ``CollectionData``.

Cross references between entities are stored as ids and resolved through the
owning collection, so no entity keeps another alive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from nmlgraph.domain.model.entity import Entity
from nmlgraph.domain.model.enums import EntityType

if TYPE_CHECKING:
    from nmlgraph.domain.model.primitives import (
        AlbumId,
        AlbumKey,
        ArtistId,
        LocationKey,
        TrackId,
    )


@dataclass(eq=False, kw_only=True)
class Track(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.TRACK

    location: LocationKey
    title: str
    album_track_number: int | None = None
    duration_seconds: float | None = None
    bpm: float | None = None

    # Back-references, fixed at construction
    artist_id: ArtistId | None = field(default=None, repr=False)
    album_id: AlbumId | None = field(default=None, repr=False)


@dataclass(eq=False, kw_only=True)
class Artist(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ARTIST

    name: str

    # Bidirectional views (read-only); grown while tracks are ingested
    _album_ids: list[AlbumId] = field(default_factory=list["AlbumId"], repr=False)
    _track_ids: list[TrackId] = field(default_factory=list["TrackId"], repr=False)

    @property
    def album_ids(self) -> tuple[AlbumId, ...]:
        return tuple(self._album_ids)

    @property
    def track_ids(self) -> tuple[TrackId, ...]:
        return tuple(self._track_ids)

    # Friend primitives (called only by the graph builder)
    def _attach_track(self, track_id: TrackId) -> None:
        self._track_ids.append(track_id)

    def _attach_album(self, album_id: AlbumId) -> None:
        if album_id not in self._album_ids:
            self._album_ids.append(album_id)


@dataclass(eq=False, kw_only=True)
class Album(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ALBUM

    title: str
    # only set when albums are keyed by artist and title
    artist_name: str | None = None

    _track_ids: list[TrackId] = field(default_factory=list["TrackId"], repr=False)

    @property
    def key(self) -> AlbumKey:
        return (self.artist_name, self.title)

    @property
    def track_ids(self) -> tuple[TrackId, ...]:
        return tuple(self._track_ids)

    def _attach_track(self, track_id: TrackId) -> None:
        self._track_ids.append(track_id)


@dataclass(eq=False, kw_only=True)
class Playlist(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.PLAYLIST

    name: str
    uuid: str | None = None

    # Ordered members; a track may appear more than once
    _track_ids: list[TrackId] = field(default_factory=list["TrackId"], repr=False)

    @property
    def track_ids(self) -> tuple[TrackId, ...]:
        return tuple(self._track_ids)
