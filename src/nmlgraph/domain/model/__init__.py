"""Public domain model surface."""

from __future__ import annotations

from nmlgraph.domain.model.collection import CollectionData, CollectionSummary
from nmlgraph.domain.model.entity import Entity
from nmlgraph.domain.model.enums import AlbumKeyMode, EntityType
from nmlgraph.domain.model.music import Album, Artist, Playlist, Track
from nmlgraph.domain.model.primitives import (
    U16_MAX,
    AlbumId,
    AlbumKey,
    ArtistId,
    EntityId,
    LocationKey,
    PlaylistId,
    TrackId,
)

__all__ = [  # noqa: RUF022
    # base
    "Entity",
    # aggregate root
    "CollectionData",
    "CollectionSummary",
    # music
    "Track",
    "Artist",
    "Album",
    "Playlist",
    # enums
    "AlbumKeyMode",
    "EntityType",
    # primitives
    "U16_MAX",
    "AlbumId",
    "AlbumKey",
    "ArtistId",
    "EntityId",
    "LocationKey",
    "PlaylistId",
    "TrackId",
]
