"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityType(StrEnum):
    TRACK = "track"
    ARTIST = "artist"
    ALBUM = "album"
    PLAYLIST = "playlist"


class AlbumKeyMode(StrEnum):
    """How albums are told apart when deduplicating.

    ``TITLE`` merges same-titled albums of different artists into one entity.
    ``ARTIST_TITLE`` qualifies the title with the track's artist name.
    """

    TITLE = "title"
    ARTIST_TITLE = "artist-title"
