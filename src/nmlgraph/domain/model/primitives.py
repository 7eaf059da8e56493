"""Domain primitives: scalar aliases + small value objects."""

from __future__ import annotations

from dataclasses import dataclass

type EntityId = int
type TrackId = EntityId
type ArtistId = EntityId
type AlbumId = EntityId
type PlaylistId = EntityId

# (qualifying artist name, title); the artist part is None when titles alone identify
type AlbumKey = tuple[str | None, str]

U16_MAX = 0xFFFF


@dataclass(frozen=True, slots=True)
class LocationKey:
    """Where a track's audio file lives: volume + directory + filename."""

    volume: str
    directory: str
    filename: str

    @property
    def key(self) -> str:
        """The primary-key string playlists use to reference this track."""
        return f"{self.volume}{self.directory}{self.filename}"

    def __str__(self) -> str:
        return self.key
