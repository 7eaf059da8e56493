"""Build the collection entity graph from a stream of record nodes."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from nmlgraph.domain.model import _internal
from nmlgraph.domain.model.collection import CollectionData
from nmlgraph.domain.model.enums import AlbumKeyMode
from nmlgraph.domain.ports.nodes import NodeKind, PlaylistNode, TrackNode

from .records import RecordRejected, playlist_record_from_node, track_record_from_node
from .report import IngestReport, SkippedRecord, SkipReason

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nmlgraph.domain.model.music import Album, Artist, Playlist, Track
    from nmlgraph.domain.ports.nodes import Node

    from .records import TrackRecord


log = getLogger(__name__)


@dataclass(slots=True)
class IngestResult:
    collection: CollectionData
    report: IngestReport


class CollectionGraphBuilder:
    """Owns a ``CollectionData`` while it is being filled.

    ``ingest`` is the only way entities are created or linked. Each call either
    applies a whole record or nothing at all, so a caller may stop feeding nodes at
    any point and keep a consistent collection.
    """

    def __init__(
        self,
        collection: CollectionData | None = None,
        *,
        album_key_mode: AlbumKeyMode = AlbumKeyMode.TITLE,
    ) -> None:
        self._collection = collection if collection is not None else CollectionData()
        self._album_key_mode = album_key_mode
        self._report = IngestReport()

    @property
    def collection(self) -> CollectionData:
        return self._collection

    @property
    def report(self) -> IngestReport:
        return self._report

    @property
    def album_key_mode(self) -> AlbumKeyMode:
        return self._album_key_mode

    def ingest(self, node: Node) -> bool:
        """Apply one record node. Return False if the record was dropped."""

        index = self._report.records
        self._report.records += 1
        if isinstance(node, TrackNode):
            return self._ingest_track(node, index) is not None
        if isinstance(node, PlaylistNode):
            return self._ingest_playlist(node, index) is not None
        raise TypeError(f"Unsupported node type: {type(node).__name__}")

    def ingest_all(self, nodes: Iterable[Node]) -> IngestResult:
        for node in nodes:
            self.ingest(node)
        return IngestResult(collection=self._collection, report=self._report)

    # --- tracks --------------------------------------------------------------

    def _ingest_track(self, node: TrackNode, index: int) -> Track | None:
        try:
            record = track_record_from_node(node)
        except RecordRejected as exc:
            self._skip(index, NodeKind.TRACK, exc.reason)
            return None

        location = record.location.to_key()
        if self._collection.find_track(location) is not None:
            self._skip(index, NodeKind.TRACK, SkipReason.DUPLICATE_LOCATION)
            return None

        album = self._album_for(record)
        artist = self._artist_for(record)
        track = _internal.add_track(
            self._collection,
            location=location,
            title=record.title,
            album_track_number=record.album_track_number,
            duration_seconds=record.duration_seconds,
            bpm=record.bpm,
            artist_id=artist.id if artist is not None else None,
            album_id=album.id if album is not None else None,
        )

        if artist is not None:
            _internal.link_artist_track(artist, track)
            if album is not None:
                _internal.link_artist_album(artist, album)
        if album is not None:
            _internal.link_album_track(album, track)

        self._report.tracks += 1
        return track

    def _album_for(self, record: TrackRecord) -> Album | None:
        if record.album_title is None:
            return None
        qualifier = None
        if self._album_key_mode is AlbumKeyMode.ARTIST_TITLE:
            qualifier = record.artist_name
        return _internal.get_or_create_album(
            self._collection, record.album_title, artist_name=qualifier
        )

    def _artist_for(self, record: TrackRecord) -> Artist | None:
        if record.artist_name is None:
            return None
        return _internal.get_or_create_artist(self._collection, record.artist_name)

    # --- playlists -----------------------------------------------------------

    def _ingest_playlist(self, node: PlaylistNode, index: int) -> Playlist | None:
        try:
            record = playlist_record_from_node(node)
        except RecordRejected as exc:
            self._skip(index, NodeKind.PLAYLIST, exc.reason)
            return None

        # Only tracks ingested before this record are visible here.
        known_tracks = self._collection.track_index()
        track_ids = [known_tracks[key] for key in record.track_keys if key in known_tracks]
        unresolved = len(record.track_keys) - len(track_ids)
        if unresolved:
            log.debug(
                "Playlist %r: %s of %s entries did not resolve to an ingested track",
                record.name,
                unresolved,
                len(record.track_keys),
            )
            self._report.unresolved_playlist_entries += unresolved

        playlist = _internal.add_playlist(
            self._collection, name=record.name, uuid=record.uuid, track_ids=track_ids
        )
        self._report.playlists += 1
        return playlist

    def _skip(self, index: int, kind: NodeKind, reason: SkipReason) -> None:
        log.debug("Skipping %s record #%s: %s", kind, index, reason)
        self._report.skipped.append(SkippedRecord(index=index, kind=kind, reason=reason))


def build_collection(
    nodes: Iterable[Node],
    *,
    album_key_mode: AlbumKeyMode = AlbumKeyMode.TITLE,
) -> IngestResult:
    """Ingest every node in order and return the finished collection."""

    builder = CollectionGraphBuilder(album_key_mode=album_key_mode)
    result = builder.ingest_all(nodes)
    summary = result.collection.summary()
    log.info(
        "Built collection graph: tracks=%s, artists=%s, albums=%s, playlists=%s, skipped=%s",
        summary.tracks,
        summary.artists,
        summary.albums,
        summary.playlists,
        result.report.skipped_count,
    )
    return result
