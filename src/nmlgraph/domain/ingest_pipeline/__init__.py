"""Collection ingestion: record nodes in, entity graph out.

Nodes are validated into records (``records``), then applied one at a time by
``CollectionGraphBuilder``, which deduplicates artists and albums by natural key
and links tracks, artists, albums and playlists to each other.
"""

from __future__ import annotations

from .builder import CollectionGraphBuilder, IngestResult, build_collection
from .fields import attribute, child_attribute, child_with_name, parse_f64, parse_u16
from .records import (
    LocationRecord,
    PlaylistRecord,
    RecordRejected,
    TrackRecord,
    playlist_record_from_node,
    track_record_from_node,
)
from .report import IngestReport, SkippedRecord, SkipReason

__all__ = [
    "CollectionGraphBuilder",
    "IngestReport",
    "IngestResult",
    "LocationRecord",
    "PlaylistRecord",
    "RecordRejected",
    "SkipReason",
    "SkippedRecord",
    "TrackRecord",
    "attribute",
    "build_collection",
    "child_attribute",
    "child_with_name",
    "parse_f64",
    "parse_u16",
    "playlist_record_from_node",
    "track_record_from_node",
]
