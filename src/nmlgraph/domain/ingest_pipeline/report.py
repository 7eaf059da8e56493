"""Diagnostics collected while a collection is ingested."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nmlgraph.domain.ports.nodes import NodeKind


class SkipReason(StrEnum):
    MISSING_TITLE = "missing-title"
    MISSING_LOCATION = "missing-location"
    DUPLICATE_LOCATION = "duplicate-location"
    MISSING_NAME = "missing-name"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class SkippedRecord:
    index: int
    kind: NodeKind
    reason: SkipReason


@dataclass(slots=True)
class IngestReport:
    """Counts of applied and dropped records.

    Dropped records never stop ingestion; this report is the only place they show up
    apart from DEBUG logging.
    """

    records: int = 0
    tracks: int = 0
    playlists: int = 0
    unresolved_playlist_entries: int = 0
    skipped: list[SkippedRecord] = field(default_factory=list[SkippedRecord])

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def skipped_by_reason(self) -> dict[SkipReason, int]:
        return dict(Counter(record.reason for record in self.skipped))
