"""Streaming parser turning collection XML events into record nodes.

The parser is a small state machine over the event stream. It tracks which
root section is open (``COLLECTION`` or ``PLAYLISTS``) and, inside a section,
whether a record is being accumulated. A record is the ``ENTRY`` element of a
track or a ``NODE`` element typed ``PLAYLIST``; every start element nested in
it becomes one of the record's children. Folder and smartlist nodes are
skipped, along with anything outside the two root sections.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Final

from nmlgraph.domain.ports.nodes import NodeElement, PlaylistNode, TrackNode

from .errors import CollectionError, CollectionStructureError
from .events import EndDocument, EndElement, StartElement, iter_xml_events

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from nmlgraph.domain.ports.nodes import Attributes, Node

    from .events import CollectionInput, XmlEvent

log = getLogger(__name__)

TRACK_RECORD_TAG: Final[str] = "ENTRY"
PLAYLIST_RECORD_TAG: Final[str] = "NODE"
NODE_TYPE_ATTRIBUTE: Final[str] = "TYPE"
PLAYLIST_NODE_TYPE: Final[str] = "PLAYLIST"


class RootSection(StrEnum):
    NONE = "NONE"
    COLLECTION = "COLLECTION"
    PLAYLISTS = "PLAYLISTS"


ROOT_SECTION_TAGS: Final[frozenset[str]] = frozenset(
    {RootSection.COLLECTION.value, RootSection.PLAYLISTS.value}
)


@dataclass(slots=True)
class _OpenRecord:
    tag: str
    attributes: Attributes
    depth: int
    children: list[NodeElement] = field(default_factory=list[NodeElement])

    def to_node(self, section: RootSection) -> Node:
        children = tuple(self.children)
        if section is RootSection.COLLECTION:
            return TrackNode(tag=self.tag, attributes=self.attributes, children=children)
        return PlaylistNode(tag=self.tag, attributes=self.attributes, children=children)


def _attribute(attributes: Attributes, key: str) -> str | None:
    for name, value in attributes:
        if name == key:
            return value
    return None


class NodeParser:
    """Lazy, forward-only iterator of ``Node`` records.

    Not restartable: once the document end is reached, or an error is raised,
    every further ``next`` call raises ``StopIteration``.
    """

    def __init__(self, events: Iterable[XmlEvent]) -> None:
        self._events: Iterator[XmlEvent] = iter(events)
        self._section = RootSection.NONE
        self._depth = 0
        self._record: _OpenRecord | None = None
        self._exhausted = False
        self.records_emitted = 0

    def __iter__(self) -> NodeParser:
        return self

    def __next__(self) -> Node:
        if self._exhausted:
            raise StopIteration
        try:
            for event in self._events:
                if isinstance(event, EndDocument):
                    break
                node = self._handle(event)
                if node is not None:
                    self.records_emitted += 1
                    return node
            self._finish()
        except CollectionError:
            self.close()
            raise
        self.close()
        raise StopIteration

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def close(self) -> None:
        """Stop parsing and release the underlying event source."""

        self._exhausted = True
        close = getattr(self._events, "close", None)
        if close is not None:
            close()

    # --- state machine -------------------------------------------------------

    def _handle(self, event: XmlEvent) -> Node | None:
        if isinstance(event, StartElement):
            self._on_start(event)
            return None
        if isinstance(event, EndElement):
            return self._on_end(event)
        return None

    def _on_start(self, event: StartElement) -> None:
        if event.name in ROOT_SECTION_TAGS:
            if self._section is not RootSection.NONE:
                raise CollectionStructureError(
                    f"<{event.name}> opened inside the <{self._section}> section"
                )
            log.debug("Entering <%s> section", event.name)
            self._section = RootSection(event.name)
            self._depth = 0
            return

        if self._section is RootSection.NONE:
            return

        self._depth += 1
        if self._record is not None:
            self._record.children.append(NodeElement(tag=event.name, attributes=event.attributes))
            return
        if self._is_record_header(event):
            self._record = _OpenRecord(
                tag=event.name, attributes=event.attributes, depth=self._depth
            )

    def _on_end(self, event: EndElement) -> Node | None:
        if event.name in ROOT_SECTION_TAGS:
            self._close_section(event.name)
            return None

        if self._section is RootSection.NONE:
            return None

        depth = self._depth
        self._depth -= 1
        if depth <= 0:
            raise CollectionStructureError(
                f"</{event.name}> closes an element that was never opened in <{self._section}>"
            )

        record = self._record
        if record is not None and depth == record.depth:
            if event.name != record.tag:
                raise CollectionStructureError(
                    f"</{event.name}> closes record <{record.tag}> in <{self._section}>"
                )
            self._record = None
            return record.to_node(self._section)

        if (
            record is None
            and self._section is RootSection.COLLECTION
            and event.name == TRACK_RECORD_TAG
        ):
            raise CollectionStructureError(f"</{event.name}> without an open record")
        return None

    def _close_section(self, name: str) -> None:
        if self._section.value != name:
            raise CollectionStructureError(
                f"</{name}> does not match the open <{self._section}> section"
            )
        if self._record is not None:
            raise CollectionStructureError(
                f"</{name}> reached with record <{self._record.tag}> still open"
            )
        log.debug("Leaving <%s> section", name)
        self._section = RootSection.NONE
        self._depth = 0

    def _is_record_header(self, event: StartElement) -> bool:
        if self._section is RootSection.COLLECTION:
            return event.name == TRACK_RECORD_TAG
        return (
            event.name == PLAYLIST_RECORD_TAG
            and _attribute(event.attributes, NODE_TYPE_ATTRIBUTE) == PLAYLIST_NODE_TYPE
        )

    def _finish(self) -> None:
        if self._record is not None:
            raise CollectionStructureError(
                f"Document ended with record <{self._record.tag}> still open"
            )


def parse_collection(source: CollectionInput) -> NodeParser:
    """Open ``source`` and return a fresh parser over its records."""

    return NodeParser(iter_xml_events(source))
