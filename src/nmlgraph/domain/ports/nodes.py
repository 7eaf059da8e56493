"""Ports for reading collection records from a structured document."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

type Attributes = tuple[tuple[str, str], ...]


class NodeKind(StrEnum):
    TRACK = "track"
    PLAYLIST = "playlist"


@dataclass(frozen=True, slots=True)
class NodeElement:
    """A start element nested inside a record, with its own attributes."""

    tag: str
    attributes: Attributes = ()


@dataclass(frozen=True, slots=True)
class _RecordNode:
    tag: str
    attributes: Attributes = ()
    children: tuple[NodeElement, ...] = ()

    KIND: ClassVar[NodeKind]

    @property
    def kind(self) -> NodeKind:
        return self.KIND


@dataclass(frozen=True, slots=True)
class TrackNode(_RecordNode):
    KIND: ClassVar[NodeKind] = NodeKind.TRACK


@dataclass(frozen=True, slots=True)
class PlaylistNode(_RecordNode):
    KIND: ClassVar[NodeKind] = NodeKind.PLAYLIST


type Node = TrackNode | PlaylistNode


@runtime_checkable
class NodeSource(Protocol):
    """Lazy, forward-only sequence of records; exhausted once consumed."""

    def __iter__(self) -> Iterator[Node]: ...

    def __next__(self) -> Node: ...


__all__ = [
    "Attributes",
    "Node",
    "NodeElement",
    "NodeKind",
    "NodeSource",
    "PlaylistNode",
    "TrackNode",
]
