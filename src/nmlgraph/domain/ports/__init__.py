"""Domain ports."""

from __future__ import annotations

from .nodes import (
    Attributes,
    Node,
    NodeElement,
    NodeKind,
    NodeSource,
    PlaylistNode,
    TrackNode,
)

__all__ = [
    "Attributes",
    "Node",
    "NodeElement",
    "NodeKind",
    "NodeSource",
    "PlaylistNode",
    "TrackNode",
]
