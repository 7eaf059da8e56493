"""Public interface for the NML collection adapter."""

from __future__ import annotations

from .errors import CollectionError, CollectionSourceError, CollectionStructureError
from .events import EndDocument, EndElement, StartElement, XmlEvent, iter_xml_events
from .parser import NodeParser, RootSection, parse_collection

__all__ = [
    "CollectionError",
    "CollectionSourceError",
    "CollectionStructureError",
    "EndDocument",
    "EndElement",
    "NodeParser",
    "RootSection",
    "StartElement",
    "XmlEvent",
    "iter_xml_events",
    "parse_collection",
]
