"""Structural XML events produced from a collection document.

``iter_xml_events`` wraps ``xml.etree.ElementTree.iterparse``. Each element is
cleared and detached from its parent once its end event has been emitted, so
memory stays bounded by the nesting depth rather than the document size.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from contextlib import ExitStack
from dataclasses import dataclass
from os import PathLike, fspath
from typing import IO, TYPE_CHECKING

from .errors import CollectionSourceError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from nmlgraph.domain.ports.nodes import Attributes

type CollectionInput = str | PathLike[str] | IO[bytes]


@dataclass(frozen=True, slots=True)
class StartElement:
    name: str
    attributes: Attributes = ()


@dataclass(frozen=True, slots=True)
class EndElement:
    name: str


@dataclass(frozen=True, slots=True)
class EndDocument:
    pass


type XmlEvent = StartElement | EndElement | EndDocument


def _local_name(tag: str) -> str:
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def _describe(source: CollectionInput) -> str:
    if isinstance(source, (str, PathLike)):
        return fspath(source)
    return getattr(source, "name", "<stream>")


def iter_xml_events(source: CollectionInput) -> Iterator[XmlEvent]:
    """Yield start/end events for ``source`` followed by a single ``EndDocument``.

    Paths are opened here and closed when the generator finishes or is closed;
    file objects are left open for the caller. Tokenizer and I/O failures are
    raised as ``CollectionSourceError``.
    """

    with ExitStack() as stack:
        try:
            if isinstance(source, (str, PathLike)):
                handle: IO[bytes] = stack.enter_context(open(source, "rb"))  # noqa: SIM115
            else:
                handle = source

            open_elements: list[ET.Element] = []
            for event, element in ET.iterparse(handle, events=("start", "end")):
                name = _local_name(element.tag)
                if event == "start":
                    open_elements.append(element)
                    yield StartElement(name=name, attributes=tuple(element.attrib.items()))
                    continue

                open_elements.pop()
                yield EndElement(name=name)
                element.clear()
                if open_elements:
                    open_elements[-1].remove(element)
        except ET.ParseError as exc:
            raise CollectionSourceError(
                f"Malformed collection document {_describe(source)}: {exc}"
            ) from exc
        except OSError as exc:
            raise CollectionSourceError(
                f"Cannot read collection document {_describe(source)}: {exc}"
            ) from exc

    yield EndDocument()
