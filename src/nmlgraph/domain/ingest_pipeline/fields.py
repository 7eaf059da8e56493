"""Attribute and child-element lookups over record nodes.

All functions are pure. Numeric coercion is best effort: a value that does not
parse becomes ``None`` instead of an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from nmlgraph.domain.model.primitives import U16_MAX

if TYPE_CHECKING:
    from nmlgraph.domain.ports.nodes import Attributes, Node, NodeElement


class HasAttributes(Protocol):
    @property
    def attributes(self) -> Attributes: ...


def attribute(element: HasAttributes, key: str) -> str | None:
    """Return the first attribute named ``key`` on a node or child element."""

    for name, value in element.attributes:
        if name == key:
            return value
    return None


def child_with_name(node: Node, tag: str) -> NodeElement | None:
    """Return the first child element named ``tag`` in document order."""

    for child in node.children:
        if child.tag == tag:
            return child
    return None


def child_attribute(node: Node, tag: str, key: str) -> str | None:
    child = child_with_name(node, tag)
    if child is None:
        return None
    return attribute(child, key)


def parse_u16(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        number = int(value.strip(), 10)
    except ValueError:
        return None
    if not 0 <= number <= U16_MAX:
        return None
    return number


def parse_f64(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value.strip())
    except ValueError:
        return None
