"""Errors raised while reading a collection document."""

from __future__ import annotations


class CollectionError(RuntimeError):
    """Base class for failures that end a collection read."""


class CollectionSourceError(CollectionError):
    """Raised when the underlying document cannot be read or tokenized."""


class CollectionStructureError(CollectionError):
    """Raised when the document's element nesting does not fit the collection layout."""
