"""Pydantic models for the values carried by collection record nodes.

A node is flattened into a plain mapping (attribute lookups on the record and on
its designated child elements) and validated here. Optional numeric fields are
coerced best effort, so only a missing identity or name rejects a record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from nmlgraph.domain.model.primitives import LocationKey

from .fields import attribute, child_attribute, child_with_name, parse_f64, parse_u16
from .report import SkipReason

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nmlgraph.domain.ports.nodes import PlaylistNode, TrackNode

TITLE_ATTRIBUTE: Final[str] = "TITLE"
ARTIST_ATTRIBUTE: Final[str] = "ARTIST"
ALBUM_ELEMENT: Final[str] = "ALBUM"
ALBUM_TRACK_ATTRIBUTE: Final[str] = "TRACK"
LOCATION_ELEMENT: Final[str] = "LOCATION"
VOLUME_ATTRIBUTE: Final[str] = "VOLUME"
DIR_ATTRIBUTE: Final[str] = "DIR"
FILE_ATTRIBUTE: Final[str] = "FILE"
INFO_ELEMENT: Final[str] = "INFO"
PLAYTIME_FLOAT_ATTRIBUTE: Final[str] = "PLAYTIME_FLOAT"
PLAYTIME_ATTRIBUTE: Final[str] = "PLAYTIME"
TEMPO_ELEMENT: Final[str] = "TEMPO"
BPM_ATTRIBUTE: Final[str] = "BPM"

NAME_ATTRIBUTE: Final[str] = "NAME"
PLAYLIST_ELEMENT: Final[str] = "PLAYLIST"
UUID_ATTRIBUTE: Final[str] = "UUID"
REFERENCE_KEY_ATTRIBUTE: Final[str] = "KEY"


class RecordRejected(ValueError):
    """Raised when a record lacks a field it cannot be ingested without."""

    def __init__(self, reason: SkipReason) -> None:
        super().__init__(f"record rejected: {reason}")
        self.reason = reason


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class RecordBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class LocationRecord(RecordBaseModel):
    volume: str
    directory: str
    filename: str

    _normalize_filename = field_validator("filename", mode="before")(_blank_to_none)

    def to_key(self) -> LocationKey:
        return LocationKey(volume=self.volume, directory=self.directory, filename=self.filename)


class TrackRecord(RecordBaseModel):
    location: LocationRecord
    title: str
    artist_name: str | None = None
    album_title: str | None = None
    album_track_number: int | None = None
    duration_seconds: float | None = None
    bpm: float | None = None

    _normalize_text = field_validator("title", "artist_name", "album_title", mode="before")(
        _blank_to_none
    )

    @field_validator("album_track_number", mode="before")
    @classmethod
    def _coerce_u16(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_u16(value)
        return value

    @field_validator("duration_seconds", "bpm", mode="before")
    @classmethod
    def _coerce_f64(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_f64(value)
        return value


class PlaylistRecord(RecordBaseModel):
    name: str
    uuid: str | None = None
    track_keys: tuple[str, ...] = ()

    _normalize_name = field_validator("name", mode="before")(_blank_to_none)
    _normalize_uuid = field_validator("uuid", mode="before")(_blank_to_none)


# Reported in this order when several required fields fail; identity first.
_TRACK_REJECTIONS: Final[tuple[tuple[str, SkipReason], ...]] = (
    ("location", SkipReason.MISSING_LOCATION),
    ("title", SkipReason.MISSING_TITLE),
)
_PLAYLIST_REJECTIONS: Final[tuple[tuple[str, SkipReason], ...]] = (
    ("name", SkipReason.MISSING_NAME),
)


def _rejection_reason(
    exc: ValidationError, precedence: Sequence[tuple[str, SkipReason]]
) -> SkipReason:
    failed = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
    for field_name, reason in precedence:
        if field_name in failed:
            return reason
    return SkipReason.INVALID


def _present(values: dict[str, str | None]) -> dict[str, str]:
    return {key: value for key, value in values.items() if value is not None}


def _location_payload(node: TrackNode) -> dict[str, str] | None:
    location = child_with_name(node, LOCATION_ELEMENT)
    if location is None:
        return None
    return _present(
        {
            "volume": attribute(location, VOLUME_ATTRIBUTE),
            "directory": attribute(location, DIR_ATTRIBUTE),
            "filename": attribute(location, FILE_ATTRIBUTE),
        }
    )


def track_record_from_node(node: TrackNode) -> TrackRecord:
    """Validate a track node, raising ``RecordRejected`` if it cannot become a Track."""

    duration = child_attribute(node, INFO_ELEMENT, PLAYTIME_FLOAT_ATTRIBUTE)
    if duration is None:
        duration = child_attribute(node, INFO_ELEMENT, PLAYTIME_ATTRIBUTE)

    payload: dict[str, object] = dict(
        _present(
            {
                "title": attribute(node, TITLE_ATTRIBUTE),
                "artist_name": attribute(node, ARTIST_ATTRIBUTE),
                "album_title": child_attribute(node, ALBUM_ELEMENT, TITLE_ATTRIBUTE),
                "album_track_number": child_attribute(node, ALBUM_ELEMENT, ALBUM_TRACK_ATTRIBUTE),
                "duration_seconds": duration,
                "bpm": child_attribute(node, TEMPO_ELEMENT, BPM_ATTRIBUTE),
            }
        )
    )
    location = _location_payload(node)
    if location is not None:
        payload["location"] = location

    try:
        return TrackRecord.model_validate(payload)
    except ValidationError as exc:
        raise RecordRejected(_rejection_reason(exc, _TRACK_REJECTIONS)) from exc


def playlist_record_from_node(node: PlaylistNode) -> PlaylistRecord:
    """Validate a playlist node, raising ``RecordRejected`` if it has no usable name."""

    track_keys: list[str] = []
    for child in node.children:
        key = attribute(child, REFERENCE_KEY_ATTRIBUTE)
        if key is not None:
            track_keys.append(key)

    payload: dict[str, object] = dict(
        _present(
            {
                "name": attribute(node, NAME_ATTRIBUTE),
                "uuid": child_attribute(node, PLAYLIST_ELEMENT, UUID_ATTRIBUTE),
            }
        )
    )
    payload["track_keys"] = tuple(track_keys)

    try:
        return PlaylistRecord.model_validate(payload)
    except ValidationError as exc:
        raise RecordRejected(_rejection_reason(exc, _PLAYLIST_REJECTIONS)) from exc
