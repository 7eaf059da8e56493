"""Collection loading configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from nmlgraph.domain.model.enums import AlbumKeyMode

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_COLLECTION_FILENAME: Final[str] = "collection.nml"
COLLECTION_PATH_VAR: Final[str] = "NMLGRAPH_COLLECTION_PATH"
ALBUM_KEY_VAR: Final[str] = "NMLGRAPH_ALBUM_KEY"


@dataclass(frozen=True, slots=True)
class CollectionConfig:
    path: Path = field(default_factory=lambda: Path(DEFAULT_COLLECTION_FILENAME))
    album_key_mode: AlbumKeyMode = AlbumKeyMode.TITLE

    def resolve_path(self) -> Path:
        return self.path.expanduser().resolve()


def parse_album_key_mode(value: str) -> AlbumKeyMode:
    try:
        return AlbumKeyMode(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(mode.value for mode in AlbumKeyMode)
        raise ConfigurationError(
            f"Invalid album key mode {value!r} (expected one of: {allowed})"
        ) from exc


def get_collection_config() -> CollectionConfig:
    env_path = optional_env_var(COLLECTION_PATH_VAR)
    env_mode = optional_env_var(ALBUM_KEY_VAR)
    path = Path(env_path) if env_path else Path(DEFAULT_COLLECTION_FILENAME)
    mode = parse_album_key_mode(env_mode) if env_mode else AlbumKeyMode.TITLE
    return CollectionConfig(path=path, album_key_mode=mode)
