"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from nmlgraph.adapters.nml import parse_collection
from nmlgraph.config import get_collection_config
from nmlgraph.domain.ingest_pipeline import IngestResult, build_collection

if TYPE_CHECKING:
    from nmlgraph.config import CollectionConfig
    from nmlgraph.domain.model import AlbumKeyMode


log = getLogger(__name__)


def load_collection(
    path: str | Path | None = None,
    *,
    config: CollectionConfig | None = None,
    album_key_mode: AlbumKeyMode | None = None,
) -> IngestResult:
    """Parse a collection document and build its entity graph in one pass.

    Explicit arguments win over ``config``; without either, configuration comes
    from the environment. Source and structure errors propagate as
    ``CollectionError`` subclasses.
    """

    active_config = config or get_collection_config()
    source = Path(path).expanduser() if path is not None else active_config.resolve_path()
    mode = album_key_mode or active_config.album_key_mode
    log.info("Loading collection: path=%s, album_key_mode=%s", source, mode)

    parser = parse_collection(source)
    try:
        result = build_collection(parser, album_key_mode=mode)
    finally:
        parser.close()

    summary = result.collection.summary()
    log.info(
        f"Finished loading collection: tracks={summary.tracks}, artists={summary.artists}, "
        f"albums={summary.albums}, playlists={summary.playlists}, "
        f"skipped={result.report.skipped_count}"
    )
    return result
