from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from nmlgraph.adapters.nml import CollectionError
from nmlgraph.app import load_collection
from nmlgraph.config import ConfigurationError, configure_logging
from nmlgraph.domain.model import AlbumKeyMode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from nmlgraph.domain.ingest_pipeline import IngestResult

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load a Traktor NML collection into a graph")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output, including every skipped record",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    load = subparsers.add_parser("load", help="Parse a collection and report what was loaded")
    load.add_argument(
        "path",
        nargs="?",
        help="Path to the collection .nml file (defaults to config)",
    )
    load.add_argument(
        "--album-key",
        type=str,
        choices=[mode.value for mode in AlbumKeyMode],
        help="How albums are deduplicated (defaults to config)",
    )
    load.add_argument(
        "--show-skipped",
        action="store_true",
        help="Log a line per skipped record",
    )

    return parser.parse_args(list(argv))


def _log_result(result: IngestResult, *, show_skipped: bool) -> None:
    summary = result.collection.summary()
    report = result.report
    log.info("tracks:    %s", summary.tracks)
    log.info("artists:   %s", summary.artists)
    log.info("albums:    %s", summary.albums)
    log.info("playlists: %s", summary.playlists)
    if report.unresolved_playlist_entries:
        log.info("unresolved playlist entries: %s", report.unresolved_playlist_entries)
    for reason, count in sorted(report.skipped_by_reason().items()):
        log.info("skipped (%s): %s", reason, count)
    if show_skipped:
        for skipped in report.skipped:
            log.info("skipped %s record #%s: %s", skipped.kind, skipped.index, skipped.reason)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO, force=True)

    album_key_mode = AlbumKeyMode(parsed_args.album_key) if parsed_args.album_key else None

    try:
        if parsed_args.command == "load":
            result = load_collection(parsed_args.path, album_key_mode=album_key_mode)
            _log_result(result, show_skipped=parsed_args.show_skipped)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (CollectionError, ConfigurationError, ValueError):
        log.exception("Fatal error while loading collection")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
