import argparse
import sys
from typing import List, Optional

from gasmflux.core.config import load_settings
from gasmflux.core.errors import GasmfluxError
from gasmflux.core.logging import get_logger, setup_logging
from gasmflux.core.scraper import SoundgasmClient
from . import ui

logger = get_logger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gasmflux", description="Gasmflux: read metadata from soundgasm.net.")
    parser.add_argument("--debug", action="store_true", help="Enable debug output.")
    parser.add_argument("--config", default="gasmflux.yaml", help="Path to the YAML settings file.")
    commands = parser.add_subparsers(dest="command", required=True)

    info = commands.add_parser("info", help="Show a post's metadata.")
    info.add_argument("url")
    info.add_argument("--plays", action="store_true", help="Also look up the play count.")

    listing = commands.add_parser("list", help="List an uploader's posts.")
    listing.add_argument("name")
    listing.add_argument("--with-audio-url", action="store_true",
                         help="Resolve each post's audio URL (one extra request per post).")

    plays = commands.add_parser("plays", help="Show a post's play count.")
    plays.add_argument("url")

    stats = commands.add_parser("stats", help="Show an uploader's total uploads and plays.")
    stats.add_argument("name")
    return parser

def run(args: argparse.Namespace, client: SoundgasmClient) -> None:
    if args.command == "info":
        item = client.get(args.url)
        if args.plays:
            client.get_play_count(item)
        ui.display_item(item)
    elif args.command == "list":
        uploader = client.get_uploader(args.name)
        ui.display_listing(uploader, client.audios(uploader, with_audio_url=args.with_audio_url),
                           with_audio_url=args.with_audio_url)
    elif args.command == "plays":
        ui.console.print(client.get_play_count_by_url(args.url))
    elif args.command == "stats":
        uploader = client.get_uploader(args.name)
        # Separate fetches; the listing is not cached between the two counts
        ui.display_stats(uploader, client.total_uploads(uploader), client.total_plays(uploader))

def main(argv: Optional[List[str]] = None, client: Optional[SoundgasmClient] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    settings = load_settings(args.config)
    if client is None:
        client = SoundgasmClient.from_settings(settings)

    with client:
        try:
            run(args, client)
        except GasmfluxError as e:
            logger.debug("Command failed", exc_info=True)
            ui.display_error(str(e))
            return 1
    return 0

def start():
    """Function to be called by the entry point."""
    sys.exit(main())
