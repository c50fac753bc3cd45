"""
Spotify Notify CLI - Entry point

Parses the command line, loads configuration, opens one session bus
connection to the target player and hands off to the command handlers.
"""

import argparse
import sys
from pathlib import Path
from typing import ContextManager, List, Optional

from loguru import logger

from spotify_notify import __version__
from spotify_notify.commands.playback import dispatch
from spotify_notify.context import AppContext
from spotify_notify.core.config import Config, get_log_file_path, load_config
from spotify_notify.core.console import get_console
from spotify_notify.core.exceptions import SpotifyNotifyError
from spotify_notify.core.output import setup_loguru
from spotify_notify.domain.playback.exceptions import BusConnectionError
from spotify_notify.domain.playback.player import PlayerControl
from spotify_notify.domain.playback.resolver import (
    FirstMatch,
    Interactive,
    PlayRequest,
    SearchRequest,
    UriRequest,
)


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="spotify-notify",
        description="Spotify Notify - control MPRIS media players over D-Bus",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Global options
    parser.add_argument(
        "-s",
        "--service-name",
        help=(
            "D-Bus service the commands are sent to "
            "(default: org.mpris.MediaPlayer2.spotify). If changed, play-song "
            "may not work and now-playing might not either"
        ),
    )
    parser.add_argument(
        "--config",
        help="Path to config.toml (default: ~/.config/spotify-notify/config.toml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also print log records to stderr",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    subparsers.add_parser("next", help="Play the next song")
    subparsers.add_parser("previous", help="Play the previous song")
    subparsers.add_parser("play-pause", help="Play/Pause the current song")
    subparsers.add_parser(
        "now-playing", help="Show a notification with the current song"
    )

    play_parser = subparsers.add_parser("play-song", help="Play a song")
    modes = play_parser.add_subparsers(dest="mode", metavar="MODE")
    modes.required = True

    uri_parser = modes.add_parser("uri", help="Play a track URI")
    uri_parser.add_argument("uri", help="A uri in the format of spotify:track:<id>")

    search_parser = modes.add_parser("search", help="Search for a track and play it")
    search_parser.add_argument(
        "query",
        nargs="+",
        help='You get the best success with "search title artist"',
    )
    search_parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="Pick from a list of songs instead of starting the first",
    )
    search_parser.add_argument(
        "-c",
        "--count",
        type=positive_int,
        help="Number of songs listed with --list (default: 5)",
    )

    return parser


def build_play_request(args: argparse.Namespace, config: Config) -> PlayRequest:
    """Translate parsed play-song arguments into a PlayRequest."""
    if args.mode == "uri":
        return UriRequest(args.uri)

    terms = " ".join(args.query)
    if args.list:
        count = args.count or config.search.max_candidates
        return SearchRequest(terms, Interactive(max_candidates=count))
    return SearchRequest(terms, FirstMatch())


def open_player(config: Config) -> ContextManager[PlayerControl]:
    """Open the MPRIS player named in the configuration.

    Raises:
        BusConnectionError: If dbus-python is not installed
    """
    try:
        from spotify_notify.domain.playback.mpris import MprisPlayer
    except ImportError as e:
        raise BusConnectionError(
            config.player.service_name, f"dbus-python is not available ({e})"
        ) from e

    return MprisPlayer(
        service_name=config.player.service_name,
        object_path=config.player.object_path,
        timeout=config.player.timeout_seconds,
    )


def run(argv: Optional[List[str]] = None) -> int:
    """Run one command.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)
    error_console = get_console(stderr=True)

    try:
        config = load_config(Path(args.config).expanduser() if args.config else None)
    except FileNotFoundError as e:
        error_console.print(f"Error: {e}", style="red", markup=False)
        return 1

    if args.service_name:
        config.player.service_name = args.service_name

    setup_loguru(
        get_log_file_path(config),
        level=config.logging.level,
        console_output=config.logging.console_output or args.verbose,
    )
    logger.info(f"Running {args.command} against {config.player.service_name}")

    request = build_play_request(args, config) if args.command == "play-song" else None

    try:
        with open_player(config) as player:
            ctx = AppContext.create(config, player)
            dispatch(ctx, args.command, request)
    except SpotifyNotifyError as e:
        logger.error(f"{args.command} failed: {e}")
        error_console.print(f"Error: {e}", style="red", markup=False)
        return 1
    except (KeyboardInterrupt, EOFError):
        logger.info(f"{args.command} interrupted")
        error_console.print("Aborted", style="red")
        return 1

    return 0


def main() -> None:
    """Main entry point for the spotify-notify command."""
    sys.exit(run())


if __name__ == "__main__":
    main()
