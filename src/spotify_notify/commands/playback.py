"""
Playback command handlers for Spotify Notify.

Handles: next, previous, play-pause, now-playing, play-song
"""

from typing import Callable, Dict, Optional

from loguru import logger

from spotify_notify import notifications
from spotify_notify.context import AppContext
from spotify_notify.core.console import safe_print
from spotify_notify.core.output import log
from spotify_notify.domain.library import extract_metadata, format_artists
from spotify_notify.domain.library.models import TrackMetadata
from spotify_notify.domain.playback import (
    NoTrackFoundError,
    OpenUri,
    PlayerAction,
    PlayRequest,
    apply_action,
    get_metadata,
    resolve,
)


def handle_next_command(ctx: AppContext) -> None:
    """Skip to the next track."""
    apply_action(ctx.player, PlayerAction.NEXT)


def handle_previous_command(ctx: AppContext) -> None:
    """Go back to the previous track."""
    apply_action(ctx.player, PlayerAction.PREVIOUS)


def handle_play_pause_command(ctx: AppContext) -> None:
    """Toggle between playing and paused."""
    apply_action(ctx.player, PlayerAction.PLAY_PAUSE)


def format_now_playing(metadata: TrackMetadata) -> str:
    """One-line now-playing summary for the terminal."""
    artists = format_artists(metadata.artists)
    return f"{metadata.title} by {artists} on {metadata.album}"


def handle_now_playing_command(ctx: AppContext) -> TrackMetadata:
    """Show the current track as a desktop notification.

    Falls back to printing the track when notifications are disabled or
    notify-send is unavailable.

    Returns:
        The extracted metadata
    """
    metadata = extract_metadata(
        get_metadata(ctx.player),
        artwork_default=ctx.config.notifications.fallback_artwork_url,
    )
    logger.info(f"Now playing: {format_now_playing(metadata)}")

    shown = False
    if ctx.config.notifications.enabled:
        shown = notifications.notify_now_playing(
            metadata, app_name=ctx.config.notifications.app_name
        )

    if not shown:
        safe_print(format_now_playing(metadata))

    return metadata


def handle_play_song_command(ctx: AppContext, request: PlayRequest) -> bool:
    """Resolve a play request and start playback.

    Args:
        ctx: Application context
        request: Literal URI or search request

    Returns:
        True if playback was requested, False if the search found nothing
    """
    try:
        uri = resolve(request, ctx.search, ctx.io)
    except NoTrackFoundError as e:
        log(str(e))
        return False

    apply_action(ctx.player, OpenUri(uri))
    return True


SIMPLE_COMMANDS: Dict[str, Callable[[AppContext], None]] = {
    "next": handle_next_command,
    "previous": handle_previous_command,
    "play-pause": handle_play_pause_command,
}


def dispatch(
    ctx: AppContext, command: str, request: Optional[PlayRequest] = None
) -> None:
    """Route a parsed CLI command to its handler.

    Args:
        ctx: Application context
        command: Subcommand name (next, previous, play-pause, now-playing, play-song)
        request: Play request, required for play-song

    Raises:
        ValueError: For an unknown command or a play-song without a request
    """
    logger.debug(f"Dispatching {command!r}")

    if command in SIMPLE_COMMANDS:
        SIMPLE_COMMANDS[command](ctx)
    elif command == "now-playing":
        handle_now_playing_command(ctx)
    elif command == "play-song":
        if request is None:
            raise ValueError("play-song requires a play request")
        handle_play_song_command(ctx, request)
    else:
        raise ValueError(f"Unknown command: {command}")
