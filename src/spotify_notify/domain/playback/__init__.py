"""Playback domain - MPRIS control and play request resolution.

This domain handles:
- Player actions (next, previous, play/pause, open URI)
- Resolving play requests to playable URIs
- Interactive track selection

The D-Bus adapter lives in ``mpris`` and is imported on demand.
"""

# Player control
from .player import (
    Action,
    OpenUri,
    PlayerAction,
    PlayerControl,
    apply_action,
    get_metadata,
)

# Request resolution
from .resolver import (
    FirstMatch,
    Interactive,
    PlayRequest,
    SearchRequest,
    SelectionMode,
    UriRequest,
    resolve,
    select_track,
)

# Terminal I/O
from .prompt import ConsoleIO, InteractiveIO

# Errors
from .exceptions import (
    BusConnectionError,
    NoTrackFoundError,
    PlaybackError,
    RemoteCallError,
    SelectionInputError,
)

__all__ = [
    # Player
    "Action",
    "OpenUri",
    "PlayerAction",
    "PlayerControl",
    "apply_action",
    "get_metadata",
    # Resolver
    "FirstMatch",
    "Interactive",
    "PlayRequest",
    "SearchRequest",
    "SelectionMode",
    "UriRequest",
    "resolve",
    "select_track",
    # Prompt
    "ConsoleIO",
    "InteractiveIO",
    # Errors
    "BusConnectionError",
    "NoTrackFoundError",
    "PlaybackError",
    "RemoteCallError",
    "SelectionInputError",
]
