"""Application context for explicit state passing.

Bundles what a command handler needs for one invocation: configuration,
the player control collaborator, the search function and terminal I/O.
"""

from dataclasses import dataclass, field
from functools import partial
from typing import Optional

from spotify_notify.core.config import Config
from spotify_notify.domain.library.providers.spotify.api import search_tracks
from spotify_notify.domain.playback.player import PlayerControl
from spotify_notify.domain.playback.prompt import ConsoleIO, InteractiveIO
from spotify_notify.domain.playback.resolver import SearchFn


@dataclass(frozen=True)
class AppContext:
    """Immutable context passed to every command handler.

    Attributes:
        config: Application configuration
        player: Control collaborator for the target MPRIS player
        search: Track search function (query -> tracks)
        io: Terminal collaborator for interactive selection
    """

    config: Config
    player: PlayerControl
    search: SearchFn
    io: InteractiveIO = field(default_factory=ConsoleIO)

    @classmethod
    def create(
        cls,
        config: Config,
        player: PlayerControl,
        io: Optional[InteractiveIO] = None,
    ) -> "AppContext":
        """Create a context wired to the configured search endpoint."""
        search = partial(
            search_tracks,
            endpoint=config.search.endpoint,
            timeout=config.search.timeout_seconds,
        )
        return cls(
            config=config,
            player=player,
            search=search,
            io=io or ConsoleIO(),
        )
