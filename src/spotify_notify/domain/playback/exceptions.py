"""Playback-specific exceptions for error handling."""

from spotify_notify.core.exceptions import SpotifyNotifyError


class PlaybackError(SpotifyNotifyError):
    """Base exception for playback operations."""

    pass


class BusConnectionError(PlaybackError):
    """Raised when the session bus or player service cannot be reached."""

    def __init__(self, service_name: str, reason: str):
        self.service_name = service_name
        super().__init__(f"Cannot connect to {service_name}: {reason}")


class RemoteCallError(PlaybackError):
    """Raised when a player method call or property read fails."""

    def __init__(self, member: str, reason: str):
        self.member = member
        super().__init__(f"{member} failed: {reason}")


class NoTrackFoundError(PlaybackError):
    """Raised when a search returns no candidates.

    This is a normal outcome for the user, not a crash.
    """

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No track found for {query}")


class SelectionInputError(PlaybackError):
    """Raised when the interactive track choice is not a valid index."""

    def __init__(self, raw_input: str, candidate_count: int):
        self.raw_input = raw_input
        self.candidate_count = candidate_count
        super().__init__(
            f"Invalid selection {raw_input!r}: "
            f"expected a number between 0 and {candidate_count - 1}"
        )
